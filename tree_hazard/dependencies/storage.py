from tree_hazard.config.database import ReportStore, reports_store
from tree_hazard.config.settings import UPLOADS_DIR
from tree_hazard.uploads import UploadStorage

upload_storage = UploadStorage(UPLOADS_DIR)

async def get_report_store() -> ReportStore:
    return reports_store

async def get_upload_storage() -> UploadStorage:
    return upload_storage
