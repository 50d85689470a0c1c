import os

from fastapi import APIRouter
from fastapi.responses import FileResponse

from tree_hazard.config.settings import PUBLIC_DIR

router = APIRouter()

# Página principal
@router.get("/", include_in_schema=False)
async def index_page():
    return FileResponse(os.path.join(PUBLIC_DIR, "index.html"))

# Página del formulario de reporte
@router.get("/report", include_in_schema=False)
async def report_page():
    return FileResponse(os.path.join(PUBLIC_DIR, "report.html"))
