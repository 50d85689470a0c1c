import os
import tempfile

# La configuración se lee al importar la app: apuntarla a una carpeta temporal
_session_dir = tempfile.mkdtemp(prefix="tree-hazard-")
os.environ.setdefault("REPORTS_FILE", os.path.join(_session_dir, "reports.json"))
os.environ.setdefault("UPLOADS_DIR", os.path.join(_session_dir, "uploads"))

import pytest
from fastapi.testclient import TestClient

from tree_hazard.config.database import ReportStore
from tree_hazard.dependencies.storage import get_report_store, get_upload_storage
from tree_hazard.main import app
from tree_hazard.uploads import UploadStorage


@pytest.fixture
def store(tmp_path):
    return ReportStore(str(tmp_path / "reports.json"))


@pytest.fixture
def uploads(tmp_path):
    return UploadStorage(str(tmp_path / "uploads"))


@pytest.fixture
def client(store, uploads):
    app.dependency_overrides[get_report_store] = lambda: store
    app.dependency_overrides[get_upload_storage] = lambda: uploads
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def photo():
    return {"photo": ("tree.jpg", b"\xff\xd8\xff\xe0fake-jpeg-bytes", "image/jpeg")}
