"""
Shared fixtures: every test gets its own database file, public root and uploads directory
"""
import pytest
from fastapi.testclient import TestClient

from app.core import config
from app.database.cache import get_document_cache
from app.database import storage as database
from app.main import app


@pytest.fixture
def temp_data_dir(tmp_path, monkeypatch):
    """Point the store, public root and uploads at a temporary directory"""
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    monkeypatch.setattr(config, "DB_PATH", tmp_path / "database.json")
    monkeypatch.setattr(config, "PUBLIC_DIR", public_dir)
    monkeypatch.setattr(config, "UPLOAD_DIR", public_dir / "uploads")
    get_document_cache().clear()
    database.init_db()

    yield tmp_path

    get_document_cache().clear()


@pytest.fixture
def client(temp_data_dir):
    """Test client"""
    return TestClient(app)
