"""
Configuration tests
"""
import importlib

from app.core import config


def test_upload_dir_follows_public_dir(tmp_path, monkeypatch):
    """Uploads always sit under the public root so attachment URLs resolve"""
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path / "site"))
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "elsewhere"))
    try:
        importlib.reload(config)
        assert config.UPLOAD_DIR == tmp_path / "site" / "uploads"
        assert config.UPLOAD_URL_PREFIX == "/uploads/"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
