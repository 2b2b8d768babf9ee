"""
Storage tests - document initialization, loading, saving and transactions
"""
import json

import pytest

from app.core import config
from app.database import storage as database
from app.database.cache import DocumentCache, get_document_cache
from app.database.schemas import Program


def test_init_db_creates_document(temp_data_dir):
    with open(config.DB_PATH, 'r', encoding='utf-8') as f:
        data = json.load(f)

    assert data == {
        "admin": {"username": "admin", "password": "admin123"},
        "clients": [],
        "programs": [],
        "tickets": [],
        "recipes": [],
    }
    assert config.UPLOAD_DIR.is_dir()


def test_init_db_keeps_existing_document(temp_data_dir):
    db = database.load_db()
    db.programs.append(Program(id="p1", title="Mobility"))
    database.save_db(db)

    database.init_db()

    assert [p.id for p in database.load_db().programs] == ["p1"]


def test_load_db_missing_collections(temp_data_dir):
    """Documents written before recipes existed still load"""
    database.write_json(config.DB_PATH, {
        "admin": {"username": "coach", "password": "pw"},
        "clients": [],
        "programs": [],
        "tickets": [],
    })
    get_document_cache().clear()

    db = database.load_db()
    assert db.admin.username == "coach"
    assert db.recipes == []


def test_load_db_returns_private_copy(temp_data_dir):
    db = database.load_db()
    db.programs.append(Program(id="p1", title="Unsaved"))

    assert database.load_db().programs == []


def test_load_db_recreates_missing_file(temp_data_dir):
    config.DB_PATH.unlink()

    db = database.load_db()

    assert db.clients == []
    assert config.DB_PATH.exists()


def test_transaction_saves_on_success(temp_data_dir):
    with database.transaction() as db:
        db.programs.append(Program(id="p1", title="Strength"))

    with open(config.DB_PATH, 'r', encoding='utf-8') as f:
        saved = json.load(f)
    assert saved["programs"] == [{"id": "p1", "title": "Strength", "description": "", "image": None}]


def test_transaction_discards_on_error(temp_data_dir):
    with pytest.raises(RuntimeError):
        with database.transaction() as db:
            db.programs.append(Program(id="p1", title="Strength"))
            raise RuntimeError("abort")

    assert database.load_db().programs == []


def test_document_cache_detects_stale_entries():
    cache = DocumentCache()
    document = database.default_document()

    cache.set("db.json", document, mtime=1)
    assert cache.get("db.json", mtime=1) == document
    assert cache.get("db.json", mtime=1) is not document
    assert cache.get("db.json", mtime=2) is None
    # Stale entry was dropped
    assert cache.get("db.json", mtime=1) is None


def test_load_db_corrupt_file_is_left_alone(temp_data_dir):
    """A file that is not valid JSON raises and is never replaced"""
    corrupt = b'{"admin": {"username": "admin", "password": "s3cret"}, "recipes": [],}'
    config.DB_PATH.write_bytes(corrupt)
    get_document_cache().clear()

    with pytest.raises(database.DocumentError):
        database.load_db()
    with pytest.raises(database.DocumentError):
        with database.transaction() as db:
            db.programs.append(Program(id="p1", title="Lost"))

    assert config.DB_PATH.read_bytes() == corrupt


def test_load_db_schema_mismatch(temp_data_dir):
    database.write_json(config.DB_PATH, {"clients": "not a list"})
    get_document_cache().clear()

    with pytest.raises(database.DocumentError):
        database.load_db()
