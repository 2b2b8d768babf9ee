"""
Simple JSON file storage with in-memory caching

- A single JSON document holds every collection (admin, clients, programs, tickets, recipes)
- Every mutation is load-mutate-save of the whole document
- In-memory write-through cache avoids re-reading an unchanged file
- A process-wide lock serializes read-modify-write cycles
- Easy to migrate to SQL/NoSQL later by replacing these functions
"""
import json
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Iterator, Optional

from pydantic import ValidationError

from app.core import config
from app.database.cache import get_document_cache
from app.database.schemas import AdminCredential, Document

logger = logging.getLogger(__name__)

_write_lock = RLock()


class DocumentError(Exception):
    """
    The database file exists but cannot be parsed or validated

    Raised instead of falling back to an empty document so the file is never
    overwritten with lost data.
    """


def read_json(filepath: Path) -> Optional[Dict[str, Any]]:
    """
    Read JSON file, return None if not found

    Raises DocumentError if the file is not valid JSON
    """
    path = Path(filepath)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        return None
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON document {path}: {e}")
        raise DocumentError(f"database file {path} is not valid JSON") from e


def write_json(filepath: Path, data: Dict[str, Any]):
    """
    Write data to JSON file (temp file + rename so readers never see a partial write)
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + '.tmp')
    with open(tmp_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    os.replace(tmp_path, path)


def default_document() -> Document:
    """
    Empty document with the configured admin credential
    """
    return Document(
        admin=AdminCredential(username=config.ADMIN_USERNAME, password=config.ADMIN_PASSWORD),
    )


def init_db():
    """
    Create the document with empty collections if absent and make sure
    the uploads directory exists
    """
    db_path = Path(config.DB_PATH)
    with _write_lock:
        if not db_path.exists():
            logger.info(f"Creating new database at {db_path}")
            save_db(default_document())

    try:
        Path(config.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.exception(f"Failed to create upload directory {config.UPLOAD_DIR}")


def load_db() -> Document:
    """
    Load the whole document

    Uses the in-memory cache while the file is unchanged. Returns a private
    copy, so callers may mutate it freely before passing it to save_db.
    Raises DocumentError if the file is corrupt; it is left untouched on disk.
    """
    db_path = Path(config.DB_PATH)
    cache = get_document_cache()
    cache_key = str(db_path)

    try:
        mtime = db_path.stat().st_mtime_ns
    except FileNotFoundError:
        logger.warning(f"Database file not found at {db_path}, creating new")
        init_db()
        mtime = db_path.stat().st_mtime_ns

    # Check cache first
    cached = cache.get(cache_key, mtime)
    if cached is not None:
        return cached

    # Cache miss - read from file
    data = read_json(db_path)
    if data is None:
        # Removed between stat and open
        logger.warning(f"Database file {db_path} disappeared, starting from an empty document")
        return default_document()
    try:
        document = Document.model_validate(data)
    except ValidationError as e:
        logger.error(f"Database file {db_path} does not match the document schema: {e}")
        raise DocumentError(f"database file {db_path} is invalid") from e
    cache.set(cache_key, document, mtime)
    logger.debug(
        f"Database loaded from disk: {len(document.clients)} clients, {len(document.programs)} programs, "
        f"{len(document.tickets)} tickets, {len(document.recipes)} recipes"
    )
    return document


def save_db(document: Document):
    """
    Persist the whole document and update the cache
    """
    db_path = Path(config.DB_PATH)
    cache = get_document_cache()
    with _write_lock:
        write_json(db_path, document.model_dump(mode="json", by_alias=True))
        cache.set(str(db_path), document, db_path.stat().st_mtime_ns)
    logger.debug("Database saved successfully")


def locked():
    """
    Store lock for callers that decide themselves whether to save
    """
    return _write_lock


@contextmanager
def transaction() -> Iterator[Document]:
    """
    Load-mutate-save under the store lock

    The document is written back only if the block finishes without raising,
    so a handler that bails out with a 404 leaves the file untouched.
    """
    with locked():
        document = load_db()
        yield document
        save_db(document)
