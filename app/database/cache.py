"""
In-memory document cache for the storage layer
Reduces file I/O by keeping the last loaded document per file
"""
from typing import Dict, Optional, Tuple
from threading import Lock

from app.database.schemas import Document


class DocumentCache:
    """
    Thread-safe write-through cache keyed by file path

    Entries are tagged with the file's modification time; a file changed
    behind our back (different mtime) is treated as a miss.
    """
    def __init__(self):
        self._cache: Dict[str, Tuple[Document, int]] = {}
        self._lock = Lock()

    def get(self, key: str, mtime: int) -> Optional[Document]:
        """Get a private copy of the cached document if still fresh"""
        with self._lock:
            if key in self._cache:
                document, cached_mtime = self._cache[key]
                if cached_mtime == mtime:
                    return document.model_copy(deep=True)
                else:
                    # Stale, remove it
                    del self._cache[key]
            return None

    def set(self, key: str, document: Document, mtime: int):
        """Store a copy so later caller mutations don't leak into the cache"""
        with self._lock:
            self._cache[key] = (document.model_copy(deep=True), mtime)

    def invalidate(self, key: str):
        """Remove key from cache"""
        with self._lock:
            if key in self._cache:
                del self._cache[key]

    def clear(self):
        """Clear all cache entries"""
        with self._lock:
            self._cache.clear()


# Global cache instance
_document_cache = DocumentCache()


def get_document_cache() -> DocumentCache:
    return _document_cache
