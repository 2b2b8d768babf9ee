"""
Static file resolution for the public directory
"""
import posixpath
from pathlib import Path
from typing import Optional

INDEX_DOCUMENT = "index.html"

CONTENT_TYPES = {
    '.html': 'text/html',
    '.css': 'text/css',
    '.js': 'application/javascript',
    '.json': 'application/json',
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.svg': 'image/svg+xml',
    '.gif': 'image/gif',
    '.pdf': 'application/pdf',
}
DEFAULT_CONTENT_TYPE = 'application/octet-stream'


def resolve_static_path(url_path: str, root: Path) -> Optional[Path]:
    """
    Map a request path to a file under the public root

    Args:
        url_path: Request path, e.g. "/css/site.css" ("/" maps to index.html)
        root: Public directory

    Returns:
        Path of an existing file inside root, or None for missing files,
        directories and anything escaping the root.
    """
    if url_path in ('', '/'):
        url_path = '/' + INDEX_DOCUMENT
    safe_path = posixpath.normpath(url_path).lstrip('/')
    root = Path(root).resolve()
    file_path = (root / safe_path).resolve()
    if file_path != root and root not in file_path.parents:
        return None
    if not file_path.is_file():
        return None
    return file_path


def guess_content_type(path: Path) -> str:
    return CONTENT_TYPES.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)
