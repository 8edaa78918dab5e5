"""
Helpers for naming media objects and turning object keys into public URLs.

Media keys have the form ``<category>/<epoch-ms>-<filename>``, e.g.
``movies/1718000000000-poster.jpg``. Public URLs use the virtual-hosted
bucket form ``https://<bucket>.s3.amazonaws.com/<key>``.
"""
import time
from typing import Optional


def path_to_filename(path: str) -> str:
    """
    Extract filename from a path, handling both Windows \\ and Unix / separators.

    Examples:
    - D:/path/to/file.jpg -> file.jpg
    - /path/to/file.jpg  -> file.jpg
    - file.jpg           -> file.jpg
    """
    if not path:
        return ""

    normalized = path.replace("\\", "/")
    return normalized.split("/")[-1]


def build_media_key(category: str, filename: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Build the object key an upload is stored under.

    Only the last path component of ``filename`` is kept so a client cannot
    choose a different prefix.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    category = category.strip("/")
    return f"{category}/{timestamp_ms}-{path_to_filename(filename)}"


def public_object_url(bucket: str, key: str) -> str:
    """Public location of ``key`` in ``bucket``."""
    return f"https://{bucket}.s3.amazonaws.com/{key.lstrip('/')}"
