"""
Utility modules for the application
"""
from .media_url import (
    build_media_key,
    path_to_filename,
    public_object_url,
)

__all__ = [
    'build_media_key',
    'path_to_filename',
    'public_object_url',
]
