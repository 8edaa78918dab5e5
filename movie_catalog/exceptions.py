"""
Error types raised by the catalog services.

Each error carries the HTTP status it maps to; main.py registers a single
handler that renders them as ``{"error": <message>}``.
"""


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MovieNotFound(CatalogError):
    status_code = 404

    def __init__(self, message: str = "Movie not found"):
        super().__init__(message)


class MovieValidationError(CatalogError):
    status_code = 400


class StoreUnavailable(CatalogError):
    """Catalog store could not be reached or a query against it failed."""
    status_code = 503


class UpstreamError(CatalogError):
    """A write or media operation failed; message is the raw upstream text."""
    status_code = 500
