# movie_catalog/routers/health.py
from fastapi import APIRouter, Depends
from movie_catalog.database.database import CatalogStore
from movie_catalog.deps import get_catalog_store, get_media_store
from movie_catalog.services.media_service import MediaStore

router = APIRouter(tags=["health"])


@router.get("/health")
def health(
    store: CatalogStore = Depends(get_catalog_store),
    media: MediaStore = Depends(get_media_store),
):
    """
    Informational only: reports whether the catalog database handle is held
    and which bucket media goes to. Never connects or writes.
    """
    return {
        "status": "OK",
        "service": "Movie Backend",
        "database": "Connected" if store.connected else "Disconnected",
        "s3_bucket": media.bucket,
    }
