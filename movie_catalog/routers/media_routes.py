# movie_catalog/routers/media_routes.py
import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse
from movie_catalog.core.config import settings
from movie_catalog.database import schemas
from movie_catalog.deps import get_media_store
from movie_catalog.services.media_service import MediaStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Media"])


# -------------------------
# POST /upload  (multipart field "media")
# -------------------------
@router.post("/upload", response_model=schemas.UploadResponse)
def upload_media(
    media: Optional[UploadFile] = File(None),
    category: Optional[str] = Form(None),
    store: MediaStore = Depends(get_media_store),
):
    if media is None or not media.filename:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "No file uploaded"},
        )

    stored = store.upload(
        media.file,
        media.filename,
        category or settings.MEDIA_DEFAULT_CATEGORY,
        content_type=media.content_type,
    )
    return {"message": "File uploaded successfully", "url": stored["url"], "key": stored["key"]}


# -------------------------
# DELETE /s3/{key}  (key may contain "/")
# -------------------------
@router.delete("/s3/{key:path}", response_model=schemas.MessageResponse)
def delete_media(key: str, store: MediaStore = Depends(get_media_store)):
    store.delete(key)
    return {"message": "File deleted successfully"}
