# movie_catalog/deps.py
from fastapi import Request

from movie_catalog.database.database import CatalogStore
from movie_catalog.services.media_service import MediaStore
from movie_catalog.services.movie_service import MovieService


def get_movie_service(request: Request) -> MovieService:
    return request.app.state.movie_service


def get_catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store


def get_media_store(request: Request) -> MediaStore:
    return request.app.state.media_store
