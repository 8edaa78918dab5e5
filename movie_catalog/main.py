# movie_catalog/main.py
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_catalog.core.config import settings
from movie_catalog.database.database import CatalogStore
from movie_catalog.database.seed import build_seed_movies
from movie_catalog.exceptions import CatalogError
from movie_catalog.services.media_service import MediaStore
from movie_catalog.services.movie_service import MovieService

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# Lifespan events (startup/shutdown)
@asynccontextmanager
async def lifespan(app: FastAPI):
    store: CatalogStore = app.state.catalog_store
    logger.info(f"🚀 {settings.PROJECT_NAME} starting")
    logger.info(f"📦 S3 Bucket: {app.state.media_store.bucket}")

    # Database init (non-fatal): connects, creates and seeds the table; reads fall back to the seed movies
    if not store.acquire():
        logger.warning("⚠️ Database not available, using in-memory data")

    yield

    store.dispose()
    logger.info("✅ Graceful shutdown complete")


def create_app(
    store: Optional[CatalogStore] = None,
    media: Optional[MediaStore] = None,
) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Backend APIs for the movie catalog",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    media = media or MediaStore(settings.S3_BUCKET_NAME, settings.AWS_REGION)
    seed_movies = build_seed_movies(media.bucket)
    store = store or CatalogStore(settings.DATABASE_URL, seed_movies=seed_movies)
    app.state.media_store = media
    app.state.catalog_store = store
    app.state.movie_service = MovieService(store, seed_movies)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error bodies are {"error": <message>}; upstream failure text is passed through as-is
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    # --- Register routers under the /api prefix the frontend expects ---
    from movie_catalog.routers import health, media_routes, movie_routes

    app.include_router(health.router)
    app.include_router(movie_routes.router, prefix="/api")
    app.include_router(media_routes.router, prefix="/api")

    @app.get("/")
    def root():
        return {"message": "🎬 Movie Catalog API is running successfully!"}

    return app


app = create_app()
