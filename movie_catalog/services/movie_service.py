"""
Movie query resolver.

Every read tries the catalog database first and, when it cannot be reached,
answers from the in-memory seed movies with the same filter/sort/paginate
rules. Writes go to the database only.
"""
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar
from sqlalchemy.orm import Session
from movie_catalog.database import models, schemas
from movie_catalog.database.database import CatalogStore
from movie_catalog.exceptions import (
    MovieNotFound,
    MovieValidationError,
    StoreUnavailable,
    UpstreamError,
)
from movie_catalog.services.movie_query import (
    apply_filters,
    build_movie_query,
    order_by_rating,
    sort_by_rating,
)
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks "the database could not answer" as distinct from an empty answer
_UNAVAILABLE = object()


class MovieService:
    def __init__(self, store: CatalogStore, seed_movies: Sequence[Dict[str, Any]]):
        self.store = store
        self.seed_movies = tuple(dict(m) for m in seed_movies)

    # -------------------------
    # source selection
    # -------------------------
    def _from_store(self, operation: str, fn: Callable[[Session], T]):
        """Run ``fn`` in a store session; return _UNAVAILABLE on any store failure."""
        try:
            with self.store.session() as db:
                return fn(db)
        except StoreUnavailable as e:
            logger.warning(f"⚠ {operation}: database unavailable, using in-memory data ({e})")
            return _UNAVAILABLE

    def _seed_by_id(self, movie_id: int) -> Optional[Dict[str, Any]]:
        for movie in self.seed_movies:
            if movie["id"] == movie_id:
                return dict(movie)
        return None

    # -------------------------
    # reads
    # -------------------------
    def list_movies(self, params: schemas.MovieListParams) -> Dict[str, Any]:
        def query(db: Session):
            if db.query(models.Movie.id).first() is None:
                return None
            rows = build_movie_query(
                db, params.genre, params.search, params.limit, params.offset
            ).all()
            return [m.to_dict() for m in rows]

        movies = self._from_store("list_movies", query)
        if movies is _UNAVAILABLE or movies is None:
            if movies is None:
                logger.info("Catalog table is empty, using in-memory data")
            movies = apply_filters(
                self.seed_movies, params.genre, params.search, params.limit, params.offset
            )

        return {
            "movies": movies,
            "total": len(movies),
            "page": params.page,
            "limit": params.limit,
        }

    def get_movie(self, movie_id: int) -> Dict[str, Any]:
        def query(db: Session):
            m = db.query(models.Movie).filter(models.Movie.id == movie_id).first()
            return m.to_dict() if m is not None else None

        movie = self._from_store("get_movie", query)
        if movie is _UNAVAILABLE:
            movie = self._seed_by_id(movie_id)
        # a reachable database without the row is a miss; the seed set is not consulted
        if movie is None:
            raise MovieNotFound()
        return movie

    def trending(self, params: schemas.TrendingParams) -> List[Dict[str, Any]]:
        def query(db: Session):
            rows = order_by_rating(db.query(models.Movie)).limit(params.limit).all()
            return [m.to_dict() for m in rows]

        movies = self._from_store("trending", query)
        if movies is _UNAVAILABLE or not movies:
            movies = [dict(m) for m in sort_by_rating(self.seed_movies)[:params.limit]]
        return movies

    def recommendations(self, movie_id: int, params: schemas.RecommendationParams) -> Dict[str, Any]:
        def query(db: Session):
            base = db.query(models.Movie).filter(models.Movie.id == movie_id).first()
            if base is None:
                return None
            rows = (
                order_by_rating(
                    db.query(models.Movie).filter(
                        models.Movie.genre == base.genre,
                        models.Movie.id != movie_id,
                    )
                )
                .limit(params.limit)
                .all()
            )
            return {
                "recommendations": [m.to_dict() for m in rows],
                "basedOn": base.title,
                "genre": base.genre,
            }

        result = self._from_store("recommendations", query)
        if result is _UNAVAILABLE:
            base = self._seed_by_id(movie_id)
            if base is None:
                raise MovieNotFound()
            same_genre = [
                m for m in self.seed_movies
                if m["genre"] == base["genre"] and m["id"] != movie_id
            ]
            result = {
                "recommendations": [dict(m) for m in sort_by_rating(same_genre)[:params.limit]],
                "basedOn": base["title"],
                "genre": base["genre"],
            }
        if result is None:
            raise MovieNotFound()
        return result

    def genres(self) -> List[str]:
        def query(db: Session):
            rows = (
                db.query(models.Movie.genre)
                .distinct()
                .filter(models.Movie.genre.isnot(None))
                .order_by(models.Movie.genre)
                .all()
            )
            return [row[0] for row in rows]

        genres = self._from_store("genres", query)
        # an empty catalog answers with no genres
        if genres is _UNAVAILABLE:
            genres = sorted({m["genre"] for m in self.seed_movies})
        return genres

    # -------------------------
    # writes
    # -------------------------
    def create_movie(self, payload: schemas.MovieCreate) -> int:
        if not payload.title or not payload.genre:
            raise MovieValidationError("Title and genre are required")

        movie = models.Movie(**payload.model_dump())
        try:
            with self.store.session() as db:
                db.add(movie)
                db.flush()
                new_id = movie.id
        except StoreUnavailable as e:
            logger.error(f"Failed to add movie '{payload.title}': {e.message}")
            raise UpstreamError(e.message) from e

        logger.info(f"🎬 Movie added successfully: {payload.title} (ID={new_id})")
        return new_id
