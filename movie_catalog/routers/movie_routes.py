# movie_catalog/routers/movie_routes.py
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query, status
from movie_catalog.database import schemas
from movie_catalog.deps import get_movie_service
from movie_catalog.services.movie_service import MovieService

# Router: DO NOT include "/api" here — main.py mounts this router under "/api"
router = APIRouter(tags=["Movies"])


def list_params(
    genre: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    limit: int = Query(20, ge=1),
    offset: int = Query(0, ge=0),
) -> schemas.MovieListParams:
    return schemas.MovieListParams(genre=genre, search=search, limit=limit, offset=offset)


# -------------------------
# GET /movies
# -------------------------
@router.get("/movies", response_model=schemas.MovieListResponse)
def list_movies(
    params: schemas.MovieListParams = Depends(list_params),
    service: MovieService = Depends(get_movie_service),
):
    return service.list_movies(params)


# -------------------------
# POST /movies
# -------------------------
@router.post(
    "/movies",
    response_model=schemas.MovieCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_movie(
    movie: schemas.MovieCreate,
    service: MovieService = Depends(get_movie_service),
):
    new_id = service.create_movie(movie)
    return {"message": "Movie added successfully", "id": new_id}


# -------------------------
# GET /movies/trending
# must be registered before /movies/{movie_id}
# -------------------------
@router.get("/movies/trending")
def trending_movies(
    limit: int = Query(6, ge=0),
    service: MovieService = Depends(get_movie_service),
) -> List[Dict[str, Any]]:
    return service.trending(schemas.TrendingParams(limit=limit))


# -------------------------
# GET /movies/{movie_id}
# -------------------------
@router.get("/movies/{movie_id}", response_model=schemas.MovieResponse)
def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    return service.get_movie(movie_id)


# -------------------------
# GET /recommendations/{movie_id}
# -------------------------
@router.get("/recommendations/{movie_id}", response_model=schemas.RecommendationsResponse)
def recommendations(
    movie_id: int,
    limit: int = Query(4, ge=0),
    service: MovieService = Depends(get_movie_service),
):
    return service.recommendations(movie_id, schemas.RecommendationParams(limit=limit))


# -------------------------
# GET /genres
# -------------------------
@router.get("/genres")
def list_genres(service: MovieService = Depends(get_movie_service)) -> List[str]:
    return service.genres()
