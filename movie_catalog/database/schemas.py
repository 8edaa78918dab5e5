# movie_catalog/database/schemas.py
# =========================================================
# 🧩 Movie Catalog Schemas (Pydantic v2 Compatible)
# =========================================================

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


# =========================================================
# 🔎 Query parameters, one model per read operation
# =========================================================
class MovieListParams(BaseModel):
    genre: Optional[str] = None
    search: Optional[str] = None
    limit: int = Field(20, ge=1)
    offset: int = Field(0, ge=0)

    @property
    def page(self) -> int:
        return self.offset // self.limit + 1


class TrendingParams(BaseModel):
    limit: int = Field(6, ge=0)


class RecommendationParams(BaseModel):
    limit: int = Field(4, ge=0)


# =========================================================
# 🎬 Movie Schemas
# =========================================================
class MovieCreate(BaseModel):
    # title and genre are checked by the service so a missing value is a 400,
    # not a request-validation 422
    title: Optional[str] = None
    genre: Optional[str] = None
    year: Optional[int] = None
    rating: Optional[float] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None


class MovieResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    year: Optional[int] = None
    genre: Optional[str] = None
    rating: Optional[float] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None


class MovieListResponse(BaseModel):
    movies: List[Dict[str, Any]]
    total: int
    page: int
    limit: int


class MovieCreatedResponse(BaseModel):
    message: str = "Movie added successfully"
    id: int


class RecommendationsResponse(BaseModel):
    recommendations: List[Dict[str, Any]]
    basedOn: str
    genre: Optional[str] = None


# =========================================================
# 📦 Media Schemas
# =========================================================
class UploadResponse(BaseModel):
    message: str = "File uploaded successfully"
    url: str
    key: str


class MessageResponse(BaseModel):
    message: str
