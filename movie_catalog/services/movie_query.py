"""
Filter / order / paginate pipeline for movie lists.

``apply_filters`` works on plain movie dicts (the in-memory seed set) and
``build_movie_query`` produces the equivalent SQLAlchemy query. For the same
arguments both return the same movies in the same order:

- ``genre`` other than ``None``/``""``/``"all"`` keeps exact matches only
- ``search`` keeps movies whose title or description contains the term,
  ignoring case; ``%`` and ``_`` in the term are literal
- order is rating descending, unrated movies last, ties by id ascending
- ``offset``/``limit`` are applied last
"""
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from movie_catalog.database import models

ALL_GENRES = "all"
LIKE_ESCAPE = "\\"


def genre_filter_active(genre: Optional[str]) -> bool:
    return bool(genre) and genre != ALL_GENRES


def rating_sort_key(movie: Dict[str, Any]):
    rating = movie.get("rating")
    return (rating is None, -(rating or 0), movie.get("id") or 0)


def sort_by_rating(movies: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(movies, key=rating_sort_key)


def _matches_search(movie: Dict[str, Any], term: str) -> bool:
    title = (movie.get("title") or "").lower()
    description = (movie.get("description") or "").lower()
    return term in title or term in description


def apply_filters(
    movies: Iterable[Dict[str, Any]],
    genre: Optional[str] = None,
    search: Optional[str] = None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> List[Dict[str, Any]]:
    """Filter, order and slice ``movies``. Returns new dict copies."""
    result = list(movies)

    if genre_filter_active(genre):
        result = [m for m in result if m.get("genre") == genre]

    if search:
        term = search.lower()
        result = [m for m in result if _matches_search(m, term)]

    result = sort_by_rating(result)

    end = None if limit is None else offset + limit
    return [dict(m) for m in result[offset:end]]


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def order_by_rating(query: Query) -> Query:
    # portable "NULLS LAST" for engines without that syntax
    return query.order_by(
        models.Movie.rating.is_(None),
        models.Movie.rating.desc(),
        models.Movie.id.asc(),
    )


def build_movie_query(
    db: Session,
    genre: Optional[str] = None,
    search: Optional[str] = None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> Query:
    """Store-side counterpart of ``apply_filters``."""
    query = db.query(models.Movie)

    if genre_filter_active(genre):
        query = query.filter(models.Movie.genre == genre)

    if search:
        pattern = f"%{escape_like(search)}%"
        query = query.filter(
            or_(
                models.Movie.title.ilike(pattern, escape=LIKE_ESCAPE),
                models.Movie.description.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )

    query = order_by_rating(query)

    if limit is not None:
        query = query.limit(limit)
    if offset:
        query = query.offset(offset)
    return query
