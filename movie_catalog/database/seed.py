"""Sample movies served when the catalog database is unavailable.

The same rows are inserted into an empty catalog table on first connection.
"""
from typing import Any, Dict, List, Tuple

from movie_catalog.utils.media_url import public_object_url

# (id, title, genre, rating, duration, description, media slug)
_SAMPLES: Tuple[Tuple[int, str, str, float, str, str, str], ...] = (
    (1, "Quantum Nexus", "sci-fi", 4.8, "142 min",
     "A mind-bending journey through parallel dimensions", "quantum-nexus"),
    (2, "Shadow Protocol", "action", 4.5, "128 min",
     "Elite agents face their greatest challenge", "shadow-protocol"),
    (3, "The Last Symphony", "drama", 4.7, "156 min",
     "A musician's final masterpiece", "last-symphony"),
    (4, "Cosmic Comedy Club", "comedy", 4.2, "98 min",
     "Laughs from across the galaxy", "cosmic-comedy"),
    (5, "Digital Phantom", "thriller", 4.6, "134 min",
     "Reality and virtuality collide", "digital-phantom"),
    (6, "Neon Nights", "action", 4.4, "118 min",
     "Cyberpunk adventure in Neo-Tokyo", "neon-nights"),
)

SEED_YEAR = 2024


def build_seed_movies(bucket: str) -> Tuple[Dict[str, Any], ...]:
    """Return the six sample movies with media URLs pointing into ``bucket``."""
    movies: List[Dict[str, Any]] = []
    for movie_id, title, genre, rating, duration, description, slug in _SAMPLES:
        movies.append({
            "id": movie_id,
            "title": title,
            "year": SEED_YEAR,
            "genre": genre,
            "rating": rating,
            "duration": duration,
            "description": description,
            "poster_url": public_object_url(bucket, f"posters/{slug}.jpg"),
            "trailer_url": public_object_url(bucket, f"trailers/{slug}.mp4"),
        })
    return tuple(movies)
