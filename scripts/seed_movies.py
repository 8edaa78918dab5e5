"""Seed the catalog database with the sample movies.

Run with the virtualenv activated:
python scripts/seed_movies.py
"""
from movie_catalog.core.config import settings
from movie_catalog.database.database import CatalogStore
from movie_catalog.database import models
from movie_catalog.database.seed import build_seed_movies


def seed():
    # connecting creates the table if needed and only seeds an empty table
    store = CatalogStore(settings.DATABASE_URL, seed_movies=build_seed_movies(settings.S3_BUCKET_NAME))
    if not store.acquire():
        print("Database not reachable; nothing seeded.")
        return

    try:
        with store.session() as db:
            print(f"Catalog now has {db.query(models.Movie).count()} movie(s).")
    finally:
        store.dispose()


if __name__ == '__main__':
    seed()
