"""
Catalog store lifecycle: acquisition, lazy re-acquisition, bootstrap seeding.
"""

import threading
import time

import pytest
from sqlalchemy import text

from movie_catalog.database import database, models
from movie_catalog.database.database import CatalogStore
from movie_catalog.database.schemas import MovieCreate, MovieListParams
from movie_catalog.exceptions import StoreUnavailable


def movie_count(store):
    with store.session() as db:
        return db.query(models.Movie).count()


def test_unreachable_store_reports_disconnected(unreachable_store):
    assert unreachable_store.acquire() is False
    assert unreachable_store.connected is False
    with pytest.raises(StoreUnavailable):
        with unreachable_store.session():
            pass


def test_store_is_reacquired_lazily(tmp_path):
    db_dir = tmp_path / "later"
    store = CatalogStore(f"sqlite:///{db_dir / 'catalog.db'}")
    assert store.acquire() is False

    db_dir.mkdir()
    with store.session() as db:
        assert db.execute(text("SELECT 1")).scalar() == 1
    assert store.connected is True
    store.dispose()
    assert store.connected is False


def test_late_database_is_bootstrapped_on_first_use(tmp_path, seed_movies, service_for):
    db_dir = tmp_path / "later"
    store = CatalogStore(f"sqlite:///{db_dir / 'catalog.db'}", seed_movies=seed_movies)
    assert store.acquire() is False

    db_dir.mkdir()
    service = service_for(store)

    # first use after the database comes up creates and seeds the table
    result = service.list_movies(MovieListParams(genre="action"))
    assert [m["title"] for m in result["movies"]] == ["Shadow Protocol", "Neon Nights"]
    assert all("created_at" in m for m in result["movies"])

    new_id = service.create_movie(MovieCreate(title="Orbit", genre="sci-fi"))
    assert new_id == 7
    assert movie_count(store) == 7
    store.dispose()


def test_connecting_seeds_empty_table_once(tmp_path, seed_movies):
    url = f"sqlite:///{tmp_path / 'catalog.db'}"
    store = CatalogStore(url, seed_movies=seed_movies)
    assert store.acquire()
    assert store.acquire()
    store.dispose()

    # a second process start against the same database does not seed again
    store = CatalogStore(url, seed_movies=seed_movies)
    with store.session() as db:
        rows = db.query(models.Movie).order_by(models.Movie.id).all()
        assert [r.title for r in rows] == [m["title"] for m in seed_movies]
        assert [r.id for r in rows] == [1, 2, 3, 4, 5, 6]
        assert rows[0].created_at is not None
    store.dispose()


def test_connecting_leaves_existing_rows_alone(tmp_path, seed_movies):
    url = f"sqlite:///{tmp_path / 'catalog.db'}"
    store = CatalogStore(url)
    with store.session() as db:
        db.add(models.Movie(title="Only One", genre="drama"))
    store.dispose()

    store = CatalogStore(url, seed_movies=seed_movies)
    assert movie_count(store) == 1
    store.dispose()


def test_empty_seed_set_creates_empty_table(empty_store):
    assert movie_count(empty_store) == 0


def test_concurrent_first_acquire_builds_one_engine(tmp_path, monkeypatch):
    real_create_engine = database.create_engine
    built = []

    def slow_create_engine(*args, **kwargs):
        built.append(args[0])
        time.sleep(0.05)
        return real_create_engine(*args, **kwargs)

    monkeypatch.setattr(database, "create_engine", slow_create_engine)
    store = CatalogStore(
        f"sqlite:///{tmp_path / 'catalog.db'}", connect_args={"check_same_thread": False}
    )

    start = threading.Barrier(8)
    results = []

    def first_request():
        start.wait()
        results.append(store.acquire())

    threads = [threading.Thread(target=first_request) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [True] * 8
    assert len(built) == 1
    store.dispose()


def test_query_errors_become_store_unavailable(empty_store):
    with pytest.raises(StoreUnavailable):
        with empty_store.session() as db:
            db.execute(text("SELECT * FROM no_such_table"))
