"""
Pytest Configuration and Fixtures

Shared fixtures for all tests: catalog stores in three states (seeded,
empty, unreachable), a fake S3 client, and a factory for API test clients.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from movie_catalog.database import models  # noqa: F401  (registers the movies table)
from movie_catalog.database.database import CatalogStore
from movie_catalog.database.seed import build_seed_movies
from movie_catalog.main import create_app
from movie_catalog.services.media_service import MediaStore
from movie_catalog.services.movie_service import MovieService

BUCKET = "test-bucket"


class FakeS3Client:
    """Records calls the way boto3's S3 client would receive them."""

    def __init__(self, error=None):
        self.error = error
        self.uploads = []
        self.deleted = []

    def upload_fileobj(self, fileobj, bucket, key, ExtraArgs=None):
        if self.error is not None:
            raise self.error
        self.uploads.append({
            "bucket": bucket,
            "key": key,
            "body": fileobj.read(),
            "extra": ExtraArgs or {},
        })

    def delete_object(self, Bucket, Key):
        if self.error is not None:
            raise self.error
        self.deleted.append((Bucket, Key))
        return {}


@pytest.fixture
def seed_movies():
    return build_seed_movies(BUCKET)


@pytest.fixture
def memory_store_factory():
    """In-memory SQLite stores shared across threads through a single connection."""
    stores = []

    def _make(seed_movies=()):
        store = CatalogStore(
            "sqlite://",
            seed_movies=seed_movies,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        stores.append(store)
        return store

    yield _make

    for store in stores:
        store.dispose()


@pytest.fixture
def memory_store(memory_store_factory, seed_movies):
    """Seeds itself on first connection."""
    return memory_store_factory(seed_movies)


@pytest.fixture
def seeded_store(memory_store):
    assert memory_store.acquire()
    return memory_store


@pytest.fixture
def empty_store(memory_store_factory):
    store = memory_store_factory()
    assert store.acquire()
    return store


@pytest.fixture
def unreachable_store(tmp_path, seed_movies):
    # SQLite cannot create a database file inside a missing directory
    return CatalogStore(f"sqlite:///{tmp_path / 'missing' / 'catalog.db'}", seed_movies=seed_movies)


@pytest.fixture
def service_for(seed_movies):
    def _make(store):
        return MovieService(store, seed_movies)
    return _make


@pytest.fixture
def fake_s3():
    return FakeS3Client()


@pytest.fixture
def client_for(fake_s3):
    """Build a TestClient (lifespan started) around the given catalog store."""
    clients = []

    def _make(store, s3_client=None):
        media = MediaStore(BUCKET, "us-east-1", client=s3_client or fake_s3)
        client = TestClient(create_app(store=store, media=media))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def healthy_client(client_for, memory_store):
    return client_for(memory_store)


@pytest.fixture
def offline_client(client_for, unreachable_store):
    return client_for(unreachable_store)
