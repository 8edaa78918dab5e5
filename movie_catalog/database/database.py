import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from movie_catalog.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

# Base model for all ORM classes
Base = declarative_base()


class CatalogStore:
    """
    Process-wide handle on the relational catalog.

    Lifecycle: ``acquire()`` at startup, ``dispose()`` at shutdown. If the
    first acquisition fails the handle stays empty and the next ``session()``
    call tries again. The first successful acquisition creates the movies
    table if needed and inserts ``seed_movies`` into an empty table.
    """

    def __init__(self, url: str, seed_movies: Sequence[Dict[str, Any]] = (), **engine_kwargs):
        self.url = url
        self.seed_movies = tuple(dict(m) for m in seed_movies)
        self._engine_kwargs = engine_kwargs
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._bootstrapped = False
        self._lock = threading.Lock()
        self.last_error: Optional[str] = None

    @property
    def connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Optional[Engine]:
        return self._engine

    def acquire(self) -> bool:
        """Create the engine, verify it answers and bootstrap the table. Returns False on failure."""
        if self._engine is not None and self._bootstrapped:
            return True

        with self._lock:
            if self._engine is None:
                engine = None
                try:
                    engine = create_engine(self.url, **self._engine_kwargs)
                    with engine.connect() as conn:
                        conn.execute(text("SELECT 1"))
                except SQLAlchemyError as e:
                    self.last_error = str(e)
                    logger.warning(f"❌ Database connection failed: {e}")
                    if engine is not None:
                        engine.dispose()
                    return False

                self._engine = engine
                self.last_error = None
                self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
                logger.info("✅ Connected to catalog database")

            if not self._bootstrapped:
                self._bootstrapped = self._bootstrap()
        return True

    def _bootstrap(self) -> bool:
        """
        Create the catalog table if needed and insert the seed movies into an
        empty table. Failures leave the service running on in-memory data.
        """
        # models must be imported so the table is registered on Base.metadata
        from movie_catalog.database import models

        db = None
        try:
            Base.metadata.create_all(bind=self._engine)
            db = self._session_factory()
            if db.query(models.Movie).count() == 0 and self.seed_movies:
                for movie in self.seed_movies:
                    fields = {k: v for k, v in movie.items() if k != "id"}
                    db.add(models.Movie(**fields))
                db.commit()
                logger.info("✅ Sample movies added to catalog database")
            return True
        except SQLAlchemyError as e:
            if db is not None:
                db.rollback()
            logger.warning(f"⚠️ Database initialization error: {e}")
            logger.warning("Using in-memory data instead")
            return False
        finally:
            if db is not None:
                db.close()

    def dispose(self) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
                logger.info("✓ Catalog database connection closed")
            self._engine = None
            self._session_factory = None
            self._bootstrapped = False

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Yield a session bound to the shared engine.

        Commits on clean exit. Any SQLAlchemy failure (including failing to
        connect) is re-raised as StoreUnavailable.
        """
        if not self.acquire():
            raise StoreUnavailable(self.last_error or "Database not available")

        db = self._session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreUnavailable(str(e)) from e
        finally:
            db.close()
