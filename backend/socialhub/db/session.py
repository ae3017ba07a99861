import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns one engine (and its connection pool) plus the session factory bound to it.

    Built once at process start by the application lifespan, or by the caller
    and handed to ``create_app``; closed with :meth:`dispose` on shutdown.
    """

    def __init__(self, url: str, pool_size: int = 10, max_overflow: int = 10, echo: bool = False):
        self.url = url
        url_lower = url.lower()

        engine_kwargs = {"pool_pre_ping": True, "echo": echo}
        if url_lower.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # In-memory databases only live as long as their connection
            if ":memory:" in url_lower or url_lower in ("sqlite://", "sqlite+pysqlite://"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_size"] = pool_size
            engine_kwargs["max_overflow"] = max_overflow
            if "postgres" in url_lower:
                # Set client encoding to UTF-8 for PostgreSQL connections
                engine_kwargs["connect_args"] = {"client_encoding": "UTF8"}

        self.engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that is rolled back on error and always closed."""
        db = self.session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_all(self) -> None:
        # Models register themselves on Base.metadata when imported
        import socialhub.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def health_check(self) -> bool:
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database health check failed: %s", e)
            return False

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connection pool closed")


def get_db(request: Request) -> Iterator[Session]:
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
