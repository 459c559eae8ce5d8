"""Process-wide entity store.

One ``Storage`` is built per application and handed to request handlers via
``app.state``; nothing in the package keeps a module-level instance.
"""
import threading
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Iterator, Optional
import anyio
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import DATABASE_URL, SEED_SAMPLE_DATA
from app.database import Base
from app.logger import get_logger

# Imported for their side effect of registering tables on Base.metadata
from app.models import (  # noqa: F401
    ai_conversation_model,
    ai_persona_model,
    ai_setting_model,
    availability_model,
    booking_model,
    message_model,
    service_addon_model,
    service_model,
    user_model,
)
from app.utils.seed import seed_sample_data

logger = get_logger(__name__)

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str):
    if url in IN_MEMORY_URLS:
        # One shared connection, or every session would see its own empty database
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


class Storage:
    def __init__(self, url: Optional[str] = None, seed: Optional[bool] = None):
        self.url = url or DATABASE_URL
        self.engine = build_engine(self.url)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )
        # Queued requests wait on the event loop, never on a worker thread
        self._request_lock = anyio.Lock()
        # Direct callers (seeding, scripts, tests) outside the request path
        self._lock = threading.Lock()

        Base.metadata.create_all(bind=self.engine)

        if seed is None:
            seed = SEED_SAMPLE_DATA
        if seed:
            with self.session() as db:
                seed_sample_data(db)
            logger.info("Storage seeded with sample data")

    @contextmanager
    def session(self) -> Iterator[Session]:
        with self._lock:
            db = self.SessionLocal()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    @asynccontextmanager
    async def request_session(self) -> AsyncIterator[Session]:
        """Session held for one whole request, so each read-modify-write runs alone"""
        async with self._request_lock:
            db = self.SessionLocal()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def dispose(self) -> None:
        self.engine.dispose()
