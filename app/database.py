from datetime import timezone
from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy import DateTime
from sqlalchemy.orm import Session, declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """Stores instants as naive UTC and hands them back timezone-aware"""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        # Naive input is taken to be UTC already
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


async def get_db(request: Request) -> AsyncGenerator[Session, None]:
    storage = request.app.state.storage
    async with storage.request_session() as db:
        yield db
