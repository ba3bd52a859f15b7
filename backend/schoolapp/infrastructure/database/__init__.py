from .base import Base, TimestampMixin
from .session import engine, async_session_factory, get_db_session

__all__ = [
    "Base",
    "TimestampMixin",
    "engine",
    "async_session_factory",
    "get_db_session",
]
