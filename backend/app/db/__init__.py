from app.db.base import Base, TimestampMixin
from app.db.session import async_session_maker, close_db, engine, get_db, init_db

__all__ = [
    "Base",
    "TimestampMixin",
    "engine",
    "async_session_maker",
    "get_db",
    "init_db",
    "close_db",
]
