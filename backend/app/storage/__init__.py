from app.storage.base import StoragePort
from app.storage.memory import InMemoryStorage
from app.storage.sql import SqlStorage

__all__ = [
    "StoragePort",
    "InMemoryStorage",
    "SqlStorage",
]
