"""
Storage Entry Model
===================

A single key/value row. The procedure history is one JSON blob under one
key, rewritten in full on every change; there are no per-record rows.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampMixin


class StorageEntry(Base, TimestampMixin):

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
