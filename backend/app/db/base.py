"""Declarative base and shared columns for the storage tables."""

from datetime import datetime
from sqlalchemy import DateTime, func, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):

    def __repr__(self) -> str:
        pk = ", ".join(
            f"{column.key}={getattr(self, column.key)!r}"
            for column in inspect(type(self)).primary_key
        )
        return f"<{self.__class__.__name__}({pk})>"


class TimestampMixin:
    """Server-side creation and last-write times; a rewritten key bumps updated_at."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
