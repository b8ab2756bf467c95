"""Declarative base and columns shared by every table."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class LocationOwned:
    """Columns of a category table: surrogate id, owning location, insert time."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    @declared_attr
    def location_id(cls) -> Mapped[int]:
        return mapped_column(
            Integer, ForeignKey("locations.id"), nullable=False, index=True,
        )
