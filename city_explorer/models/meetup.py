"""Meetup event model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer.models.base import Base, LocationOwned


class Meetup(LocationOwned, Base):
    __tablename__ = "meetups"

    link: Mapped[str | None] = mapped_column(Text)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    creation_date: Mapped[str | None] = mapped_column(String(32))
    host: Mapped[str | None] = mapped_column(Text)
