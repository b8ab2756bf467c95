"""Trail model (Hiking Project)."""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer.models.base import Base, LocationOwned


class Trail(LocationOwned, Base):
    __tablename__ = "trails"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str | None] = mapped_column(Text)
    length: Mapped[float | None] = mapped_column(Float)
    stars: Mapped[float | None] = mapped_column(Float)
    star_votes: Mapped[int | None] = mapped_column(Integer)
    summary: Mapped[str | None] = mapped_column(Text)
    trail_url: Mapped[str | None] = mapped_column(Text)
    conditions: Mapped[str | None] = mapped_column(Text)
    condition_date: Mapped[str | None] = mapped_column(String(32))
