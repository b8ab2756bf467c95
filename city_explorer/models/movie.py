"""Movie model (TMDB search results)."""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer.models.base import Base, LocationOwned


class Movie(LocationOwned, Base):
    __tablename__ = "movies"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    overview: Mapped[str | None] = mapped_column(Text)
    average_votes: Mapped[float | None] = mapped_column(Float)
    total_votes: Mapped[int | None] = mapped_column(Integer)
    popularity: Mapped[float | None] = mapped_column(Float)
    released_on: Mapped[str | None] = mapped_column(String(32))
    image_url: Mapped[str | None] = mapped_column(Text)
