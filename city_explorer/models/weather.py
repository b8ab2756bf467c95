"""Weather model: daily forecast summaries."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer.models.base import Base, LocationOwned


class Weather(LocationOwned, Base):
    __tablename__ = "weathers"

    forecast: Mapped[str | None] = mapped_column(Text)
    time: Mapped[str] = mapped_column(String(32), nullable=False)
