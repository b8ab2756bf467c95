"""Business listing model (Yelp)."""

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from city_explorer.models.base import Base, LocationOwned


class Business(LocationOwned, Base):
    __tablename__ = "yelps"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[float | None] = mapped_column(Float)
    price: Mapped[str | None] = mapped_column(String(8))
    url: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column(Text)
