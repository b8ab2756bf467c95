"""SQLAlchemy ORM models."""

from city_explorer.models.base import Base
from city_explorer.models.business import Business
from city_explorer.models.location import Location
from city_explorer.models.meetup import Meetup
from city_explorer.models.movie import Movie
from city_explorer.models.trail import Trail
from city_explorer.models.weather import Weather

__all__ = ["Base", "Location", "Weather", "Business", "Movie", "Meetup", "Trail"]
