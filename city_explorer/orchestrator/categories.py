"""Category definitions: table, served shape and normalizer per data type."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from city_explorer.models import Business, Meetup, Movie, Trail, Weather
from city_explorer.models.base import Base
from city_explorer.orchestrator.schemas import (
    BusinessRecord,
    MeetupRecord,
    MovieRecord,
    Record,
    TrailRecord,
    WeatherRecord,
)
from city_explorer.services.normalizers import (
    normalize_business,
    normalize_meetup,
    normalize_movie,
    normalize_trail,
    normalize_weather,
)


@dataclass(frozen=True)
class Category:
    name: str
    model: type[Base]
    schema: type[Record]
    normalize: Callable[[dict[str, Any]], Record]


WEATHER = Category("weather", Weather, WeatherRecord, normalize_weather)
YELP = Category("yelp", Business, BusinessRecord, normalize_business)
MOVIES = Category("movies", Movie, MovieRecord, normalize_movie)
MEETUPS = Category("meetups", Meetup, MeetupRecord, normalize_meetup)
TRAILS = Category("trails", Trail, TrailRecord, normalize_trail)

CATEGORIES: dict[str, Category] = {
    c.name: c for c in (WEATHER, YELP, MOVIES, MEETUPS, TRAILS)
}
