"""Pydantic models served to callers: one canonical shape per category.

Records are built from ORM rows (``from_attributes``) whether they were
just persisted or read back on a cache hit, so both paths serve the same
shape. Internal columns (row id, location_id, created_at) are not exposed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ═══════════════ LOCATION ═══════════════

class LocationRecord(Record):
    id: int
    search_query: str
    formatted_query: str
    latitude: float
    longitude: float


# ═══════════════ CATEGORY RECORDS ═══════════════

class WeatherRecord(Record):
    forecast: str | None = None
    time: str


class BusinessRecord(Record):
    name: str
    rating: float | None = None
    price: str | None = None
    url: str | None = None
    image_url: str | None = None


class MovieRecord(Record):
    title: str
    overview: str | None = None
    average_votes: float | None = None
    total_votes: int | None = None
    popularity: float | None = None
    released_on: str | None = None
    image_url: str | None = None


class MeetupRecord(Record):
    link: str | None = None
    name: str
    creation_date: str | None = None
    host: str | None = None


class TrailRecord(Record):
    name: str
    location: str | None = None
    length: float | None = None
    stars: float | None = None
    star_votes: int | None = None
    summary: str | None = None
    trail_url: str | None = None
    conditions: str | None = None
    condition_date: str | None = None
