"""Shared test fixtures and configuration."""

import asyncio
import os

import pytest

# No real provider keys during tests
for _key in ("GEOCODE_API_KEY", "WEATHER_API_KEY", "YELP_API_KEY", "MOVIEDB_API_KEY", "MEETUP_API_KEY", "TRAIL_API_KEY"):
    os.environ.setdefault(_key, "test-key")

from city_explorer.database import Database  # noqa: E402
from city_explorer.orchestrator.schemas import LocationRecord  # noqa: E402


class FakeProvider:
    """Stands in for a provider client; counts calls and can block or fail."""

    def __init__(self, records=None, error: Exception | None = None, gate: asyncio.Event | None = None):
        self.records = records or []
        self.error = error
        self.gate = gate
        self.calls = 0

    async def fetch_raw(self, location):
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def fake_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite database with every table created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'city_explorer.db'}")
    assert await db.connect()
    yield db
    await db.close()


@pytest.fixture
def seattle_geocode():
    """Google Geocoding response for "98101"."""
    return {
        "results": [
            {
                "formatted_address": "Seattle, WA 98101, USA",
                "geometry": {"location": {"lat": 47.6062, "lng": -122.3321}},
                "place_id": "ChIJ-bfVTh8VkFQRDZLQnmioK9s",
            },
        ],
        "status": "OK",
    }


@pytest.fixture
def seattle_location():
    """A location already persisted with id=1 (persist it first where a row is needed)."""
    return LocationRecord(
        id=1,
        search_query="98101",
        formatted_query="Seattle, WA 98101, USA",
        latitude=47.6,
        longitude=-122.3,
    )


@pytest.fixture
def sample_darksky_days():
    """Three entries of a Dark Sky daily.data block."""
    return [
        {"time": 1540425600, "summary": "Rain in the morning.", "icon": "rain"},
        {"time": 1540512000, "summary": "Mostly cloudy throughout the day.", "icon": "cloudy"},
        {"time": 1540598400, "summary": "Clear throughout the day.", "icon": "clear-day"},
    ]


@pytest.fixture
def sample_yelp_businesses():
    return [
        {
            "name": "Pike Place Chowder",
            "rating": 4.5,
            "price": "$$",
            "url": "https://www.yelp.com/biz/pike-place-chowder-seattle",
            "image_url": "https://s3-media1.fl.yelpcdn.com/bphoto/ijju-wYoRAxWjHPTCxyQGQ/o.jpg",
        },
        {
            "name": "Biscuit Bitch",
            "rating": 4.0,
            "url": "https://www.yelp.com/biz/biscuit-bitch-seattle",
            "image_url": "https://s3-media2.fl.yelpcdn.com/bphoto/example/o.jpg",
        },
    ]


@pytest.fixture
def sample_tmdb_results():
    return [
        {
            "title": "Sleepless in Seattle",
            "overview": "A recently widowed man's son calls a radio talk-show.",
            "vote_average": 6.6,
            "vote_count": 1740,
            "popularity": 11.3,
            "release_date": "1993-06-24",
            "poster_path": "/afkYP15OeUOD0tFEmj6VvejuOcz.jpg",
        },
        {
            "title": "Seattle Superstorm",
            "overview": "A mysterious storm hits Seattle.",
            "vote_average": 3.9,
            "vote_count": 12,
            "popularity": 1.2,
            "release_date": "",
            "poster_path": None,
        },
    ]


@pytest.fixture
def sample_meetup_events():
    return [
        {
            "event_url": "https://www.meetup.com/seattle-python/events/255000001/",
            "name": "Python Project Night",
            "created": 1540425600,
            "group": {"name": "Seattle Python Meetup"},
        },
    ]


@pytest.fixture
def sample_trails():
    return [
        {
            "name": "Discovery Park Loop Trail",
            "location": "Seattle, Washington",
            "length": 2.8,
            "stars": 4.4,
            "starVotes": 58,
            "summary": "A beautiful loop around the park's meadows and bluffs.",
            "url": "https://www.hikingproject.com/trail/7021093/discovery-park-loop-trail",
            "conditionStatus": "All Clear",
            "conditionDate": "2018-10-20 09:14:00",
        },
        {
            "name": "Wilderness Peak",
            "location": "Issaquah, Washington",
            "length": 4.1,
            "stars": 4.0,
            "starVotes": 20,
            "summary": "Forest climb in Cougar Mountain park.",
            "url": "https://www.hikingproject.com/trail/7000002/wilderness-peak",
            "conditionStatus": "Unknown",
            "conditionDate": "1970-01-01 00:00:00",
        },
    ]
