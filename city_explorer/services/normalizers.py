"""Raw provider record -> canonical record, one function per category.

Pure and total over well-formed input: providers reject malformed bodies
before records get here, and absent optional fields map to None.
"""

from datetime import datetime, timezone
from typing import Any

from city_explorer.orchestrator.schemas import (
    BusinessRecord,
    MeetupRecord,
    MovieRecord,
    TrailRecord,
    WeatherRecord,
)

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p/w370_and_h556_bestv2/"
MILLISECONDS_THRESHOLD = 1e11


def date_string(timestamp: float | int) -> str:
    """Unix seconds -> "Wed Oct 18 2026" (UTC, date only)."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%a %b %d %Y")


def epoch_date_string(timestamp: float | int | None) -> str | None:
    """Like date_string, but accepts epoch milliseconds and maps garbage to None."""
    if timestamp is None:
        return None
    try:
        # Meetup reports epoch milliseconds
        if abs(timestamp) > MILLISECONDS_THRESHOLD:
            timestamp = timestamp / 1000
        return date_string(timestamp)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def geocode_fields(search_query: str, raw: dict[str, Any]) -> dict[str, Any]:
    """Location columns from a Google geocoding result (id is assigned on insert)."""
    coords = raw["geometry"]["location"]
    return {
        "search_query": search_query,
        "formatted_query": raw["formatted_address"],
        "latitude": float(coords["lat"]),
        "longitude": float(coords["lng"]),
    }


def normalize_weather(raw: dict[str, Any]) -> WeatherRecord:
    return WeatherRecord(
        forecast=raw.get("summary"),
        time=date_string(raw["time"]),
    )


def normalize_business(raw: dict[str, Any]) -> BusinessRecord:
    return BusinessRecord(
        name=raw["name"],
        rating=raw.get("rating"),
        price=raw.get("price"),
        url=raw.get("url"),
        image_url=raw.get("image_url"),
    )


def normalize_movie(raw: dict[str, Any]) -> MovieRecord:
    poster = raw.get("poster_path")
    return MovieRecord(
        title=raw["title"],
        overview=raw.get("overview"),
        average_votes=raw.get("vote_average"),
        total_votes=raw.get("vote_count"),
        popularity=raw.get("popularity"),
        released_on=raw.get("release_date") or None,
        image_url=f"{TMDB_IMAGE_BASE}{poster.lstrip('/')}" if poster else None,
    )


def normalize_meetup(raw: dict[str, Any]) -> MeetupRecord:
    # Meetup reports the group as an object; older payloads carry a flat host
    host = raw.get("host") or (raw.get("group") or {}).get("name")
    return MeetupRecord(
        link=raw.get("event_url") or raw.get("link"),
        name=raw["name"],
        creation_date=epoch_date_string(raw.get("created")),
        host=host,
    )


def normalize_trail(raw: dict[str, Any]) -> TrailRecord:
    condition_date = raw.get("conditionDate") or ""
    return TrailRecord(
        name=raw["name"],
        location=raw.get("location"),
        length=raw.get("length"),
        stars=raw.get("stars"),
        star_votes=raw.get("starVotes"),
        summary=raw.get("summary"),
        trail_url=raw.get("url"),
        conditions=raw.get("conditionStatus"),
        # "1970-01-01 00:00:00" is the API's "never reported" marker
        condition_date=condition_date.split(" ")[0] if condition_date and not condition_date.startswith("1970") else None,
    )
