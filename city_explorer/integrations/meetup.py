"""Meetup open events integration.

Endpoint: https://api.meetup.com/2/open_events
"""

from typing import Any

from city_explorer.integrations.base import JsonApiClient
from city_explorer.orchestrator.schemas import LocationRecord

EVENTS_URL = "https://api.meetup.com/2/open_events"


class MeetupClient(JsonApiClient):
    """Public events on a topic near a coordinate pair."""

    name = "Meetup"
    records_field = "results"

    def __init__(self, api_key: str = "", timeout: int = 30, topic: str = "softwaredev", page_size: int = 20):
        super().__init__(api_key, timeout)
        self.topic = topic
        self.page_size = page_size

    async def fetch_raw(self, location: LocationRecord) -> list[dict[str, Any]]:
        params = {
            "key": self.api_key,
            "sign": "true",
            "photo-host": "public",
            "lat": location.latitude,
            "lon": location.longitude,
            "topic": self.topic,
            "page": self.page_size,
        }
        return await self.get_records(EVENTS_URL, params=params, label=f"location_id={location.id}")
