"""Hiking Project trails integration.

Endpoint: https://www.hikingproject.com/data/get-trails
"""

from typing import Any

from city_explorer.integrations.base import JsonApiClient
from city_explorer.orchestrator.schemas import LocationRecord

TRAILS_URL = "https://www.hikingproject.com/data/get-trails"


class TrailClient(JsonApiClient):
    """Trails within a radius (miles) of a coordinate pair."""

    name = "Hiking Project"
    records_field = "trails"

    def __init__(self, api_key: str = "", timeout: int = 30, max_distance: int = 20):
        super().__init__(api_key, timeout)
        self.max_distance = max_distance

    async def fetch_raw(self, location: LocationRecord) -> list[dict[str, Any]]:
        params = {
            "lat": location.latitude,
            "lon": location.longitude,
            "maxDistance": self.max_distance,
            "key": self.api_key,
        }
        return await self.get_records(TRAILS_URL, params=params, label=f"location_id={location.id}")
