"""Dark Sky forecast API integration.

Endpoint: https://api.darksky.net/forecast/{key}/{lat},{lng}
"""

from typing import Any

from city_explorer.integrations.base import JsonApiClient
from city_explorer.orchestrator.schemas import LocationRecord

BASE_URL = "https://api.darksky.net/forecast"


class WeatherClient(JsonApiClient):
    """Daily forecast entries for a coordinate pair."""

    name = "Dark Sky"
    records_field = "daily.data"

    async def fetch_raw(self, location: LocationRecord) -> list[dict[str, Any]]:
        url = f"{BASE_URL}/{self.api_key}/{location.latitude},{location.longitude}"
        return await self.get_records(url, label=f"location_id={location.id}")
