"""Yelp Fusion business search integration.

Docs: https://docs.developer.yelp.com/reference/v3_business_search
"""

from typing import Any

from city_explorer.integrations.base import JsonApiClient
from city_explorer.orchestrator.schemas import LocationRecord

SEARCH_URL = "https://api.yelp.com/v3/businesses/search"


class YelpClient(JsonApiClient):
    """Businesses near a coordinate pair (first page only)."""

    name = "Yelp"
    records_field = "businesses"

    async def fetch_raw(self, location: LocationRecord) -> list[dict[str, Any]]:
        params = {"latitude": location.latitude, "longitude": location.longitude}
        headers = {"Authorization": f"Bearer {self.api_key}"}
        return await self.get_records(
            SEARCH_URL, params=params, headers=headers, label=f"location_id={location.id}",
        )
