"""Google Geocoding API integration.

Docs: https://developers.google.com/maps/documentation/geocoding/requests-geocoding
"""

from typing import Any

from city_explorer.integrations.base import JsonApiClient

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GeocodeClient(JsonApiClient):
    """Resolves a free-text address into candidate places."""

    name = "Google Geocoding"
    records_field = "results"

    async def fetch_raw(self, search_query: str) -> list[dict[str, Any]]:
        params = {"address": search_query, "key": self.api_key}
        return await self.get_records(GEOCODE_URL, params=params, label=f"query={search_query[:80]}")
