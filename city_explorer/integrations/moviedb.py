"""The Movie Database (TMDB) search integration.

Docs: https://developer.themoviedb.org/reference/search-movie
"""

from typing import Any

from city_explorer.integrations.base import JsonApiClient
from city_explorer.orchestrator.schemas import LocationRecord

SEARCH_URL = "https://api.themoviedb.org/3/search/movie"


class MovieClient(JsonApiClient):
    """Movies matching the location's original search text."""

    name = "TMDB"
    records_field = "results"

    async def fetch_raw(self, location: LocationRecord) -> list[dict[str, Any]]:
        params = {"api_key": self.api_key, "query": location.search_query}
        return await self.get_records(SEARCH_URL, params=params, label=f"query={location.search_query[:80]}")
