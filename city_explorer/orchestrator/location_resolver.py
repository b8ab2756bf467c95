"""Location resolver: free-text search string → persisted, geocoded location.

Same cache-or-fetch shape as the category caches, keyed by the raw
search string (exact, case-sensitive). A bounded in-process memo sits in
front of the locations table; the table stays the source of truth.
"""

import logging
from typing import Any, Protocol

from cachetools import TTLCache

from city_explorer.database import Database
from city_explorer.errors import DuplicateKeyError, NoDataError
from city_explorer.orchestrator.schemas import LocationRecord
from city_explorer.services.keyed_lock import KeyedLock
from city_explorer.services.normalizers import geocode_fields
from city_explorer.services.store import StoreAdapter

logger = logging.getLogger(__name__)


class GeocodingClient(Protocol):
    async def fetch_raw(self, search_query: str) -> list[dict[str, Any]]: ...


class LocationResolver:
    """Resolves and caches locations; one write per distinct search string."""

    def __init__(
        self,
        client: GeocodingClient,
        database: Database,
        memo_size: int = 256,
        memo_ttl: int = 3600,
        locks: KeyedLock | None = None,
    ):
        self.client = client
        self.database = database
        self.locks = locks or KeyedLock()
        self._memo: TTLCache = TTLCache(maxsize=max(memo_size, 1), ttl=memo_ttl)

    async def resolve(self, search_query: str) -> LocationRecord:
        cached = self._memo.get(search_query)
        if cached is not None:
            logger.info("Location HIT (memory) | query=%s", search_query[:80])
            return cached

        async with self.locks.hold(("location", search_query)):
            # A concurrent caller may have filled the memo while we waited
            cached = self._memo.get(search_query)
            if cached is not None:
                return cached

            async with self.database.session() as session:
                row = await StoreAdapter(session).find_location(search_query)
            if row is not None:
                logger.info("Location HIT (db) | id=%d | query=%s", row.id, search_query[:80])
                return self._remember(row)

            logger.info("Location MISS | query=%s", search_query[:80])
            results = await self.client.fetch_raw(search_query)
            if not results:
                raise NoDataError(f"no geocoding results for {search_query!r}")

            fields = geocode_fields(search_query, results[0])
            async with self.database.session() as session:
                store = StoreAdapter(session)
                try:
                    row = await store.add_location(fields)
                except DuplicateKeyError:
                    # Another process inserted the same search string first
                    row = await store.find_location(search_query)
                    if row is None:
                        raise
                    logger.info("Location insert lost race | id=%d", row.id)

            logger.info("Location SET | id=%d | query=%s", row.id, search_query[:80])
            return self._remember(row)

    async def get(self, location_id: int) -> LocationRecord:
        """Load a persisted location by id."""
        async with self.database.session() as session:
            row = await StoreAdapter(session).get_location(location_id)
        if row is None:
            raise NoDataError(f"unknown location id {location_id}")
        return LocationRecord.model_validate(row)

    def _remember(self, row) -> LocationRecord:
        record = LocationRecord.model_validate(row)
        self._memo[record.search_query] = record
        return record
