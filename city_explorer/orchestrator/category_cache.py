"""Cache orchestrator: read-through cache for one data category.

Flow per call, under a single-flight lock keyed by (location id, category):
  1. Read stored rows for location_id
  2. Rows present and fresh → serve them (cache hit)
  3. Otherwise fetch raw records from the provider, normalize each one,
     write the batch (replacing stale rows) in one transaction and serve
     the rows just written

Hit and miss both serve records built from ORM rows, so callers always
see the same shape. Provider and storage errors abort the call.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

from city_explorer.database import Database
from city_explorer.orchestrator.categories import Category
from city_explorer.orchestrator.schemas import LocationRecord, Record
from city_explorer.services.keyed_lock import KeyedLock
from city_explorer.services.store import StoreAdapter

logger = logging.getLogger(__name__)


class ProviderClient(Protocol):
    async def fetch_raw(self, location: LocationRecord) -> list[dict[str, Any]]: ...


class CategoryCache:
    """Cache-or-fetch for one category, backed by the category's table."""

    def __init__(
        self,
        category: Category,
        client: ProviderClient,
        database: Database,
        ttl_seconds: int = 0,
        locks: KeyedLock | None = None,
    ):
        self.category = category
        self.client = client
        self.database = database
        self.ttl_seconds = ttl_seconds
        self.locks = locks or KeyedLock()

    async def get(self, location: LocationRecord) -> list[Record]:
        name = self.category.name
        async with self.locks.hold((location.id, name)):
            async with self.database.session() as session:
                store = StoreAdapter(session)
                rows = await store.fetch_records(self.category.model, location.id)
                stale = bool(rows) and await self._is_stale(store, location.id)

            if rows and not stale:
                logger.info("Cache HIT | category=%s | location_id=%d | rows=%d", name, location.id, len(rows))
                return self._serve(rows)

            logger.info(
                "Cache %s | category=%s | location_id=%d",
                "STALE" if stale else "MISS", name, location.id,
            )
            raw_records = await self.client.fetch_raw(location)
            records = [self.category.normalize(raw) for raw in raw_records]

            if not records and not stale:
                logger.info("Provider empty | category=%s | location_id=%d", name, location.id)
                return []

            async with self.database.session() as session:
                store = StoreAdapter(session)
                if stale:
                    await store.delete_records(self.category.model, location.id)
                rows = await store.add_records(
                    self.category.model, location.id, [r.model_dump() for r in records],
                )

            logger.info("Cache SET | category=%s | location_id=%d | rows=%d", name, location.id, len(rows))
            return self._serve(rows)

    async def _is_stale(self, store: StoreAdapter, location_id: int) -> bool:
        if not self.ttl_seconds:
            return False
        oldest = await store.oldest_record_at(self.category.model, location_id)
        if oldest is None:
            return False
        return datetime.now(timezone.utc) - oldest > timedelta(seconds=self.ttl_seconds)

    def _serve(self, rows) -> list[Record]:
        return [self.category.schema.model_validate(row) for row in rows]
