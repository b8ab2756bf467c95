"""Orchestrator: routes a search string to the location resolver and category caches.

Responsibilities:
  - Resolve the search string to a persisted location (cache-or-fetch)
  - Dispatch to the category's read-through cache
  - Wire providers, caches and the database handle at process start
"""

import logging

from city_explorer.config import Settings
from city_explorer.database import Database
from city_explorer.integrations.darksky import WeatherClient
from city_explorer.integrations.google_geocode import GeocodeClient
from city_explorer.integrations.hiking_project import TrailClient
from city_explorer.integrations.meetup import MeetupClient
from city_explorer.integrations.moviedb import MovieClient
from city_explorer.integrations.yelp import YelpClient
from city_explorer.orchestrator.categories import CATEGORIES
from city_explorer.orchestrator.category_cache import CategoryCache, ProviderClient
from city_explorer.orchestrator.location_resolver import LocationResolver
from city_explorer.orchestrator.schemas import LocationRecord, Record
from city_explorer.services.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)


class OrchestratorRouter:
    """Main dispatcher: maps a category name to its cache."""

    def __init__(self, database: Database, resolver: LocationResolver, caches: dict[str, CategoryCache]):
        self.database = database
        self.resolver = resolver
        self.caches = caches

    async def location(self, search_query: str) -> LocationRecord:
        return await self.resolver.resolve(search_query)

    async def category(self, name: str, search_query: str) -> list[Record]:
        cache = self.caches.get(name)
        if cache is None:
            raise KeyError(name)
        location = await self.resolver.resolve(search_query)
        logger.info("Orchestrator routing | category=%s | location_id=%d", name, location.id)
        return await cache.get(location)


def build_router(
    settings: Settings,
    database: Database,
    clients: dict[str, ProviderClient] | None = None,
    geocoder=None,
) -> OrchestratorRouter:
    """Wire the default provider clients from settings; overrides win."""
    timeout = settings.provider_timeout_seconds
    default_clients: dict[str, ProviderClient] = {
        "weather": WeatherClient(settings.weather_api_key, timeout),
        "yelp": YelpClient(settings.yelp_api_key, timeout),
        "movies": MovieClient(settings.moviedb_api_key, timeout),
        "meetups": MeetupClient(
            settings.meetup_api_key, timeout,
            topic=settings.meetup_topic, page_size=settings.meetup_page_size,
        ),
        "trails": TrailClient(settings.trail_api_key, timeout, max_distance=settings.trail_max_distance),
    }
    default_clients.update(clients or {})

    locks = KeyedLock()
    resolver = LocationResolver(
        geocoder or GeocodeClient(settings.geocode_api_key, timeout),
        database,
        memo_size=settings.location_memo_size,
        memo_ttl=settings.location_memo_ttl,
        locks=locks,
    )
    caches = {
        name: CategoryCache(
            category,
            default_clients[name],
            database,
            ttl_seconds=settings.cache_ttl(name),
            locks=locks,
        )
        for name, category in CATEGORIES.items()
    }
    return OrchestratorRouter(database, resolver, caches)
