"""Store adapter: parameterized reads/writes against the relational backend.

Wraps one AsyncSession. Never interprets category semantics beyond the
ORM class it is handed; every driver failure is re-raised as StorageError.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer.errors import DuplicateKeyError, StorageError
from city_explorer.models import Location
from city_explorer.models.base import Base

logger = logging.getLogger(__name__)


class StoreAdapter:
    """Typed helpers over a single session; one instance per orchestrator call."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute(self, statement, params: dict[str, Any] | None = None):
        """Run any SQLAlchemy statement, translating driver errors."""
        try:
            return await self.session.execute(statement, params)
        except IntegrityError as e:
            await self.rollback()
            raise DuplicateKeyError(str(e.orig)[:200]) from e
        except SQLAlchemyError as e:
            await self.rollback()
            raise StorageError(str(e)[:200]) from e

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.rollback()
            raise DuplicateKeyError(str(e.orig)[:200]) from e
        except SQLAlchemyError as e:
            await self.rollback()
            raise StorageError(str(e)[:200]) from e

    async def rollback(self):
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.warning("Rollback failed: %s", str(e)[:200])

    # ---- Locations ----

    async def find_location(self, search_query: str) -> Location | None:
        result = await self.execute(
            select(Location).where(Location.search_query == search_query)
        )
        return result.scalars().first()

    async def get_location(self, location_id: int) -> Location | None:
        result = await self.execute(select(Location).where(Location.id == location_id))
        return result.scalars().first()

    async def add_location(self, fields: dict[str, Any]) -> Location:
        """Insert a location and commit; the returned row carries its new id."""
        row = Location(**fields)
        self.session.add(row)
        await self.commit()
        return row

    # ---- Category rows ----

    async def fetch_records(self, model: type[Base], location_id: int) -> Sequence[Any]:
        result = await self.execute(
            select(model).where(model.location_id == location_id).order_by(model.id)
        )
        return result.scalars().all()

    async def oldest_record_at(self, model: type[Base], location_id: int) -> datetime | None:
        result = await self.execute(
            select(func.min(model.created_at)).where(model.location_id == location_id)
        )
        oldest = result.scalar()
        # SQLite hands back naive datetimes; values are always stored in UTC
        if oldest is not None and oldest.tzinfo is None:
            oldest = oldest.replace(tzinfo=timezone.utc)
        return oldest

    async def delete_records(self, model: type[Base], location_id: int):
        """Stage deletion of a location's rows; committed with the next write."""
        await self.execute(delete(model).where(model.location_id == location_id))

    async def add_records(
        self, model: type[Base], location_id: int, records: Sequence[dict[str, Any]],
    ) -> list[Any]:
        """Insert rows in the given order and commit them as one batch."""
        rows = [model(**fields, location_id=location_id) for fields in records]
        self.session.add_all(rows)
        await self.commit()
        return rows
