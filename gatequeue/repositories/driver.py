"""Driver check-in repository."""


from sqlalchemy import select

from gatequeue.core.config import settings
from gatequeue.domain.driver import Driver
from gatequeue.repositories.base import BaseRepository


class DriverRepository(BaseRepository[Driver]):
    model = Driver
    # Most recent check-ins first, bounded window for dashboard polling
    default_order = ("check_in_time", "desc")
    default_limit = settings.drivers_fetch_limit

    async def list_by_gate(self, gate: str) -> list[Driver]:
        """Every record assigned to ``gate``, regardless of age or status."""
        result = await self._session.execute(
            select(Driver).where(Driver.gate == gate).order_by(Driver.verified_time.asc())
        )
        return list(result.scalars().all())

    async def exists(self, driver_id: str) -> bool:
        result = await self._session.execute(select(Driver.id).where(Driver.id == driver_id))
        return result.first() is not None
