"""Gate configuration repository."""


from sqlalchemy import func, select

from gatequeue.domain.enums import GateStatus
from gatequeue.domain.gate import GateConfig
from gatequeue.repositories.base import BaseRepository


class GateRepository(BaseRepository[GateConfig]):
    model = GateConfig

    async def list_open(self) -> list[GateConfig]:
        return await self.list_all(filters={"status": GateStatus.OPEN.value})

    async def get_open_by_name(self, name: str) -> GateConfig | None:
        result = await self._session.execute(
            select(GateConfig)
            .where(func.upper(GateConfig.name) == name.strip().upper())
            .where(GateConfig.status == GateStatus.OPEN.value)
        )
        return result.scalars().first()
