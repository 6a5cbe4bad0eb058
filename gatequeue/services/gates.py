"""Gate configuration service.

Closing a gate only removes it from the verification choices; drivers
already assigned to it keep their gate and queue number.
"""


import time

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.core.exceptions import ConflictError, NotFoundError
from gatequeue.domain.enums import ActivityAction
from gatequeue.domain.gate import GateConfig
from gatequeue.repositories.gate import GateRepository
from gatequeue.schemas.gate import GateCreate, GateUpdate
from gatequeue.services.activity import ActivityLogger

class GateService:
    def __init__(
        self,
        session: AsyncSession,
        log_sessions: async_sessionmaker[AsyncSession] | None = None,
    ):
        self._session = session
        self._repo = GateRepository(session)
        self._activity = ActivityLogger(log_sessions)

    async def list_gates(self) -> list[GateConfig]:
        return await self._repo.list_all()

    async def list_open_gates(self) -> list[GateConfig]:
        return await self._repo.list_open()

    async def get_gate(self, gate_id: str) -> GateConfig:
        gate = await self._repo.get_by_id(gate_id)
        if not gate:
            raise NotFoundError("Gate", gate_id)
        return gate

    async def create_gate(self, data: GateCreate, actor: str = "Manager") -> GateConfig:
        gate_id = data.id or f"gate-{int(time.time() * 1000)}"
        if await self._repo.get_by_id(gate_id):
            raise ConflictError(f"Gate '{gate_id}' already exists")
        gate = await self._repo.create(
            id=gate_id, name=data.name.strip(), type=data.type.value, status=data.status.value
        )
        await self._session.commit()
        await self._activity.record(ActivityAction.SAVE_GATE, f"Created gate {gate.name}", actor)
        return gate

    async def update_gate(self, gate_id: str, data: GateUpdate, actor: str = "Manager") -> GateConfig:
        _ = await self.get_gate(gate_id)  # raises 404 if missing
        changes = data.model_dump(exclude_none=True, exclude_unset=True)
        for key in ("type", "status"):
            if key in changes:
                changes[key] = changes[key].value
        gate = await self._repo.update(gate_id, **changes)
        await self._session.commit()
        await self._activity.record(
            ActivityAction.SAVE_GATE, f"Updated gate {gate.name} ({gate.status})", actor
        )
        return gate  # type: ignore[return-value]

    async def delete_gate(self, gate_id: str, actor: str = "Manager") -> None:
        deleted = await self._repo.delete(gate_id)
        if not deleted:
            raise NotFoundError("Gate", gate_id)
        await self._session.commit()
        await self._activity.record(ActivityAction.DELETE_GATE, f"Deleted gate {gate_id}", actor)
