"""
Gate configuration service
"""

import pytest
from sqlalchemy import select

from gatequeue.core.exceptions import ConflictError, NotFoundError
from gatequeue.domain.activity import ActivityLog
from gatequeue.domain.enums import GateStatus, QueueStatus
from gatequeue.schemas.gate import GateCreate, GateUpdate
from gatequeue.services.gates import GateService


@pytest.fixture
def gate_service(session, session_factory):
    return GateService(session, session_factory)


async def test_open_gates_only(gate_service, gates):
    names = {g.name for g in await gate_service.list_open_gates()}
    assert names == {"GATE 1", "GATE 2"}
    assert len(await gate_service.list_gates()) == 3


async def test_create_generates_id_and_logs(gate_service, session_factory):
    gate = await gate_service.create_gate(GateCreate(name=" GATE 7 "))
    assert gate.id.startswith("gate-")
    assert gate.name == "GATE 7"
    assert gate.status == GateStatus.OPEN.value

    async with session_factory() as s:
        actions = [e.action for e in (await s.execute(select(ActivityLog))).scalars()]
    assert actions == ["SAVE_GATE"]


async def test_duplicate_id(gate_service, gates):
    with pytest.raises(ConflictError):
        await gate_service.create_gate(GateCreate(id="gate-1", name="GATE 1"))


async def test_closing_keeps_assigned_drivers(gate_service, gates, make_driver):
    driver = await make_driver(QueueStatus.VERIFIED, gate="GATE 1", queue_number="B-001")

    gate = await gate_service.update_gate("gate-1", GateUpdate(status=GateStatus.CLOSED))

    assert gate.status == GateStatus.CLOSED.value
    assert driver.gate == "GATE 1"
    assert "GATE 1" not in {g.name for g in await gate_service.list_open_gates()}


async def test_missing_gate(gate_service):
    with pytest.raises(NotFoundError):
        await gate_service.update_gate("nope", GateUpdate(name="X"))
    with pytest.raises(NotFoundError):
        await gate_service.delete_gate("nope")


async def test_delete(gate_service, gates):
    await gate_service.delete_gate("gate-5")
    assert {g.id for g in await gate_service.list_gates()} == {"gate-1", "gate-2"}
