"""
Generic record store adapter
"""

import pytest
from sqlalchemy import select

from gatequeue.core.exceptions import (
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from gatequeue.domain.activity import ActivityLog
from gatequeue.domain.enums import QueueStatus
from gatequeue.services.store import RecordStore, StoreAction


@pytest.fixture
def store(session, documents, session_factory):
    return RecordStore(session, documents, session_factory)


async def log_actions(session_factory) -> list[str]:
    async with session_factory() as s:
        rows = (await s.execute(select(ActivityLog).order_by(ActivityLog.created_at))).scalars().all()
    return [r.action for r in rows]


async def test_create_and_get_gate_in_camel_case(store):
    result = await store.dispatch(StoreAction.CREATE, "gates", {"name": "GATE 3", "type": "DOCK", "status": "OPEN"})
    assert result == {"success": True, "fileUrl": None}

    rows = await store.dispatch(StoreAction.GET, "gates")
    assert len(rows) == 1
    assert rows[0]["id"].startswith("gate-")
    assert rows[0]["name"] == "GATE 3"
    assert "createdAt" in rows[0]


async def test_division_id_is_uppercased(store):
    await store.create("divisions", {"id": "ops", "name": "Operations", "role": "ADMIN"})
    rows = await store.get("divisions")
    assert rows[0]["id"] == "OPS"
    assert rows[0]["theme"] == "slate"


async def test_user_status_forced_active(store):
    await store.create("users", {"id": "u1", "name": "Sari", "role": "SECURITY", "status": "INACTIVE"})
    assert (await store.get("users"))[0]["status"] == "ACTIVE"


async def test_update_and_delete(store):
    await store.create("gates", {"id": "g1", "name": "GATE 1"})

    assert await store.update("gates", {"id": "g1", "status": "CLOSED"}) == {"success": True}
    assert (await store.get("gates"))[0]["status"] == "CLOSED"

    assert await store.delete("gates", {"id": "g1"}) == {"success": True}
    assert await store.get("gates") == []


async def test_update_requires_id(store):
    with pytest.raises(ValidationError):
        await store.update("gates", {"status": "CLOSED"})
    with pytest.raises(ValidationError):
        await store.delete("gates", {})


async def test_missing_rows(store):
    with pytest.raises(NotFoundError):
        await store.update("gates", {"id": "nope", "status": "CLOSED"})
    with pytest.raises(NotFoundError):
        await store.delete("gates", {"id": "nope"})


async def test_disallowed_table(store):
    with pytest.raises(ValidationError, match="not allowed"):
        await store.get("secrets")


async def test_unknown_field(store):
    with pytest.raises(ValidationError, match="Unknown field"):
        await store.create("gates", {"name": "GATE 1", "colour": "red"})


async def test_required_fields(store):
    with pytest.raises(ValidationError, match="Missing required"):
        await store.create("users", {"id": "u1"})


async def test_logs_are_append_only(store):
    await store.create("logs", {"action": "CHECK_IN", "details": "manual"})
    row = (await store.get("logs"))[0]

    with pytest.raises(ValidationError):
        await store.update("logs", {"id": row["id"], "details": "edited"})
    with pytest.raises(ValidationError):
        await store.delete("logs", {"id": row["id"]})


async def test_duplicate_id_is_a_conflict(store):
    await store.create("users", {"id": "u1", "name": "Sari", "role": "SECURITY"})
    with pytest.raises(ConflictError):
        await store.create("users", {"id": "u1", "name": "Sari", "role": "SECURITY"})

    await store.create("divisions", {"id": "ops", "name": "Ops", "role": "ADMIN"})
    with pytest.raises(ConflictError):
        await store.create("divisions", {"id": "OPS", "name": "Ops", "role": "ADMIN"})


async def test_writes_are_recorded_in_activity_log(store, session_factory):
    await store.create("users", {"id": "u1", "name": "Sari", "role": "SECURITY"}, actor="Boss")
    await store.update("users", {"id": "u1", "role": "ADMIN"}, actor="Boss")
    await store.delete("users", {"id": "u1"}, actor="Boss")
    await store.create("gates", {"id": "g1", "name": "GATE 1"})
    await store.create("logs", {"action": "NOTE", "details": "manual"})

    actions = await log_actions(session_factory)
    assert actions.count("ADD_USER") == 1
    assert actions.count("UPDATE_USER") == 1
    assert actions.count("DELETE_USER") == 1
    assert actions.count("SAVE_GATE") == 1
    assert actions.count("NOTE") == 1
    assert len(actions) == 5


class TestDriverRows:
    async def test_drivers_cannot_be_created(self, store, session_factory):
        with pytest.raises(ValidationError, match="check-in"):
            await store.create("drivers", {
                "id": "WH-20250101-999",
                "name": "Budi",
                "phone": "0812",
                "licensePlate": "B 1 A",
                "company": "PT A",
                "doNumber": "PO/SBI/2025/1",
                "status": "LOADING",
            })
        assert await store.get("drivers") == []

    @pytest.mark.parametrize(
        "field, value",
        [
            ("status", "CHECKED_IN"),
            ("status", "FOO"),
            ("gate", "GATE 2"),
            ("queueNumber", "A-001"),
            ("exitTime", 1735689600000),
            ("verifiedBy", "Someone"),
            ("rejectionReason", None),
        ],
    )
    async def test_lifecycle_fields_are_refused(self, store, make_driver, field, value):
        driver = await make_driver(QueueStatus.EXITED, gate="GATE 1", queue_number="B-001")

        with pytest.raises(ValidationError, match="queue transitions"):
            await store.update("drivers", {"id": driver.id, field: value})

        assert driver.status == QueueStatus.EXITED.value
        assert driver.queue_number == "B-001"

    async def test_exited_driver_stays_terminal(self, store, service, make_driver):
        driver = await make_driver(QueueStatus.EXITED)

        with pytest.raises(ValidationError):
            await store.update("drivers", {"id": driver.id, "status": "CHECKED_IN"})

        with pytest.raises(InvalidTransitionError):
            await service.scan(driver.id)

    async def test_descriptive_fields_can_be_corrected(self, store, make_driver, session_factory):
        driver = await make_driver(QueueStatus.AT_GATE)

        result = await store.update("drivers", {
            "id": driver.id,
            "company": "PT Baru",
            "documentFile": "data:image/jpeg;base64,/9j/4AAQ",
        })

        assert result["fileUrl"].startswith(f"/documents/SJ_{driver.id}_")
        assert driver.company == "PT Baru"
        assert driver.status == QueueStatus.AT_GATE.value
        assert await log_actions(session_factory) == ["UPDATE_DRIVER"]
