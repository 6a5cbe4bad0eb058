"""Driver queue state machine.

Owns every status change of a driver check-in:

    BOOKED / CHECKED_IN --scan--> AT_GATE --verify--> VERIFIED --call--> CALLED
        --start loading--> LOADING --complete--> COMPLETED --gate out--> EXITED
    AT_GATE --reject--> REJECTED

Each transition loads the record, checks its guard, writes the new status
together with the fields it stamps and commits. Side effects (activity log,
WhatsApp) run afterwards and can fail without touching the committed change.
A missing record raises :class:`NotFoundError`; a record in the wrong status
raises :class:`InvalidTransitionError`; both leave the store unchanged.

Queue numbers are derived from the gate's current occupants at verification
time without locking, so two simultaneous verifications into one gate may get
the same number.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.core.config import settings
from gatequeue.core.exceptions import (
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from gatequeue.domain.driver import Driver
from gatequeue.domain.enums import (
    TERMINAL_STATUSES,
    ActivityAction,
    EntryType,
    QueueStatus,
)
from gatequeue.domain.mixins import utcnow
from gatequeue.repositories.driver import DriverRepository
from gatequeue.repositories.gate import GateRepository
from gatequeue.schemas.driver import CheckInCreate
from gatequeue.services import messages
from gatequeue.services.activity import ActivityLogger
from gatequeue.services.documents import DocumentStorage
from gatequeue.services.geofence import check_location
from gatequeue.services.notifier import Notifier, WhatsAppNotifier, to_whatsapp_number
from gatequeue.services.views import DriverView, next_queue_number, project, view_counts

logger = logging.getLogger(__name__)

_ID_ATTEMPTS = 10


class QueueEvent(str, Enum):
    SCAN = "scan"
    APPROVE = "verify"
    REJECT = "reject"
    CALL = "call"
    START_LOADING = "start loading"
    COMPLETE = "complete"
    GATE_OUT = "gate out"


# event -> (statuses it may start from, status it leads to)
TRANSITIONS: dict[QueueEvent, tuple[frozenset[QueueStatus], QueueStatus]] = {
    QueueEvent.SCAN: (frozenset({QueueStatus.BOOKED, QueueStatus.CHECKED_IN}), QueueStatus.AT_GATE),
    QueueEvent.APPROVE: (frozenset({QueueStatus.AT_GATE}), QueueStatus.VERIFIED),
    QueueEvent.REJECT: (frozenset({QueueStatus.AT_GATE}), QueueStatus.REJECTED),
    QueueEvent.CALL: (frozenset({QueueStatus.VERIFIED}), QueueStatus.CALLED),
    QueueEvent.START_LOADING: (frozenset({QueueStatus.CALLED}), QueueStatus.LOADING),
    QueueEvent.COMPLETE: (frozenset({QueueStatus.LOADING}), QueueStatus.COMPLETED),
    QueueEvent.GATE_OUT: (frozenset({QueueStatus.COMPLETED}), QueueStatus.EXITED),
}

# Targets an admin may request through the generic status endpoint
ADVANCE_EVENTS: dict[QueueStatus, QueueEvent] = {
    QueueStatus.CALLED: QueueEvent.CALL,
    QueueStatus.LOADING: QueueEvent.START_LOADING,
    QueueStatus.COMPLETED: QueueEvent.COMPLETE,
    QueueStatus.EXITED: QueueEvent.GATE_OUT,
}


def allowed_events(status: QueueStatus | str) -> list[QueueEvent]:
    current = QueueStatus(status)
    return [event for event, (sources, _) in TRANSITIONS.items() if current in sources]


class QueueService:
    def __init__(
        self,
        session: AsyncSession,
        notifier: Notifier | None = None,
        documents: DocumentStorage | None = None,
        log_sessions: async_sessionmaker[AsyncSession] | None = None,
    ):
        self._session = session
        self._drivers = DriverRepository(session)
        self._gates = GateRepository(session)
        self._notifier = notifier or WhatsAppNotifier()
        self._documents = documents or DocumentStorage()
        self._activity = ActivityLogger(log_sessions)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_drivers(
        self, view: DriverView = DriverView.ALL, search: str | None = None
    ) -> list[Driver]:
        return project(await self._drivers.list_all(), view, search)

    async def counts(self) -> dict[DriverView, int]:
        return view_counts(await self._drivers.list_all())

    async def get_driver(self, driver_id: str) -> Driver:
        driver = await self._drivers.get_by_id(driver_id)
        if not driver:
            raise NotFoundError("Driver", driver_id)
        return driver

    async def preview_queue_number(self, gate: str) -> str:
        """Number the next driver verified into ``gate`` would receive right now."""
        return next_queue_number(await self._drivers.list_by_gate(gate), gate)

    # ------------------------------------------------------------------
    # Check-in
    # ------------------------------------------------------------------

    async def check_in(self, data: CheckInCreate) -> Driver:
        """Create a record in CHECKED_IN (walk-in) or BOOKED (booking)."""
        for field in ("name", "phone", "license_plate", "company", "do_number"):
            if not getattr(data, field).strip():
                raise ValidationError(f"'{field}' is required")

        location = data.location
        geofence = check_location(
            location.latitude if location else None,
            location.longitude if location else None,
            bypass=bool(location and location.bypass),
        )
        if not geofence.allowed:
            raise ValidationError(
                f"Check-in location is outside the warehouse area {geofence.note}"
            )

        driver_id = await self._new_driver_id()
        document_url = self._documents.resolve(data.document_file, driver_id)
        notes = f"{data.notes or ''} {geofence.note}".strip()
        status = QueueStatus.BOOKED if data.entry_type is EntryType.BOOKING else QueueStatus.CHECKED_IN

        driver = await self._drivers.create(
            id=driver_id,
            name=data.name.strip(),
            phone=data.phone.strip(),
            license_plate=data.license_plate.strip().upper(),
            company=data.company.strip(),
            entry_type=data.entry_type.value,
            purpose=data.purpose.value,
            priority=data.priority.value,
            do_number=data.do_number.strip(),
            pic=data.pic,
            item_type=data.item_type,
            notes=notes,
            document_file=document_url,
            status=status.value,
            gate=None,
            check_in_time=utcnow(),
        )
        await self._session.commit()
        logger.info("Driver %s checked in as %s (%s)", driver.id, status.value, geofence.status.value)

        await self._activity.record(
            ActivityAction.CHECK_IN,
            f"Driver {driver.license_plate} checked in ({driver.entry_type})",
            driver.name,
        )
        return driver

    async def _new_driver_id(self) -> str:
        day = utcnow().strftime("%Y%m%d")
        for _ in range(_ID_ATTEMPTS):
            candidate = f"WH-{day}-{random.randrange(1000):03d}"
            if not await self._drivers.exists(candidate):
                return candidate
        raise ConflictError(f"Could not allocate a free check-in id for {day}")

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def scan(self, driver_id: str, actor: str = "Security") -> Driver:
        """Mark a driver as arrived at the gate. Re-scanning an AT_GATE record is a no-op."""
        driver = await self.get_driver(driver_id)
        if driver.status == QueueStatus.AT_GATE.value:
            return driver
        self._guard(driver, QueueEvent.SCAN)

        fields: dict[str, Any] = {}
        if driver.arrived_at_gate_time is None:
            fields["arrived_at_gate_time"] = utcnow()
        driver = await self._apply(driver, QueueEvent.SCAN, fields)
        await self._activity.record(
            ActivityAction.SCAN_DRIVER, f"Driver {driver.license_plate} arrived at gate", actor
        )
        return driver

    async def verify(
        self, driver_id: str, actor: str, gate: str | None, notes: str | None = None
    ) -> Driver:
        """Approve a driver at the gate: assign an open gate and a queue number."""
        if not (gate or "").strip():
            raise ValidationError("A gate must be selected to approve a driver")

        driver = await self.get_driver(driver_id)
        self._guard(driver, QueueEvent.APPROVE)

        open_gate = await self._gates.get_open_by_name(gate)
        if open_gate is None:
            raise ValidationError(f"Gate '{gate}' is not open")

        occupants = await self._drivers.list_by_gate(open_gate.name)
        now = utcnow()
        driver = await self._apply(driver, QueueEvent.APPROVE, {
            "gate": open_gate.name,
            "queue_number": next_queue_number(occupants, open_gate.name),
            "verified_time": now,
            "verified_by": actor,
            "security_notes": notes,
        })
        logger.info("Driver %s verified into %s as %s", driver.id, driver.gate, driver.queue_number)

        await self._activity.record(
            ActivityAction.VERIFY_DRIVER, f"Driver {driver.license_plate} verified", actor
        )
        await self._notify(settings.wa_group_id, messages.approval_message(driver, actor, now))
        return driver

    async def reject(self, driver_id: str, actor: str, reason: str) -> Driver:
        if not (reason or "").strip():
            raise ValidationError("A rejection reason is required")

        driver = await self.get_driver(driver_id)
        self._guard(driver, QueueEvent.REJECT)
        driver = await self._apply(driver, QueueEvent.REJECT, {
            "rejection_reason": reason.strip(),
            "verified_by": actor,
        })
        await self._activity.record(ActivityAction.REJECT_DRIVER, f"Rejected: {reason.strip()}", actor)
        return driver

    async def call(self, driver_id: str, actor: str) -> Driver:
        """Call a verified driver to the assigned dock and message them."""
        driver = await self.get_driver(driver_id)
        self._guard(driver, QueueEvent.CALL)
        driver = await self._apply(driver, QueueEvent.CALL, {
            "called_time": utcnow(),
            "called_by": actor,
        })
        await self._activity.record(ActivityAction.CALL_DRIVER, f"Driver called by {actor}", actor)
        await self._notify(to_whatsapp_number(driver.phone), messages.call_message(driver))
        return driver

    async def start_loading(self, driver_id: str, actor: str = "Admin") -> Driver:
        return await self._simple(driver_id, QueueEvent.START_LOADING, {"loading_start_time": utcnow()}, actor)

    async def complete(self, driver_id: str, actor: str = "Admin") -> Driver:
        return await self._simple(driver_id, QueueEvent.COMPLETE, {"end_time": utcnow()}, actor)

    async def gate_out(self, driver_id: str, actor: str = "Security Out") -> Driver:
        return await self._simple(
            driver_id, QueueEvent.GATE_OUT, {"exit_time": utcnow(), "exit_verified_by": actor}, actor
        )

    async def advance(self, driver_id: str, target: QueueStatus, actor: str) -> Driver:
        """Generic admin status change, restricted to the post-verification steps."""
        event = ADVANCE_EVENTS.get(target)
        if event is None:
            raise ValidationError(f"Status {target.value} cannot be set directly")
        if event is QueueEvent.CALL:
            return await self.call(driver_id, actor)
        if event is QueueEvent.START_LOADING:
            return await self.start_loading(driver_id, actor)
        if event is QueueEvent.COMPLETE:
            return await self.complete(driver_id, actor)
        return await self.gate_out(driver_id, actor)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _guard(self, driver: Driver, event: QueueEvent) -> None:
        sources, _ = TRANSITIONS[event]
        try:
            current = QueueStatus(driver.status)
        except ValueError:
            raise InvalidTransitionError(driver.id, driver.status, event.value) from None
        if current in TERMINAL_STATUSES or current not in sources:
            raise InvalidTransitionError(driver.id, current.value, event.value)

    async def _apply(self, driver: Driver, event: QueueEvent, fields: dict[str, Any]) -> Driver:
        _, target = TRANSITIONS[event]
        updated = await self._drivers.update(driver.id, status=target.value, **fields)
        await self._session.commit()
        logger.debug("Driver %s: %s -> %s", driver.id, event.value, target.value)
        return updated

    async def _simple(
        self, driver_id: str, event: QueueEvent, fields: dict[str, Any], actor: str
    ) -> Driver:
        driver = await self.get_driver(driver_id)
        self._guard(driver, event)
        driver = await self._apply(driver, event, fields)
        await self._activity.record(
            ActivityAction.UPDATE_STATUS, f"Status changed to {driver.status}", actor
        )
        return driver

    async def _notify(self, destination: str, text: str) -> None:
        try:
            result = await self._notifier.send(destination, text)
        except Exception as exc:  # the transition is already committed
            logger.error("Notification to %s raised: %s", destination, exc)
            return
        if not result.delivered:
            logger.warning("Notification to %s not delivered: %s", destination, result.reason)
