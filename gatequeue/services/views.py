"""Operational views derived from the driver record set.

Pure functions only: dashboards poll, re-read the records and project them
again, so nothing here caches or mutates.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Protocol

from gatequeue.core.config import settings
from gatequeue.domain.enums import QueueStatus


class DriverView(str, Enum):
    GATE_IN = "GATE_IN"              # security "Masuk"
    GATE_OUT = "GATE_OUT"            # security "Keluar"
    AWAITING_SCAN = "AWAITING_SCAN"
    READY_TO_CALL = "READY_TO_CALL"  # admin "Verifikasi"
    IN_PROGRESS = "IN_PROGRESS"
    DOCK = "DOCK"                    # admin "Bongkar"
    COMPLETED = "COMPLETED"          # admin "Selesai"
    EXITED = "EXITED"
    REJECTED = "REJECTED"
    ALL = "ALL"


VIEW_STATUSES: dict[DriverView, frozenset[QueueStatus]] = {
    DriverView.GATE_IN: frozenset({QueueStatus.BOOKED, QueueStatus.CHECKED_IN, QueueStatus.AT_GATE}),
    DriverView.GATE_OUT: frozenset({QueueStatus.COMPLETED}),
    DriverView.AWAITING_SCAN: frozenset({QueueStatus.BOOKED, QueueStatus.CHECKED_IN}),
    DriverView.READY_TO_CALL: frozenset({QueueStatus.VERIFIED}),
    DriverView.IN_PROGRESS: frozenset({QueueStatus.CALLED, QueueStatus.LOADING}),
    DriverView.DOCK: frozenset({QueueStatus.VERIFIED, QueueStatus.CALLED, QueueStatus.LOADING}),
    DriverView.COMPLETED: frozenset({QueueStatus.COMPLETED}),
    DriverView.EXITED: frozenset({QueueStatus.EXITED}),
    DriverView.REJECTED: frozenset({QueueStatus.REJECTED}),
    DriverView.ALL: frozenset(QueueStatus),
}


class QueueRecord(Protocol):
    status: str
    name: str
    license_plate: str
    gate: str | None
    queue_number: str | None


def _matches(record: QueueRecord, search: str | None) -> bool:
    if not search:
        return True
    return search.upper() in record.license_plate or search.lower() in record.name.lower()


def project(
    records: Iterable[QueueRecord], view: DriverView, search: str | None = None
) -> list[QueueRecord]:
    """Records of ``view`` in their incoming order (newest check-in first from the store)."""
    wanted = {s.value for s in VIEW_STATUSES[view]}
    return [r for r in records if r.status in wanted and _matches(r, search)]


def view_counts(records: Sequence[QueueRecord]) -> dict[DriverView, int]:
    return {view: len(project(records, view)) for view in DriverView}


# ---------------------------------------------------------------------------
# Queue numbers
# ---------------------------------------------------------------------------

def _normalise_gate(gate: str) -> str:
    return " ".join(gate.replace("_", " ").upper().split())


def queue_prefix(gate: str) -> str:
    """``A`` for the priority gate, ``B`` for every other gate."""
    return "A" if _normalise_gate(gate) == _normalise_gate(settings.priority_gate) else "B"


def next_queue_number(records: Iterable[QueueRecord], gate: str) -> str:
    """Queue number the next driver verified into ``gate`` receives.

    Counts the records already holding a number in that gate. Two
    verifications computed from the same snapshot get the same number.
    """
    numbered = sum(1 for r in records if r.gate == gate and r.queue_number)
    return f"{queue_prefix(gate)}-{numbered + 1:03d}"
