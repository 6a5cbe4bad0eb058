"""
Queue views, search and queue number derivation
"""

from dataclasses import dataclass

import pytest

from gatequeue.domain.enums import QueueStatus
from gatequeue.services.views import (
    DriverView,
    next_queue_number,
    project,
    queue_prefix,
    view_counts,
)


@dataclass
class Rec:
    name: str
    license_plate: str
    status: str
    gate: str | None = None
    queue_number: str | None = None


RECORDS = [
    Rec("Budi", "B 1234 XYZ", QueueStatus.CHECKED_IN.value),
    Rec("Andi", "D 77 AB", QueueStatus.BOOKED.value),
    Rec("Sari", "B 9 Q", QueueStatus.AT_GATE.value),
    Rec("Joko", "F 1 A", QueueStatus.VERIFIED.value, "GATE 2", "A-001"),
    Rec("Tono", "F 2 A", QueueStatus.CALLED.value, "GATE 1", "B-001"),
    Rec("Rudi", "F 3 A", QueueStatus.LOADING.value, "GATE 1", "B-002"),
    Rec("Wati", "F 4 A", QueueStatus.COMPLETED.value, "GATE 2", "A-002"),
    Rec("Eko", "F 5 A", QueueStatus.EXITED.value, "GATE 2", "A-003"),
    Rec("Dewi", "F 6 A", QueueStatus.REJECTED.value),
]


@pytest.mark.parametrize(
    "view, names",
    [
        (DriverView.GATE_IN, ["Budi", "Andi", "Sari"]),
        (DriverView.AWAITING_SCAN, ["Budi", "Andi"]),
        (DriverView.READY_TO_CALL, ["Joko"]),
        (DriverView.IN_PROGRESS, ["Tono", "Rudi"]),
        (DriverView.DOCK, ["Joko", "Tono", "Rudi"]),
        (DriverView.GATE_OUT, ["Wati"]),
        (DriverView.COMPLETED, ["Wati"]),
        (DriverView.EXITED, ["Eko"]),
        (DriverView.REJECTED, ["Dewi"]),
    ],
)
def test_views_keep_input_order(view, names):
    assert [r.name for r in project(RECORDS, view)] == names


def test_all_view_returns_everything():
    assert project(RECORDS, DriverView.ALL) == RECORDS


def test_search_matches_plate_or_name():
    assert [r.name for r in project(RECORDS, DriverView.ALL, "b 12")] == ["Budi"]
    assert [r.name for r in project(RECORDS, DriverView.ALL, "SAR")] == ["Sari"]
    assert project(RECORDS, DriverView.GATE_IN, "joko") == []


def test_counts():
    counts = view_counts(RECORDS)
    assert counts[DriverView.GATE_IN] == 3
    assert counts[DriverView.DOCK] == 3
    assert counts[DriverView.ALL] == len(RECORDS)


@pytest.mark.parametrize("gate", ["GATE 2", "gate 2", "GATE_2", " Gate  2 "])
def test_priority_gate_prefix(gate):
    assert queue_prefix(gate) == "A"


def test_other_gates_prefix():
    assert queue_prefix("GATE 1") == "B"
    assert queue_prefix("GATE 22") == "B"


def test_next_queue_number_counts_numbered_occupants():
    assert next_queue_number(RECORDS, "GATE 2") == "A-004"
    assert next_queue_number(RECORDS, "GATE 1") == "B-003"
    assert next_queue_number([], "GATE 3") == "B-001"
