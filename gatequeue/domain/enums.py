"""Closed value sets shared by models, schemas and services."""

from enum import Enum


class QueueStatus(str, Enum):
    """Lifecycle of a driver check-in."""
    BOOKED = "BOOKED"
    CHECKED_IN = "CHECKED_IN"
    AT_GATE = "AT_GATE"
    VERIFIED = "VERIFIED"
    CALLED = "CALLED"
    LOADING = "LOADING"
    COMPLETED = "COMPLETED"
    EXITED = "EXITED"
    REJECTED = "REJECTED"


TERMINAL_STATUSES = frozenset({QueueStatus.EXITED, QueueStatus.REJECTED})


class EntryType(str, Enum):
    WALK_IN = "WALK_IN"
    BOOKING = "BOOKING"


class Purpose(str, Enum):
    LOADING = "LOADING"
    UNLOADING = "UNLOADING"


class Priority(str, Enum):
    NORMAL = "NORMAL"
    URGENT = "URGENT"


class GateType(str, Enum):
    DOCK = "DOCK"
    ENTRY = "ENTRY"


class GateStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class PoEntity(str, Enum):
    """Internal company a purchase order belongs to; OTHER means free text."""
    SBI = "SBI"
    SDI = "SDI"
    SRI = "SRI"
    OTHER = "OTHER"


class ActivityAction(str, Enum):
    CHECK_IN = "CHECK_IN"
    SCAN_DRIVER = "SCAN_DRIVER"
    VERIFY_DRIVER = "VERIFY_DRIVER"
    REJECT_DRIVER = "REJECT_DRIVER"
    CALL_DRIVER = "CALL_DRIVER"
    UPDATE_STATUS = "UPDATE_STATUS"
    SAVE_GATE = "SAVE_GATE"
    DELETE_GATE = "DELETE_GATE"
    ADD_USER = "ADD_USER"
    UPDATE_USER = "UPDATE_USER"
    DELETE_USER = "DELETE_USER"
    SAVE_DIVISION = "SAVE_DIVISION"
    DELETE_DIVISION = "DELETE_DIVISION"
    UPDATE_DRIVER = "UPDATE_DRIVER"
    DELETE_DRIVER = "DELETE_DRIVER"
