"""Driver check-in schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from gatequeue.domain.enums import EntryType, Priority, Purpose, QueueStatus
from gatequeue.schemas.common import ActorRequest, CamelModel

class LocationIn(CamelModel):
    """Device position reported by the check-in form; both null when unavailable."""
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    bypass: bool = False

class CheckInCreate(CamelModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    license_plate: str = Field(min_length=1)
    company: str = Field(min_length=1)
    do_number: str = Field(min_length=1)
    entry_type: EntryType = EntryType.WALK_IN
    purpose: Purpose = Purpose.UNLOADING
    priority: Priority = Priority.NORMAL
    pic: str | None = None
    item_type: str | None = None
    notes: str | None = None
    # data: URL (compressed photo) or an already uploaded URL
    document_file: str | None = None
    location: LocationIn | None = None

class VerifyRequest(ActorRequest):
    gate: str | None = None
    notes: str | None = None

class RejectRequest(ActorRequest):
    reason: str = ""

class StatusAdvanceRequest(ActorRequest):
    status: QueueStatus

class DriverOut(CamelModel):
    id: str
    name: str
    phone: str
    license_plate: str
    company: str
    entry_type: EntryType
    purpose: Purpose
    priority: Priority
    do_number: str
    pic: str | None = None
    item_type: str | None = None
    notes: str | None = None
    document_file: str | None = None
    status: QueueStatus
    gate: str | None = None
    queue_number: str | None = None
    check_in_time: datetime
    arrived_at_gate_time: datetime | None = None
    verified_time: datetime | None = None
    called_time: datetime | None = None
    loading_start_time: datetime | None = None
    end_time: datetime | None = None
    exit_time: datetime | None = None
    verified_by: str | None = None
    called_by: str | None = None
    exit_verified_by: str | None = None
    security_notes: str | None = None
    rejection_reason: str | None = None
