"""Check-in form helper schemas: geofence, PO number, plate, wizard."""

from datetime import date
from enum import Enum

from pydantic import Field

from gatequeue.domain.enums import EntryType, PoEntity, Priority, Purpose
from gatequeue.schemas.common import CamelModel
from gatequeue.schemas.driver import LocationIn


class WizardStep(str, Enum):
    ENTRY_TYPE = "ENTRY_TYPE"
    IDENTITY = "IDENTITY"
    CARGO = "CARGO"
    DOCUMENT = "DOCUMENT"
    REVIEW = "REVIEW"


# ---------------------------------------------------------------------------
# Geofence
# ---------------------------------------------------------------------------

class GeofenceOut(CamelModel):
    status: str
    allowed: bool
    distance_m: int | None = None
    radius_m: float
    note: str


# ---------------------------------------------------------------------------
# PO number / PIC
# ---------------------------------------------------------------------------

class PoNumberRequest(CamelModel):
    entity: PoEntity = PoEntity.SBI
    year: str | None = None
    sequence: str | None = None
    free_text: str | None = None
    pic: str | None = None

class PoNumberOut(CamelModel):
    do_number: str
    complete: bool
    pic: str
    pic_locked: bool


# ---------------------------------------------------------------------------
# Licence plate
# ---------------------------------------------------------------------------

class LicensePlateRequest(CamelModel):
    prefix: str = ""
    number: str = ""
    suffix: str = ""

class LicensePlateOut(CamelModel):
    license_plate: str


# ---------------------------------------------------------------------------
# Wizard
# ---------------------------------------------------------------------------

class CheckInDraft(CamelModel):
    """Everything the wizard has collected so far; passed forward by the client."""

    # ENTRY_TYPE
    entry_type: EntryType | None = None
    # IDENTITY
    name: str | None = None
    phone: str | None = None
    plate_prefix: str | None = None
    plate_number: str | None = None
    plate_suffix: str | None = None
    # CARGO
    company: str | None = None
    purpose: Purpose = Purpose.UNLOADING
    po_entity: PoEntity = PoEntity.SBI
    po_year: str = Field(default_factory=lambda: str(date.today().year))
    po_sequence: str | None = None
    # free text document number, used when po_entity is OTHER
    do_number: str | None = None
    pic: str | None = None
    item_type: str | None = None
    priority: Priority = Priority.NORMAL
    notes: str | None = None
    # DOCUMENT
    document_file: str | None = None

class WizardAdvanceRequest(CamelModel):
    step: WizardStep
    draft: CheckInDraft = Field(default_factory=CheckInDraft)
    input: dict = Field(default_factory=dict)

class WizardBackRequest(CamelModel):
    step: WizardStep
    draft: CheckInDraft = Field(default_factory=CheckInDraft)

class WizardSubmitRequest(CamelModel):
    draft: CheckInDraft
    location: LocationIn | None = None

class WizardState(CamelModel):
    step: WizardStep
    draft: CheckInDraft
    license_plate: str
    do_number: str
    pic_locked: bool
