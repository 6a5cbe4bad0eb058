"""Check-in form helpers and the server-side wizard.

The wizard is stateless on the server: the client sends the current step and
draft with every call and receives the next state back. ``submit`` runs the
same check-in as ``POST /drivers``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.core.response import DataResponse
from gatequeue.db.base import get_db, get_session_factory
from gatequeue.schemas.checkin import (
    GeofenceOut,
    LicensePlateOut,
    LicensePlateRequest,
    PoNumberOut,
    PoNumberRequest,
    WizardAdvanceRequest,
    WizardBackRequest,
    WizardState,
    WizardSubmitRequest,
)
from gatequeue.schemas.driver import DriverOut, LocationIn
from gatequeue.services import checkin_wizard
from gatequeue.services.checkin_form import (
    assemble_license_plate,
    format_po_number,
    pic_for,
    po_inputs_complete,
)
from gatequeue.services.geofence import check_location
from gatequeue.services.notifier import Notifier, get_notifier
from gatequeue.services.queue import QueueService

router = APIRouter(prefix="/checkin", tags=["Check-in"])


@router.post("/geofence", response_model=DataResponse[GeofenceOut])
async def geofence(body: LocationIn):
    """Classify a device position against the warehouse radius."""
    result = check_location(body.latitude, body.longitude, bypass=body.bypass)
    return {"data": GeofenceOut(
        status=result.status.value,
        allowed=result.allowed,
        distance_m=result.distance_m,
        radius_m=result.radius_m,
        note=result.note,
    )}


@router.post("/po-number", response_model=DataResponse[PoNumberOut])
async def po_number(body: PoNumberRequest):
    pic, locked = pic_for(body.entity, body.pic)
    return {"data": PoNumberOut(
        do_number=format_po_number(body.entity, body.year, body.sequence, body.free_text),
        complete=po_inputs_complete(body.entity, body.sequence, body.free_text),
        pic=pic,
        pic_locked=locked,
    )}


@router.post("/license-plate", response_model=DataResponse[LicensePlateOut])
async def license_plate(body: LicensePlateRequest):
    plate = assemble_license_plate(body.prefix, body.number, body.suffix)
    return {"data": LicensePlateOut(license_plate=plate)}


# ------------------------------------------------------------------
# Wizard
# ------------------------------------------------------------------

@router.post("/wizard/advance", response_model=DataResponse[WizardState])
async def wizard_advance(body: WizardAdvanceRequest):
    return {"data": checkin_wizard.advance(body.step, body.draft, body.input)}


@router.post("/wizard/back", response_model=DataResponse[WizardState])
async def wizard_back(body: WizardBackRequest):
    return {"data": checkin_wizard.back(body.step, body.draft)}


@router.post(
    "/wizard/submit",
    response_model=DataResponse[DriverOut],
    status_code=status.HTTP_201_CREATED,
)
async def wizard_submit(
    body: WizardSubmitRequest,
    session: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    log_sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    data = checkin_wizard.build_check_in(body.draft, body.location)
    svc = QueueService(session, notifier=notifier, log_sessions=log_sessions)
    driver = await svc.check_in(data)
    return {"data": DriverOut.model_validate(driver)}
