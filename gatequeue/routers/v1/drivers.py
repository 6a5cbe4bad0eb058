"""Driver queue router: check-in, filtered views and every status transition.

Each transition endpoint returns the updated record. Guards are enforced by
:class:`QueueService`; a wrong-status call answers 409 INVALID_TRANSITION.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.core.response import DataResponse
from gatequeue.db.base import get_db, get_session_factory
from gatequeue.schemas.common import ActorRequest
from gatequeue.schemas.driver import (
    CheckInCreate,
    DriverOut,
    RejectRequest,
    StatusAdvanceRequest,
    VerifyRequest,
)
from gatequeue.services.notifier import Notifier, get_notifier
from gatequeue.services.queue import QueueService
from gatequeue.services.views import DriverView

router = APIRouter(prefix="/drivers", tags=["Drivers"])


def _svc(
    session: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
    log_sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> QueueService:
    return QueueService(session, notifier=notifier, log_sessions=log_sessions)


def _out(driver) -> dict:
    return {"data": DriverOut.model_validate(driver)}


# ------------------------------------------------------------------
# Reads
# ------------------------------------------------------------------

@router.get("", response_model=DataResponse[list[DriverOut]])
async def list_drivers(
    view: DriverView = Query(default=DriverView.ALL, description="Named queue view"),
    search: str | None = Query(default=None, description="Plate or name fragment"),
    svc: QueueService = Depends(_svc),
):
    """Newest check-ins first, filtered to one view and an optional search term."""
    drivers = await svc.list_drivers(view, search)
    return {"data": [DriverOut.model_validate(d) for d in drivers]}


@router.get("/counts", response_model=DataResponse[dict[str, int]])
async def view_counts(svc: QueueService = Depends(_svc)):
    counts = await svc.counts()
    return {"data": {view.value: n for view, n in counts.items()}}


@router.get("/{driver_id}", response_model=DataResponse[DriverOut])
async def get_driver(driver_id: str, svc: QueueService = Depends(_svc)):
    return _out(await svc.get_driver(driver_id))


# ------------------------------------------------------------------
# Check-in
# ------------------------------------------------------------------

@router.post("", response_model=DataResponse[DriverOut], status_code=status.HTTP_201_CREATED)
async def check_in(body: CheckInCreate, svc: QueueService = Depends(_svc)):
    """Register a walk-in (CHECKED_IN) or booking (BOOKED) arrival."""
    return _out(await svc.check_in(body))


# ------------------------------------------------------------------
# Transitions
# ------------------------------------------------------------------

@router.post("/{driver_id}/scan", response_model=DataResponse[DriverOut])
async def scan_driver(
    driver_id: str,
    body: ActorRequest | None = None,
    svc: QueueService = Depends(_svc),
):
    actor = body.actor if body else "Security"
    return _out(await svc.scan(driver_id, actor))


@router.post("/{driver_id}/verify", response_model=DataResponse[DriverOut])
async def verify_driver(driver_id: str, body: VerifyRequest, svc: QueueService = Depends(_svc)):
    """Approve a driver at the gate; assigns the gate and a queue number."""
    return _out(await svc.verify(driver_id, body.actor, body.gate, body.notes))


@router.post("/{driver_id}/reject", response_model=DataResponse[DriverOut])
async def reject_driver(driver_id: str, body: RejectRequest, svc: QueueService = Depends(_svc)):
    return _out(await svc.reject(driver_id, body.actor, body.reason))


@router.post("/{driver_id}/call", response_model=DataResponse[DriverOut])
async def call_driver(driver_id: str, body: ActorRequest, svc: QueueService = Depends(_svc)):
    return _out(await svc.call(driver_id, body.actor))


@router.post("/{driver_id}/loading", response_model=DataResponse[DriverOut])
async def start_loading(driver_id: str, body: ActorRequest, svc: QueueService = Depends(_svc)):
    return _out(await svc.start_loading(driver_id, body.actor))


@router.post("/{driver_id}/complete", response_model=DataResponse[DriverOut])
async def complete_loading(driver_id: str, body: ActorRequest, svc: QueueService = Depends(_svc)):
    return _out(await svc.complete(driver_id, body.actor))


@router.post("/{driver_id}/exit", response_model=DataResponse[DriverOut])
async def gate_out(
    driver_id: str,
    body: ActorRequest | None = None,
    svc: QueueService = Depends(_svc),
):
    actor = body.actor if body else "Security Out"
    return _out(await svc.gate_out(driver_id, actor))


@router.post("/{driver_id}/status", response_model=DataResponse[DriverOut])
async def advance_status(
    driver_id: str, body: StatusAdvanceRequest, svc: QueueService = Depends(_svc)
):
    """Admin shortcut for CALLED, LOADING, COMPLETED or EXITED."""
    return _out(await svc.advance(driver_id, body.status, body.actor))
