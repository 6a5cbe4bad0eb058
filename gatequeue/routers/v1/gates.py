"""Gate configuration router, plus the queue number preview used by security."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.core.response import DataResponse
from gatequeue.db.base import get_db, get_session_factory
from gatequeue.schemas.gate import GateCreate, GateOut, GateUpdate, QueueNumberPreview
from gatequeue.services.gates import GateService
from gatequeue.services.queue import QueueService

router = APIRouter(prefix="/gates", tags=["Gates"])


def _svc(
    session: AsyncSession = Depends(get_db),
    log_sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> GateService:
    return GateService(session, log_sessions)


@router.get("", response_model=DataResponse[list[GateOut]])
async def list_gates(svc: GateService = Depends(_svc)):
    return {"data": [GateOut.model_validate(g) for g in await svc.list_gates()]}


@router.get("/open", response_model=DataResponse[list[GateOut]])
async def list_open_gates(svc: GateService = Depends(_svc)):
    """Gates a driver may be approved into."""
    return {"data": [GateOut.model_validate(g) for g in await svc.list_open_gates()]}


@router.get("/{gate_name}/next-queue-number", response_model=DataResponse[QueueNumberPreview])
async def preview_queue_number(gate_name: str, session: AsyncSession = Depends(get_db)):
    number = await QueueService(session).preview_queue_number(gate_name)
    return {"data": QueueNumberPreview(gate=gate_name, queue_number=number)}


@router.post("", response_model=DataResponse[GateOut], status_code=status.HTTP_201_CREATED)
async def create_gate(
    body: GateCreate,
    actor: str = Query(default="Manager"),
    svc: GateService = Depends(_svc),
):
    return {"data": GateOut.model_validate(await svc.create_gate(body, actor))}


@router.put("/{gate_id}", response_model=DataResponse[GateOut])
async def update_gate(
    gate_id: str,
    body: GateUpdate,
    actor: str = Query(default="Manager"),
    svc: GateService = Depends(_svc),
):
    """Rename, retype, or open/close a gate."""
    return {"data": GateOut.model_validate(await svc.update_gate(gate_id, body, actor))}


@router.delete("/{gate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gate(
    gate_id: str,
    actor: str = Query(default="Manager"),
    svc: GateService = Depends(_svc),
):
    await svc.delete_gate(gate_id, actor)
