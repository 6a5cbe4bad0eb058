"""Generic record store endpoint.

Single POST taking ``{action, table, data, actor}`` for the dashboard's
configuration screens. Rows travel in camelCase.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.db.base import get_db, get_session_factory
from gatequeue.schemas.store import StoreRequest
from gatequeue.services.store import RecordStore

router = APIRouter(prefix="/store", tags=["Store"])


@router.post("")
async def store(
    body: StoreRequest,
    session: AsyncSession = Depends(get_db),
    log_sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> Any:
    records = RecordStore(session, log_sessions=log_sessions)
    return await records.dispatch(body.action, body.table, body.data, body.actor)
