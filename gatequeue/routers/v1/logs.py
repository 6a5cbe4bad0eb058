"""Activity log router (read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.core.pagination import PaginationParams
from gatequeue.core.response import ListResponse, paginated
from gatequeue.db.base import get_session_factory
from gatequeue.schemas.activity import ActivityLogOut
from gatequeue.services.activity import ActivityLogger

router = APIRouter(prefix="/logs", tags=["Activity"])


@router.get("", response_model=ListResponse[ActivityLogOut])
async def list_logs(
    pagination: PaginationParams = Depends(),
    sessions: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Newest entries first."""
    items, total = await ActivityLogger(sessions).list_recent(pagination.offset, pagination.limit)
    return paginated(
        [ActivityLogOut.model_validate(e) for e in items],
        total, pagination.page, pagination.limit,
    )
