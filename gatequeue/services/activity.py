"""Activity log — append-only trail of operator actions.

Entries are written in their own session after the action they describe has
been committed. A write failure is logged and dropped; it never undoes or
blocks that action.
"""


import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.db.base import async_session_factory
from gatequeue.domain.activity import ActivityLog
from gatequeue.domain.enums import ActivityAction
from gatequeue.repositories.activity import ActivityLogRepository

logger = logging.getLogger(__name__)


class ActivityLogger:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self._session_factory = session_factory or async_session_factory

    async def record(
        self, action: ActivityAction | str, details: str, actor: str | None = None
    ) -> ActivityLog | None:
        """Append one entry. Returns None when the entry could not be stored."""
        tag = action.value if isinstance(action, ActivityAction) else action
        try:
            async with self._session_factory() as session:
                entry = await ActivityLogRepository(session).create(
                    user_email=actor or "System", action=tag, details=details
                )
                await session.commit()
        except SQLAlchemyError as exc:
            logger.warning("Activity log write failed for %s: %s", tag, exc)
            return None
        logger.debug("Activity %s by %s: %s", tag, actor or "System", details)
        return entry

    async def list_recent(self, offset: int = 0, limit: int = 50) -> tuple[list[ActivityLog], int]:
        """Newest entries first."""
        async with self._session_factory() as session:
            repo = ActivityLogRepository(session)
            items = await repo.list_all(offset=offset, limit=limit)
            total = await repo.count()
        return items, total
