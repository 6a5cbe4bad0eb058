"""Activity log repository — append and read only."""


from gatequeue.core.config import settings
from gatequeue.core.exceptions import ValidationError
from gatequeue.domain.activity import ActivityLog
from gatequeue.repositories.base import BaseRepository


class ActivityLogRepository(BaseRepository[ActivityLog]):
    model = ActivityLog
    default_order = ("created_at", "desc")
    default_limit = settings.logs_fetch_limit

    async def update(self, entity_id, **kwargs):
        raise ValidationError("Activity log entries are immutable")

    async def delete(self, entity_id):
        raise ValidationError("Activity log entries cannot be deleted")
