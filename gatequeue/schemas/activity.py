"""Activity log response model."""


from datetime import datetime

from gatequeue.schemas.common import CamelModel

class ActivityLogOut(CamelModel):
    id: str
    user_email: str
    action: str
    details: str | None = None
    created_at: datetime
