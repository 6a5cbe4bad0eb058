"""Generic record store request body."""

from typing import Any

from gatequeue.schemas.common import CamelModel
from gatequeue.services.store import StoreAction

class StoreRequest(CamelModel):
    action: StoreAction
    table: str = "drivers"
    data: dict[str, Any] | None = None
    actor: str = "Manager"
