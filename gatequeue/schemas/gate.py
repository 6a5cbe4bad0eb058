"""Gate configuration schemas."""


from gatequeue.domain.enums import GateStatus, GateType
from gatequeue.schemas.common import CamelModel

class GateCreate(CamelModel):
    id: str | None = None
    name: str
    type: GateType = GateType.DOCK
    status: GateStatus = GateStatus.OPEN

class GateUpdate(CamelModel):
    name: str | None = None
    type: GateType | None = None
    status: GateStatus | None = None

class GateOut(CamelModel):
    id: str
    name: str
    type: GateType
    status: GateStatus

class QueueNumberPreview(CamelModel):
    gate: str
    queue_number: str
