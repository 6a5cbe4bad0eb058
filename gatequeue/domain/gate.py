"""SQLAlchemy ORM model for gate / dock configuration."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from gatequeue.db.base import Base
from gatequeue.domain.enums import GateStatus, GateType
from gatequeue.domain.mixins import TimestampMixin


class GateConfig(Base, TimestampMixin):
    __tablename__ = "gates"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    # Drivers store the gate by name, not id
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(20), default=GateType.DOCK.value, nullable=False)
    # Only OPEN gates are offered at verification
    status: Mapped[str] = mapped_column(String(20), default=GateStatus.OPEN.value, nullable=False)
