"""SQLAlchemy ORM model for driver check-ins.

One row per check-in or booking. ``status`` decides which operator view a
record appears in; each lifecycle timestamp is written once by the
transition that owns it (see :mod:`gatequeue.services.queue`).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gatequeue.db.base import Base
from gatequeue.domain.enums import EntryType, Priority, Purpose, QueueStatus
from gatequeue.domain.mixins import TimestampMixin, utcnow


class Driver(Base, TimestampMixin):
    __tablename__ = "drivers"

    # WH-YYYYMMDD-NNN
    id: Mapped[str] = mapped_column(String(20), primary_key=True)

    # Identity
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    license_plate: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    company: Mapped[str] = mapped_column(String(255), nullable=False)

    # Classification
    entry_type: Mapped[str] = mapped_column(
        String(20), default=EntryType.WALK_IN.value, nullable=False
    )
    purpose: Mapped[str] = mapped_column(
        String(20), default=Purpose.UNLOADING.value, nullable=False
    )
    priority: Mapped[str] = mapped_column(
        String(20), default=Priority.NORMAL.value, nullable=False
    )

    # Documents
    do_number: Mapped[str] = mapped_column(String(255), nullable=False)
    pic: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    item_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    document_file: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Lifecycle
    status: Mapped[str] = mapped_column(
        String(20), default=QueueStatus.CHECKED_IN.value, nullable=False, index=True
    )
    gate: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    queue_number: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)

    check_in_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
    arrived_at_gate_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    verified_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    called_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    loading_start_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    end_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    exit_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Who did what
    verified_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    called_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    exit_verified_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    security_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
