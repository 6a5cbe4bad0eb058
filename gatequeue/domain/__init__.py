"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  driver.py     — Driver check-ins (the queue records)
  gate.py       — Gate / dock configuration
  activity.py   — Immutable activity log (never updated or deleted)
  directory.py  — Operator profiles and divisions
  enums.py      — Closed value sets (statuses, entry types, gate states, ...)
  mixins.py     — Shared TimestampMixin
"""

from gatequeue.domain.activity import ActivityLog
from gatequeue.domain.directory import Division, UserProfile
from gatequeue.domain.driver import Driver
from gatequeue.domain.gate import GateConfig

__all__ = [
    "ActivityLog",
    "Division",
    "Driver",
    "GateConfig",
    "UserProfile",
]
