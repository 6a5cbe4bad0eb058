"""Record store adapter — generic table access for configuration screens.

Exposes get-all / create / update / delete over the five permitted tables
with camelCase field names on the outside and snake_case columns inside.
The queue state machine talks to the typed repositories directly; this
adapter is the generic surface used by configuration screens and by
``POST /api/v1/store``.

Driver rows cannot be created here, and their lifecycle fields (status,
gate, queue number, stamps) are refused on update: only the queue
transitions move a driver. Every write is committed and then recorded in
the activity log.
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic.alias_generators import to_camel, to_snake
from sqlalchemy import DateTime
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gatequeue.core.exceptions import ConflictError, NotFoundError, ValidationError
from gatequeue.domain.enums import ActivityAction
from gatequeue.repositories.activity import ActivityLogRepository
from gatequeue.repositories.base import BaseRepository
from gatequeue.repositories.directory import DivisionRepository, UserRepository
from gatequeue.repositories.driver import DriverRepository
from gatequeue.repositories.gate import GateRepository
from gatequeue.services.activity import ActivityLogger
from gatequeue.services.documents import DocumentStorage

logger = logging.getLogger(__name__)


class StoreAction(str, Enum):
    GET = "GET"
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


_REPOSITORIES: dict[str, type[BaseRepository]] = {
    "drivers": DriverRepository,
    "users": UserRepository,
    "gates": GateRepository,
    "logs": ActivityLogRepository,
    "divisions": DivisionRepository,
}

ALLOWED_TABLES = frozenset(_REPOSITORIES)


# ---------------------------------------------------------------------------
# Field-name and value normalisation
# ---------------------------------------------------------------------------

def to_row(instance: Any) -> dict[str, Any]:
    """ORM instance → camelCase dict (datetimes as ISO strings)."""
    row: dict[str, Any] = {}
    for column in instance.__table__.columns:
        value = getattr(instance, column.key)
        if isinstance(value, datetime):
            value = value.isoformat()
        row[to_camel(column.key)] = value
    return row


def _coerce(column, value: Any) -> Any:
    if value is None or not isinstance(column.type, DateTime):
        return value
    if isinstance(value, datetime):
        return value
    # Epoch milliseconds, as sent by browser clients
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise ValidationError(f"Field '{to_camel(column.key)}' is not a valid timestamp") from exc


def from_row(repo_cls: type[BaseRepository], data: dict[str, Any]) -> dict[str, Any]:
    """camelCase (or snake_case) dict → column kwargs. Unknown fields are rejected."""
    columns = {c.key: c for c in repo_cls.model.__table__.columns}
    fields: dict[str, Any] = {}
    unknown: list[str] = []
    for key, value in data.items():
        column_name = to_snake(key)
        if column_name not in columns:
            unknown.append(key)
            continue
        fields[column_name] = _coerce(columns[column_name], value)
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(sorted(unknown))}")
    return fields


def _missing_required(repo_cls: type[BaseRepository], fields: dict[str, Any]) -> list[str]:
    missing = []
    for column in repo_cls.model.__table__.columns:
        has_default = column.default is not None or column.server_default is not None
        if not column.nullable and not has_default and fields.get(column.key) in (None, ""):
            missing.append(to_camel(column.key))
    return missing


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------

# Driver fields owned by the queue state machine; only its transitions write them
DRIVER_LIFECYCLE_FIELDS = frozenset({
    "status", "gate", "queue_number",
    "check_in_time", "arrived_at_gate_time", "verified_time", "called_time",
    "loading_start_time", "end_time", "exit_time",
    "verified_by", "called_by", "exit_verified_by", "rejection_reason",
})

# table -> (create, update, delete) tags; writes to the log table itself are not logged
_ACTIONS: dict[str, tuple[ActivityAction, ActivityAction, ActivityAction]] = {
    "users": (ActivityAction.ADD_USER, ActivityAction.UPDATE_USER, ActivityAction.DELETE_USER),
    "gates": (ActivityAction.SAVE_GATE, ActivityAction.SAVE_GATE, ActivityAction.DELETE_GATE),
    "divisions": (
        ActivityAction.SAVE_DIVISION, ActivityAction.SAVE_DIVISION, ActivityAction.DELETE_DIVISION,
    ),
    "drivers": (
        ActivityAction.UPDATE_DRIVER, ActivityAction.UPDATE_DRIVER, ActivityAction.DELETE_DRIVER,
    ),
}


def _action(table: str, index: int) -> ActivityAction | None:
    tags = _ACTIONS.get(table)
    return tags[index] if tags else None


class RecordStore:
    def __init__(
        self,
        session: AsyncSession,
        documents: DocumentStorage | None = None,
        log_sessions: async_sessionmaker[AsyncSession] | None = None,
    ):
        self._session = session
        self._documents = documents or DocumentStorage()
        self._activity = ActivityLogger(log_sessions)

    def _repo_cls(self, table: str) -> type[BaseRepository]:
        try:
            return _REPOSITORIES[table]
        except KeyError:
            raise ValidationError(f"Table '{table}' is not allowed.") from None

    async def _commit_and_log(self, action: ActivityAction | None, details: str, actor: str) -> None:
        await self._session.commit()
        if action is not None:
            await self._activity.record(action, details, actor)

    async def get(self, table: str) -> list[dict[str, Any]]:
        repo = self._repo_cls(table)(self._session)
        return [to_row(item) for item in await repo.list_all()]

    async def create(self, table: str, row: dict[str, Any], actor: str = "Manager") -> dict[str, Any]:
        repo_cls = self._repo_cls(table)
        if table == "drivers":
            raise ValidationError("Drivers are created through check-in, not the record store")
        fields = from_row(repo_cls, row)

        # Per-table defaults applied on create
        if table == "gates" and not fields.get("id"):
            fields["id"] = f"gate-{int(time.time() * 1000)}"
        elif table == "divisions" and fields.get("id"):
            fields["id"] = fields["id"].upper()
            fields.setdefault("theme", "slate")
        elif table == "users":
            fields["status"] = "ACTIVE"
        elif table == "logs":
            fields.setdefault("id", str(uuid.uuid4()))

        missing = _missing_required(repo_cls, fields)
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")

        repo = repo_cls(self._session)
        if await repo.get_by_id(fields["id"]):
            raise ConflictError(f"{table} '{fields['id']}' already exists")

        await repo.create(**fields)
        label = fields.get("name") or fields["id"]
        await self._commit_and_log(_action(table, 0), f"Created {table} {label}", actor)
        return {"success": True, "fileUrl": None}

    async def update(self, table: str, row: dict[str, Any], actor: str = "Manager") -> dict[str, Any]:
        repo_cls = self._repo_cls(table)
        entity_id = (row or {}).get("id")
        if not entity_id:
            raise ValidationError("ID is required for UPDATE")
        fields = from_row(repo_cls, {k: v for k, v in row.items() if k != "id"})

        file_url = None
        if table == "drivers":
            locked = sorted(to_camel(k) for k in fields if k in DRIVER_LIFECYCLE_FIELDS)
            if locked:
                raise ValidationError(
                    f"Field(s) {', '.join(locked)} change only through queue transitions"
                )
            if "document_file" in fields:
                file_url = self._documents.resolve(fields["document_file"], entity_id)
                fields["document_file"] = file_url

        updated = await repo_cls(self._session).update(entity_id, **fields)
        if updated is None:
            raise NotFoundError(table, entity_id)

        label = getattr(updated, "name", entity_id)
        await self._commit_and_log(_action(table, 1), f"Updated {table} {label}", actor)
        if table == "drivers":
            return {"success": True, "fileUrl": file_url}
        return {"success": True}

    async def delete(self, table: str, row: dict[str, Any], actor: str = "Manager") -> dict[str, Any]:
        repo_cls = self._repo_cls(table)
        entity_id = (row or {}).get("id")
        if not entity_id:
            raise ValidationError("ID is required for DELETE")
        if not await repo_cls(self._session).delete(entity_id):
            raise NotFoundError(table, entity_id)
        await self._commit_and_log(_action(table, 2), f"Deleted {table} {entity_id}", actor)
        return {"success": True}

    async def dispatch(
        self,
        action: StoreAction,
        table: str,
        data: dict[str, Any] | None = None,
        actor: str = "Manager",
    ) -> Any:
        """Run one store operation selected by ``action``."""
        logger.debug("Store %s on %s by %s", action.value, table, actor)
        if action is StoreAction.GET:
            return await self.get(table)
        if action is StoreAction.CREATE:
            return await self.create(table, data or {}, actor)
        if action is StoreAction.UPDATE:
            return await self.update(table, data or {}, actor)
        return await self.delete(table, data or {}, actor)
