"""Generic async repository over one table."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gatequeue.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Subclasses set ``model`` and, optionally, ``default_order`` /
    ``default_limit`` which control how :meth:`list_all` returns rows.
    """

    model: type[ModelT]
    default_order: tuple[str, str] = ("id", "asc")
    default_limit: int | None = None

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @classmethod
    def column_names(cls) -> set[str]:
        return {c.key for c in cls.model.__table__.columns}

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    async def list_all(
        self,
        *,
        offset: int = 0,
        limit: int | None = None,
        filters: dict[str, Any] | None = None,
    ) -> list[ModelT]:
        """Return rows in the repository's default order, capped at its default limit."""
        q = select(self.model)

        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)

        order_by, order = self.default_order
        col = getattr(self.model, order_by)
        q = q.order_by(col.desc() if order == "desc" else col.asc())

        limit = limit if limit is not None else self.default_limit
        if offset:
            q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        q = select(func.count()).select_from(self.model)
        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)
        return (await self._session.execute(q)).scalar_one()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        """Apply ``kwargs`` to one row. Returns None when the row does not exist."""
        kwargs.pop("id", None)
        instance = await self.get_by_id(entity_id)
        if instance is None:
            return None
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self._session.flush()
        return instance

    async def delete(self, entity_id: str) -> bool:
        result = await self._session.execute(
            delete(self.model).where(self.model.id == entity_id)
        )
        await self._session.flush()
        return result.rowcount > 0
