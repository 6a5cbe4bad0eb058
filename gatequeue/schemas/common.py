"""Shared schema base: the dashboard speaks camelCase, columns are snake_case."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts either casing on input, reads straight from ORM rows, emits camelCase."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class ActorRequest(CamelModel):
    """Body for actions that only need to know who performed them."""
    actor: str = "System"


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
