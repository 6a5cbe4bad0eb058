"""Response envelopes shared by the queue, gate and log endpoints.

Single records and unpaged lists (drivers in a view, open gates) use
`{data}`; the activity log is the only paged collection and uses
`{data, meta}`.
"""


import math
from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from gatequeue.core.pagination import PageMeta

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """`{ data: ... }` for one driver/gate or a projected view."""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ListResponse(BaseModel, Generic[T]):
    """`{ data: [...], meta: {...} }` for the activity log."""

    data: list[T]
    meta: PageMeta

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def paginated(items: list, total: int, page: int, limit: int) -> dict:
    """Wrap one page of rows and its totals for ListResponse."""
    return {
        "data": items,
        "meta": {
            "total": total,
            "page": page,
            "limit": limit,
            "pages": math.ceil(total / limit) if total else 1,
        },
    }
