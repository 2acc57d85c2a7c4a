"""Caller-side ordering of listed polars."""

from __future__ import annotations

from enum import StrEnum
from typing import Iterable

from .models import Polar


class Order(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SortKey(StrEnum):
    ID = "id"
    POLAR_ID = "_id"


def _id_key(polar: Polar):
    # polars without an id sort before any id
    return (polar.id is not None, polar.id or "")


def sort_polars(
    polars: Iterable[Polar],
    sort_by: str | None = SortKey.ID,
    order: Order | str = Order.ASC,
) -> list[Polar]:
    """Sort by primary key (``id``) or secondary id (``_id``).

    Any other *sort_by* falls back to the primary key.
    """
    order = Order(str(order).lower())
    if sort_by == SortKey.POLAR_ID:
        key = lambda p: p.polar_id  # noqa: E731
    else:
        key = _id_key
    return sorted(polars, key=key, reverse=order is Order.DESC)
