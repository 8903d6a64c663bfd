"""SQL helpers for uuid[] reference columns."""

from typing import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, all_, func, literal, select
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.dialects.postgresql import UUID as PG_UUID

UUID_ARRAY = ARRAY(PG_UUID(as_uuid=True))


def _uuid_literal(value: UUID) -> ColumnElement:
    # Typed bind so array_append resolves against uuid[]
    return literal(value, type_=PG_UUID(as_uuid=True))


def array_append(column: ColumnElement, value: UUID) -> ColumnElement:
    """Build ``array_append(column, value)``."""
    return func.array_append(column, _uuid_literal(value))


def array_remove_all(column: ColumnElement, values: Sequence[UUID]) -> ColumnElement:
    """Build an expression for ``column`` without any of ``values``.

    Renders as::

        ARRAY(SELECT e.value FROM unnest(column) WITH ORDINALITY AS e(value, position)
              WHERE e.value <> ALL(:ids) ORDER BY e.position)

    All ids travel in one uuid[] bind, so the statement has the same shape
    for one id or thousands. Remaining elements keep their order.
    """
    if not values:
        return column
    elements = (
        func.unnest(column)
        .table_valued("value", with_ordinality="position")
        .render_derived()
    )
    kept = (
        select(elements.c.value)
        .where(elements.c.value != all_(literal(list(values), type_=UUID_ARRAY)))
        .order_by(elements.c.position)
    )
    return func.array(kept.scalar_subquery(), type_=UUID_ARRAY)
