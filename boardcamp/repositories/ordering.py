"""Allow-listed ordering and offset/limit windows shared by list queries."""

from collections.abc import Mapping

from sqlalchemy.orm import Query


def apply_ordering(
    query: Query,
    columns: Mapping[str, object],
    order: str | None,
    desc: bool,
    default,
) -> Query:
    """
    Order a query by a client-supplied sort key.

    `order` is only ever used as a lookup key into `columns`; keys outside
    the allow-list fall back to `default`. Direction applies to either.
    """
    column = columns.get(order, default) if order else default
    return query.order_by(column.desc() if desc else column.asc())


def apply_window(query: Query, offset: int | None, limit: int | None) -> Query:
    """Apply optional offset/limit to a query."""
    if offset is not None:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query
