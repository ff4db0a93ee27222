from __future__ import annotations

from collections.abc import Iterable

from catalog_admin.hierarchy.index import index_by_id
from catalog_admin.models.categories import Category


def header_category_source(
    category_id: str, records: Iterable[Category]
) -> Category | None:
    """Return the nearest record on the ancestor chain with a header category.

    The chain starts at ``category_id`` itself. ``None`` when nothing on the
    chain sets one, a parent is missing, or the chain loops.
    """
    index = index_by_id(records)
    visited: set[str] = set()
    current = index.get(category_id)
    while current is not None and current.id not in visited:
        if current.header_category_id is not None:
            return current
        visited.add(current.id)
        if current.parent_id is None:
            return None
        current = index.get(current.parent_id)
    return None


def resolve_header_category(
    category_id: str, records: Iterable[Category]
) -> str | None:
    source = header_category_source(category_id, records)
    return source.header_category_id if source is not None else None
