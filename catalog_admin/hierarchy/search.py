"""Name search and status filtering over the flat category list."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from catalog_admin.hierarchy.index import index_by_id, unique_records
from catalog_admin.hierarchy.resolver import ancestor_path
from catalog_admin.hierarchy.tree import build_tree
from catalog_admin.models.categories import Category, StatusFilter


def matches_query(record: Category, query: str) -> bool:
    needle = query.strip().casefold()
    return not needle or needle in record.name.casefold()


def matches_status(record: Category, status: StatusFilter) -> bool:
    return status == StatusFilter.all or record.status.value == status.value


def filter_categories(
    records: Iterable[Category],
    query: str = "",
    status: StatusFilter = StatusFilter.all,
    *,
    widen: bool = False,
) -> list[Category]:
    """Return the records matching ``query`` and ``status``.

    With ``widen`` the matches are followed by the direct children of every
    match (one level, deduplicated by id) so a tree view can still show the
    children of a matching parent.
    """
    records = unique_records(records)
    matches = [
        record
        for record in records
        if matches_query(record, query) and matches_status(record, status)
    ]
    if not widen:
        return matches

    matching_ids = {record.id for record in matches}
    widened = list(matches)
    for record in records:
        if record.id in matching_ids:
            continue
        if record.parent_id is not None and record.parent_id in matching_ids:
            widened.append(record)
    return widened


def visible_tree(
    records: Iterable[Category],
    query: str = "",
    status: StatusFilter = StatusFilter.all,
    *,
    expanded_ids: Collection[str] | None = None,
) -> list[Category]:
    """Build the forest shown by the tree view for a search.

    The widened matches are extended with their ancestor chains so that
    every visible node stays reachable from a root.
    """
    records = unique_records(records)
    if not query.strip() and status == StatusFilter.all:
        return build_tree(records, expanded_ids=expanded_ids)

    visible_ids: set[str] = set()
    for record in filter_categories(records, query, status, widen=True):
        if record.id in visible_ids:
            continue
        visible_ids.update(ancestor.id for ancestor in ancestor_path(record.id, records))

    index = index_by_id(records)
    arena = [index[category_id] for category_id in index if category_id in visible_ids]
    return build_tree(arena, expanded_ids=expanded_ids)
