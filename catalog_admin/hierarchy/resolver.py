from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from catalog_admin.hierarchy.index import group_by_parent, index_by_id
from catalog_admin.models.categories import Category


def descendants(category_id: str, records: Iterable[Category]) -> list[Category]:
    """Return every record whose parent chain passes through ``category_id``.

    Breadth-first, nearest generation first. Children are looked up on demand
    from the flat list. A node reached twice (corrupt data with a cycle) is
    not expanded again.
    """
    groups = group_by_parent(records)
    visited: set[str] = {category_id}
    found: list[Category] = []
    queue: deque[str] = deque([category_id])
    while queue:
        current_id = queue.popleft()
        for child in groups.get(current_id, ()):
            if child.id in visited:
                continue
            visited.add(child.id)
            found.append(child)
            queue.append(child.id)
    return found


def descendant_ids(category_id: str, records: Iterable[Category]) -> set[str]:
    return {record.id for record in descendants(category_id, records)}


def ancestor_path(category_id: str, records: Iterable[Category]) -> list[Category]:
    """Return the records from the root down to and including ``category_id``.

    An unknown ``category_id`` gives an empty path. A parent id that does not
    resolve truncates the path at the last known record, and a repeated id
    stops the walk.
    """
    index = index_by_id(records)
    path: list[Category] = []
    visited: set[str] = set()
    current = index.get(category_id)
    while current is not None and current.id not in visited:
        visited.add(current.id)
        path.append(current)
        if current.parent_id is None:
            break
        current = index.get(current.parent_id)
    path.reverse()
    return path
