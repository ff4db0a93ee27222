"""Conversion between the flat category list and the nested forest."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import replace

from catalog_admin.hierarchy.index import group_by_parent
from catalog_admin.models.categories import Category


def build_tree(
    records: Iterable[Category],
    parent_id: str | None = None,
    *,
    expanded_ids: Collection[str] | None = None,
) -> list[Category]:
    """Build the ordered forest rooted at ``parent_id``.

    Siblings are sorted by ``order``; the sort is stable, so equal ranks keep
    their input order. When ``expanded_ids`` is given, nodes outside it are
    returned with ``children=None`` (not computed) instead of being walked.
    """
    groups = group_by_parent(records)
    return _build_level(groups, parent_id, frozenset(), expanded_ids)


def _build_level(
    groups: dict[str | None, list[Category]],
    parent_id: str | None,
    path: frozenset[str],
    expanded_ids: Collection[str] | None,
) -> list[Category]:
    nodes: list[Category] = []
    for record in sorted(groups.get(parent_id, ()), key=_sibling_rank):
        if record.id in path:
            continue
        if expanded_ids is not None and record.id not in expanded_ids:
            nodes.append(replace(record, children=None))
            continue
        children = _build_level(groups, record.id, path | {record.id}, expanded_ids)
        nodes.append(replace(record, children=tuple(children)))
    return nodes


def _sibling_rank(record: Category) -> int:
    return record.order


def flatten_tree(records: Iterable[Category]) -> list[Category]:
    """Flatten partially nested records depth-first.

    Returned records carry ``children=None``. Duplicate ids keep the first
    occurrence.
    """
    flat: list[Category] = []
    seen: set[str] = set()
    stack: list[Category] = list(reversed(list(records)))
    while stack:
        record = stack.pop()
        if record.id in seen:
            continue
        seen.add(record.id)
        flat.append(replace(record, children=None))
        if record.children:
            stack.extend(reversed(record.children))
    return flat


def collect_ids(forest: Iterable[Category]) -> set[str]:
    ids: set[str] = set()
    stack = list(forest)
    while stack:
        node = stack.pop()
        if node.id in ids:
            continue
        ids.add(node.id)
        if node.children:
            stack.extend(node.children)
    return ids


def count_children(records: Iterable[Category]) -> dict[str, int]:
    groups = group_by_parent(records)
    return {
        parent_id: len(children)
        for parent_id, children in groups.items()
        if parent_id is not None
    }


def reorder_siblings(
    records: Iterable[Category],
    parent_id: str | None,
    ordered_ids: Sequence[str],
) -> list[tuple[str, int]] | None:
    """Assign ranks ``1..n`` to the children of ``parent_id``.

    ``ordered_ids`` must list every child exactly once; otherwise ``None``.
    """
    sibling_ids = {record.id for record in group_by_parent(records).get(parent_id, ())}
    if len(ordered_ids) != len(sibling_ids) or set(ordered_ids) != sibling_ids:
        return None
    return [(category_id, rank) for rank, category_id in enumerate(ordered_ids, start=1)]
