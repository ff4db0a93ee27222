from __future__ import annotations

from collections.abc import Iterable

from catalog_admin.models.categories import Category


def index_by_id(records: Iterable[Category]) -> dict[str, Category]:
    """Map ids to records. On duplicate ids the first record wins."""
    index: dict[str, Category] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def unique_records(records: Iterable[Category]) -> list[Category]:
    seen: set[str] = set()
    unique: list[Category] = []
    for record in records:
        if record.id in seen:
            continue
        seen.add(record.id)
        unique.append(record)
    return unique


def group_by_parent(records: Iterable[Category]) -> dict[str | None, list[Category]]:
    """Group records under their parent id, keeping input order per group."""
    groups: dict[str | None, list[Category]] = {}
    for record in unique_records(records):
        groups.setdefault(record.parent_id, []).append(record)
    return groups
