"""Local checks for parent assignments.

The catalog backend stays the final authority; these checks only make sure
an edit that would break the forest is never forwarded.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from catalog_admin.hierarchy.index import index_by_id
from catalog_admin.hierarchy.resolver import descendant_ids
from catalog_admin.models.categories import Category


class RejectionReason(str, Enum):
    self_parent = "self-parent"
    parent_not_found = "parent not found"
    parent_inactive = "parent must be active"
    circular_reference = "circular reference"


@dataclass(frozen=True, slots=True)
class ReparentDecision:
    reason: RejectionReason | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None


ALLOWED = ReparentDecision()


def validate_reparent(
    category_id: str | None,
    proposed_parent_id: str | None,
    records: Sequence[Category],
) -> ReparentDecision:
    """Decide whether ``category_id`` may be placed under ``proposed_parent_id``.

    ``category_id`` is ``None`` for a category that does not exist yet, in
    which case neither the self-parent nor the circular check can apply.
    The first matching rule wins:

    1. moving to the root is always allowed;
    2. a category cannot be its own parent;
    3. the parent must exist;
    4. the parent must be active;
    5. the parent cannot be one of the category's descendants.
    """
    if proposed_parent_id is None:
        return ALLOWED
    if category_id is not None and proposed_parent_id == category_id:
        return ReparentDecision(RejectionReason.self_parent)
    parent = index_by_id(records).get(proposed_parent_id)
    if parent is None:
        return ReparentDecision(RejectionReason.parent_not_found)
    if not parent.is_active:
        return ReparentDecision(RejectionReason.parent_inactive)
    if category_id is not None and proposed_parent_id in descendant_ids(
        category_id, records
    ):
        return ReparentDecision(RejectionReason.circular_reference)
    return ALLOWED


def available_parents(
    category_id: str | None, records: Iterable[Category]
) -> list[Category]:
    """Records a form may offer as the parent of ``category_id``."""
    records = list(records)
    excluded: set[str] = set()
    if category_id is not None:
        excluded = descendant_ids(category_id, records) | {category_id}
    seen: set[str] = set()
    parents: list[Category] = []
    for record in records:
        if record.id in excluded or record.id in seen or not record.is_active:
            continue
        seen.add(record.id)
        parents.append(record)
    return parents
