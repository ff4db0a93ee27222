"""Normalization of category references.

The catalog backend sends ``parentId`` and ``headerCategoryId`` either as a
bare identifier or as an embedded (populated) document carrying ``_id`` or
``id``. Everything downstream of ingestion works with bare ids only, so the
shape check lives here and nowhere else.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class ReferenceKind(str, Enum):
    bare = "bare"
    embedded = "embedded"


@dataclass(frozen=True, slots=True)
class Reference:
    kind: ReferenceKind
    id: str
    name: str | None = None


def normalize_reference(value: object) -> Reference | None:
    """Return a tagged reference for ``value`` or ``None`` when it is empty.

    Unrecognized shapes (lists, booleans, embedded documents without an id)
    are treated as missing rather than rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Reference):
        return value
    if isinstance(value, Mapping):
        raw_id = value.get("_id") or value.get("id")
        reference_id = _bare_id(raw_id)
        if reference_id is None:
            return None
        name = value.get("name")
        return Reference(
            kind=ReferenceKind.embedded,
            id=reference_id,
            name=name if isinstance(name, str) else None,
        )
    reference_id = _bare_id(value)
    if reference_id is None:
        return None
    return Reference(kind=ReferenceKind.bare, id=reference_id)


def reference_id(value: object) -> str | None:
    reference = normalize_reference(value)
    return reference.id if reference is not None else None


def _bare_id(value: object) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    if isinstance(value, (int, uuid.UUID)):
        return str(value)
    return None
