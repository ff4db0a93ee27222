from __future__ import annotations

from collections.abc import Sequence

import httpx
from fastapi import Depends

from catalog_admin import upstream
from catalog_admin.auth import get_admin_token
from catalog_admin.hierarchy import flatten_tree
from catalog_admin.models import (
    CatalogCategory,
    CatalogEnvelope,
    Category,
    CategoryStatus,
)

CATEGORIES_PATH = "/admin/categories"

_UPSTREAM_FIELDS = {
    "name": "name",
    "image": "image",
    "order": "order",
    "parent_id": "parentId",
    "header_category_id": "headerCategoryId",
    "status": "status",
    "is_bestseller": "isBestseller",
    "has_warning": "hasWarning",
    "group_category": "groupCategory",
    "commission_rate": "commissionRate",
}


class CategoriesDataAccess:
    def __init__(
        self,
        client: httpx.AsyncClient = Depends(upstream.get_client),
        token: str = Depends(get_admin_token),
    ) -> None:
        self._client = client
        self._headers = {"Authorization": f"Bearer {token}"}

    async def list_categories(self) -> list[Category]:
        response = await self._client.get(
            CATEGORIES_PATH,
            params={"includeChildren": "true"},
            headers=self._headers,
        )
        payload = _read_envelope(response)
        items = payload.data or []
        return flatten_tree(
            _to_category(CatalogCategory.model_validate(item)) for item in items
        )

    async def create_category(self, fields: dict[str, object]) -> Category:
        response = await self._client.post(
            CATEGORIES_PATH,
            json=_to_upstream_fields(fields),
            headers=self._headers,
        )
        payload = _read_envelope(response)
        return _to_category(CatalogCategory.model_validate(payload.data))

    async def update_category(
        self, category_id: str, updates: dict[str, object]
    ) -> Category | None:
        response = await self._client.put(
            f"{CATEGORIES_PATH}/{category_id}",
            json=_to_upstream_fields(updates),
            headers=self._headers,
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        payload = _read_envelope(response)
        return _to_category(CatalogCategory.model_validate(payload.data))

    async def set_status(
        self, category_id: str, status: CategoryStatus, *, cascade: bool
    ) -> bool:
        response = await self._client.patch(
            f"{CATEGORIES_PATH}/{category_id}/status",
            json={"status": status.value, "cascadeToChildren": cascade},
            headers=self._headers,
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        _read_envelope(response)
        return True

    async def reorder_categories(self, assignments: Sequence[tuple[str, int]]) -> None:
        response = await self._client.put(
            f"{CATEGORIES_PATH}/reorder",
            json={
                "categories": [
                    {"id": category_id, "order": order}
                    for category_id, order in assignments
                ]
            },
            headers=self._headers,
        )
        _read_envelope(response)

    async def delete_category(self, category_id: str) -> bool:
        response = await self._client.delete(
            f"{CATEGORIES_PATH}/{category_id}",
            headers=self._headers,
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        _read_envelope(response)
        return True

    async def bulk_delete_categories(self, category_ids: Sequence[str]) -> None:
        response = await self._client.post(
            f"{CATEGORIES_PATH}/bulk-delete",
            json={"categoryIds": list(category_ids)},
            headers=self._headers,
        )
        _read_envelope(response)


class CatalogRejectedError(Exception):
    """The catalog service answered with ``success: false``."""

    def __init__(self, message: str | None) -> None:
        super().__init__(message or "Catalog service rejected the request.")
        self.message = message


def _read_envelope(response: httpx.Response) -> CatalogEnvelope:
    response.raise_for_status()
    payload = CatalogEnvelope.model_validate(response.json())
    if not payload.success:
        raise CatalogRejectedError(payload.message)
    return payload


def _to_upstream_fields(fields: dict[str, object]) -> dict[str, object]:
    converted: dict[str, object] = {}
    for field, value in fields.items():
        if isinstance(value, CategoryStatus):
            value = value.value
        converted[_UPSTREAM_FIELDS.get(field, field)] = value
    return converted


def _to_category(
    category: CatalogCategory, nested_under: str | None = None
) -> Category:
    # Nested children may omit parentId; their position implies it.
    parent_id = category.parent.id if category.parent is not None else nested_under
    header = category.header_reference
    header_name = header.name if header is not None else None
    populated = category.header_category_populated
    if header_name is None and populated is not None and header is not None:
        if populated.id == header.id:
            header_name = populated.name
    children = None
    if category.children is not None:
        children = tuple(
            _to_category(child, nested_under=category.id) for child in category.children
        )
    return Category(
        id=category.id,
        name=category.name,
        parent_id=parent_id,
        order=category.order,
        status=category.status,
        header_category_id=header.id if header is not None else None,
        header_category_name=header_name,
        image=category.image,
        is_bestseller=category.is_bestseller,
        has_warning=category.has_warning,
        group_category=category.group_category,
        commission_rate=category.commission_rate,
        children=children,
    )
