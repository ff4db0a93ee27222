from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import asdict

import httpx
from fastapi import Depends, HTTPException, status

from catalog_admin.data_access import CatalogRejectedError, CategoriesDataAccess
from catalog_admin.hierarchy import (
    RejectionReason,
    ReparentDecision,
    ancestor_path,
    available_parents,
    count_children,
    descendants,
    filter_categories,
    header_category_source,
    index_by_id,
    reorder_siblings,
    resolve_header_category,
    validate_reparent,
    visible_tree,
)
from catalog_admin.logging_config import get_logger
from catalog_admin.models import (
    Category,
    CategoryListItem,
    CategoryStatus,
    HeaderCategoryResponse,
    StatusFilter,
)

logger = get_logger(__name__)

LOAD_FAILED_DETAIL = "Failed to load categories."
SAVE_FAILED_DETAIL = "Failed to save category. Please try again."

REJECTION_DETAILS = {
    RejectionReason.self_parent: "Category cannot be its own parent.",
    RejectionReason.parent_not_found: "Parent category not found.",
    RejectionReason.parent_inactive: "Parent category must be active.",
    RejectionReason.circular_reference: (
        "Category cannot be moved under one of its own subcategories."
    ),
}

_UPSTREAM_ERRORS = (httpx.HTTPError, CatalogRejectedError, ValueError)


class CategoriesService:
    def __init__(
        self,
        categories_store: CategoriesDataAccess = Depends(),
    ) -> None:
        self._categories_store = categories_store

    async def _load_snapshot(self) -> list[Category]:
        try:
            return await self._categories_store.list_categories()
        except _UPSTREAM_ERRORS as exc:
            logger.warning("Loading categories failed", error=str(exc))
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=LOAD_FAILED_DETAIL,
            ) from exc

    @staticmethod
    def _require_category(snapshot: list[Category], category_id: str) -> Category:
        category = index_by_id(snapshot).get(category_id)
        if category is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found.",
            )
        return category

    @staticmethod
    def _require_parent(
        category_id: str | None, parent_id: str | None, snapshot: list[Category]
    ) -> None:
        decision = validate_reparent(category_id, parent_id, snapshot)
        if decision.ok:
            return
        logger.info(
            "Parent assignment rejected",
            category_id=category_id,
            parent_id=parent_id,
            reason=decision.reason.value,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=REJECTION_DETAILS[decision.reason],
        )

    @staticmethod
    def _require_header_category(
        parent_id: str | None, snapshot: list[Category]
    ) -> str:
        if parent_id is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Header category is required.",
            )
        inherited = resolve_header_category(str(parent_id), snapshot)
        if inherited is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Parent category does not have a header category assigned.",
            )
        return inherited

    @staticmethod
    def _save_failed(action: str, exc: Exception, **context: object) -> HTTPException:
        logger.warning(
            "Catalog service rejected write", action=action, error=str(exc), **context
        )
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=SAVE_FAILED_DETAIL,
        )

    async def list_categories(
        self, *, query: str = "", status_filter: StatusFilter = StatusFilter.all
    ) -> list[CategoryListItem]:
        snapshot = await self._load_snapshot()
        child_counts = count_children(snapshot)
        return [
            CategoryListItem(
                **asdict(category), children_count=child_counts.get(category.id, 0)
            )
            for category in filter_categories(snapshot, query, status_filter)
        ]

    async def get_tree(
        self,
        *,
        query: str = "",
        status_filter: StatusFilter = StatusFilter.all,
        expanded_ids: Collection[str] | None = None,
    ) -> list[Category]:
        snapshot = await self._load_snapshot()
        return visible_tree(snapshot, query, status_filter, expanded_ids=expanded_ids)

    async def get_category(self, category_id: str) -> Category:
        snapshot = await self._load_snapshot()
        return self._require_category(snapshot, category_id)

    async def get_descendants(self, category_id: str) -> list[Category]:
        snapshot = await self._load_snapshot()
        self._require_category(snapshot, category_id)
        return descendants(category_id, snapshot)

    async def get_ancestors(self, category_id: str) -> list[Category]:
        snapshot = await self._load_snapshot()
        self._require_category(snapshot, category_id)
        return ancestor_path(category_id, snapshot)

    async def list_available_parents(self, category_id: str | None) -> list[Category]:
        snapshot = await self._load_snapshot()
        if category_id is not None:
            self._require_category(snapshot, category_id)
        return available_parents(category_id, snapshot)

    async def get_header_category(self, category_id: str) -> HeaderCategoryResponse:
        snapshot = await self._load_snapshot()
        self._require_category(snapshot, category_id)
        source = header_category_source(category_id, snapshot)
        return HeaderCategoryResponse(
            category_id=category_id,
            header_category_id=source.header_category_id if source else None,
            source_category_id=source.id if source else None,
            inherited=source is not None and source.id != category_id,
        )

    async def check_parent(
        self, category_id: str | None, parent_id: str | None
    ) -> ReparentDecision:
        snapshot = await self._load_snapshot()
        if category_id is not None:
            self._require_category(snapshot, category_id)
        return validate_reparent(category_id, parent_id, snapshot)

    async def create_category(self, fields: dict[str, object]) -> Category:
        snapshot = await self._load_snapshot()
        parent_id = fields.get("parent_id")

        if parent_id is None:
            if fields.get("header_category_id") is None:
                self._require_header_category(None, snapshot)
        else:
            self._require_parent(None, str(parent_id), snapshot)
            inherited = self._require_header_category(parent_id, snapshot)
            fields = {**fields, "header_category_id": inherited}

        try:
            category = await self._categories_store.create_category(fields)
        except _UPSTREAM_ERRORS as exc:
            raise self._save_failed("create", exc, parent_id=parent_id) from exc
        logger.info("Category created", category_id=category.id, parent_id=parent_id)
        return category

    async def update_category(
        self, category_id: str, updates: dict[str, object]
    ) -> Category:
        snapshot = await self._load_snapshot()
        category = self._require_category(snapshot, category_id)

        parent_id = category.parent_id
        parent_changed = False
        if "parent_id" in updates:
            parent_id = updates["parent_id"]
            parent_changed = parent_id != category.parent_id
            if parent_changed:
                self._require_parent(category.id, parent_id, snapshot)

        if parent_changed or "header_category_id" in updates:
            header_category_id = updates.get(
                "header_category_id", category.header_category_id
            )
            if header_category_id is None:
                self._require_header_category(parent_id, snapshot)

        try:
            updated_category = await self._categories_store.update_category(
                category.id, updates
            )
        except _UPSTREAM_ERRORS as exc:
            raise self._save_failed("update", exc, category_id=category.id) from exc
        if updated_category is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found.",
            )
        return updated_category

    async def set_status(
        self, category_id: str, new_status: CategoryStatus, *, cascade: bool
    ) -> list[str]:
        snapshot = await self._load_snapshot()
        category = self._require_category(snapshot, category_id)
        affected_ids = [category.id]
        if cascade:
            affected_ids.extend(
                record.id for record in descendants(category.id, snapshot)
            )

        try:
            updated = await self._categories_store.set_status(
                category.id, new_status, cascade=cascade
            )
        except _UPSTREAM_ERRORS as exc:
            raise self._save_failed("status", exc, category_id=category.id) from exc
        if not updated:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found.",
            )
        return affected_ids

    async def reorder_children(
        self, parent_id: str | None, ordered_ids: Sequence[str]
    ) -> list[tuple[str, int]]:
        snapshot = await self._load_snapshot()
        if parent_id is not None:
            self._require_category(snapshot, parent_id)
        assignments = reorder_siblings(snapshot, parent_id, ordered_ids)
        if assignments is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Order must list every subcategory exactly once.",
            )

        try:
            await self._categories_store.reorder_categories(assignments)
        except _UPSTREAM_ERRORS as exc:
            raise self._save_failed("reorder", exc, parent_id=parent_id) from exc
        return assignments

    async def delete_category(self, category_id: str) -> None:
        snapshot = await self._load_snapshot()
        self._require_category(snapshot, category_id)
        try:
            deleted = await self._categories_store.delete_category(category_id)
        except _UPSTREAM_ERRORS as exc:
            raise self._save_failed("delete", exc, category_id=category_id) from exc
        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found.",
            )

    async def bulk_delete_categories(self, category_ids: Sequence[str]) -> None:
        snapshot = await self._load_snapshot()
        for category_id in category_ids:
            self._require_category(snapshot, category_id)
        try:
            await self._categories_store.bulk_delete_categories(
                list(dict.fromkeys(category_ids))
            )
        except _UPSTREAM_ERRORS as exc:
            raise self._save_failed(
                "bulk-delete", exc, count=len(category_ids)
            ) from exc
