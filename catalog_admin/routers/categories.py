from fastapi import APIRouter, Depends, Query, status

from catalog_admin.models import (
    Category,
    CategoryBulkDelete,
    CategoryCreate,
    CategoryListItem,
    CategoryListItemResponse,
    CategoryResponse,
    CategoryStatusResponse,
    CategoryStatusUpdate,
    CategoryTreeResponse,
    CategoryUpdate,
    ChildrenOrderUpdate,
    HeaderCategoryResponse,
    ReparentCheck,
    ReparentCheckResponse,
    SiblingOrderResponse,
    StatusFilter,
)
from catalog_admin.routers.utils import extract_updates
from catalog_admin.services import CategoriesService

router = APIRouter(prefix="/categories")

NULLABLE_UPDATE_FIELDS = ("parent_id", "header_category_id", "image", "group_category")


@router.get("", response_model=list[CategoryListItemResponse])
async def list_categories(
    q: str = "",
    status_filter: StatusFilter = Query(StatusFilter.all, alias="status"),
    categories_service: CategoriesService = Depends(),
) -> list[CategoryListItem]:
    return await categories_service.list_categories(query=q, status_filter=status_filter)


@router.get("/tree", response_model=list[CategoryTreeResponse])
async def get_category_tree(
    q: str = "",
    status_filter: StatusFilter = Query(StatusFilter.all, alias="status"),
    expanded: list[str] | None = Query(None),
    categories_service: CategoriesService = Depends(),
) -> list[Category]:
    return await categories_service.get_tree(
        query=q, status_filter=status_filter, expanded_ids=expanded
    )


@router.get("/available-parents", response_model=list[CategoryResponse])
async def list_root_available_parents(
    categories_service: CategoriesService = Depends(),
) -> list[Category]:
    return await categories_service.list_available_parents(None)


@router.post("/validate-parent", response_model=ReparentCheckResponse)
async def validate_parent(
    payload: ReparentCheck,
    categories_service: CategoriesService = Depends(),
) -> ReparentCheckResponse:
    decision = await categories_service.check_parent(
        payload.category_id, payload.parent_id
    )
    return ReparentCheckResponse(
        ok=decision.ok,
        reason=decision.reason.value if decision.reason is not None else None,
    )


@router.put("/order", response_model=list[SiblingOrderResponse])
async def reorder_root_categories(
    payload: ChildrenOrderUpdate,
    categories_service: CategoriesService = Depends(),
) -> list[SiblingOrderResponse]:
    assignments = await categories_service.reorder_children(None, payload.category_ids)
    return [
        SiblingOrderResponse(id=category_id, order=order)
        for category_id, order in assignments
    ]


@router.post("/bulk-delete", status_code=status.HTTP_204_NO_CONTENT)
async def bulk_delete_categories(
    payload: CategoryBulkDelete,
    categories_service: CategoriesService = Depends(),
) -> None:
    await categories_service.bulk_delete_categories(payload.category_ids)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CategoryCreate,
    categories_service: CategoriesService = Depends(),
) -> Category:
    return await categories_service.create_category(payload.model_dump())


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> Category:
    return await categories_service.get_category(category_id)


@router.get("/{category_id}/descendants", response_model=list[CategoryResponse])
async def list_descendants(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> list[Category]:
    return await categories_service.get_descendants(category_id)


@router.get("/{category_id}/ancestors", response_model=list[CategoryResponse])
async def list_ancestors(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> list[Category]:
    return await categories_service.get_ancestors(category_id)


@router.get("/{category_id}/available-parents", response_model=list[CategoryResponse])
async def list_available_parents(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> list[Category]:
    return await categories_service.list_available_parents(category_id)


@router.get("/{category_id}/header-category", response_model=HeaderCategoryResponse)
async def get_header_category(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> HeaderCategoryResponse:
    return await categories_service.get_header_category(category_id)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    payload: CategoryUpdate,
    categories_service: CategoriesService = Depends(),
) -> Category:
    updates = extract_updates(payload, nullable=NULLABLE_UPDATE_FIELDS)
    return await categories_service.update_category(category_id, updates)


@router.patch("/{category_id}/status", response_model=CategoryStatusResponse)
async def update_category_status(
    category_id: str,
    payload: CategoryStatusUpdate,
    categories_service: CategoriesService = Depends(),
) -> CategoryStatusResponse:
    affected_ids = await categories_service.set_status(
        category_id, payload.status, cascade=payload.cascade
    )
    return CategoryStatusResponse(
        category_id=category_id, status=payload.status, affected_ids=affected_ids
    )


@router.put("/{category_id}/children/order", response_model=list[SiblingOrderResponse])
async def reorder_subcategories(
    category_id: str,
    payload: ChildrenOrderUpdate,
    categories_service: CategoriesService = Depends(),
) -> list[SiblingOrderResponse]:
    assignments = await categories_service.reorder_children(
        category_id, payload.category_ids
    )
    return [
        SiblingOrderResponse(id=child_id, order=order)
        for child_id, order in assignments
    ]


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    categories_service: CategoriesService = Depends(),
) -> None:
    await categories_service.delete_category(category_id)
