from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class CategoryStatus(str, Enum):
    active = "Active"
    inactive = "Inactive"


class StatusFilter(str, Enum):
    all = "All"
    active = "Active"
    inactive = "Inactive"


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    image: str | None = None
    order: int = Field(0, ge=0)
    parent_id: str | None = None
    header_category_id: str | None = None
    status: CategoryStatus = CategoryStatus.active
    is_bestseller: bool = False
    has_warning: bool = False
    group_category: str | None = None
    commission_rate: float = Field(0, ge=0, le=100)


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    image: str | None = None
    order: int | None = Field(None, ge=0)
    parent_id: str | None = None
    header_category_id: str | None = None
    status: CategoryStatus | None = None
    is_bestseller: bool | None = None
    has_warning: bool | None = None
    group_category: str | None = None
    commission_rate: float | None = Field(None, ge=0, le=100)


class CategoryStatusUpdate(BaseModel):
    status: CategoryStatus
    cascade: bool = False


class CategoryBulkDelete(BaseModel):
    category_ids: list[str] = Field(..., min_length=1)


class ChildrenOrderUpdate(BaseModel):
    category_ids: list[str]


class ReparentCheck(BaseModel):
    category_id: str | None = None
    parent_id: str | None = None


class ReparentCheckResponse(BaseModel):
    ok: bool
    reason: str | None


class CategoryResponse(BaseModel):
    id: str
    name: str
    image: str | None
    parent_id: str | None
    order: int
    status: CategoryStatus
    header_category_id: str | None
    header_category_name: str | None
    is_bestseller: bool
    has_warning: bool
    group_category: str | None
    commission_rate: float


class CategoryListItemResponse(CategoryResponse):
    children_count: int


class CategoryTreeResponse(CategoryResponse):
    children: list[CategoryTreeResponse] | None


class HeaderCategoryResponse(BaseModel):
    category_id: str
    header_category_id: str | None
    source_category_id: str | None
    inherited: bool


class CategoryStatusResponse(BaseModel):
    category_id: str
    status: CategoryStatus
    affected_ids: list[str]


class SiblingOrderResponse(BaseModel):
    id: str
    order: int


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
    parent_id: str | None = None
    order: int = 0
    status: CategoryStatus = CategoryStatus.active
    header_category_id: str | None = None
    header_category_name: str | None = None
    image: str | None = None
    is_bestseller: bool = False
    has_warning: bool = False
    group_category: str | None = None
    commission_rate: float = 0
    children: tuple[Category, ...] | None = None

    @property
    def is_active(self) -> bool:
        return self.status == CategoryStatus.active


@dataclass(frozen=True, slots=True)
class CategoryListItem(Category):
    children_count: int = 0
