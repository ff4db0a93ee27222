from .categories import (
    Category,
    CategoryBulkDelete,
    CategoryCreate,
    CategoryListItem,
    CategoryListItemResponse,
    CategoryResponse,
    CategoryStatus,
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
from .catalog import CatalogCategory, CatalogEnvelope
