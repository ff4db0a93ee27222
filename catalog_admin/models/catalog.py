"""Wire shapes of the catalog backend."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from catalog_admin.hierarchy.references import Reference, normalize_reference
from catalog_admin.models.categories import CategoryStatus


class CatalogCategory(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    name: str
    image: str | None = None
    parent: Reference | None = Field(None, validation_alias="parentId")
    header_category: Reference | None = Field(None, validation_alias="headerCategoryId")
    header_category_populated: Reference | None = Field(
        None, validation_alias="headerCategory"
    )
    order: int = 0
    status: CategoryStatus = CategoryStatus.active
    is_bestseller: bool = Field(False, validation_alias="isBestseller")
    has_warning: bool = Field(False, validation_alias="hasWarning")
    group_category: str | None = Field(None, validation_alias="groupCategory")
    commission_rate: float = Field(0, validation_alias="commissionRate")
    children: list[CatalogCategory] | None = None

    @field_validator(
        "parent", "header_category", "header_category_populated", mode="before"
    )
    @classmethod
    def _normalize_reference(cls, value: object) -> Reference | None:
        return normalize_reference(value)

    @field_validator("order", "commission_rate", mode="before")
    @classmethod
    def _default_missing_number(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("is_bestseller", "has_warning", mode="before")
    @classmethod
    def _default_missing_flag(cls, value: object) -> object:
        return False if value is None else value

    @property
    def header_reference(self) -> Reference | None:
        return self.header_category or self.header_category_populated


class CatalogEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = True
    message: str | None = None
    data: Any = None
