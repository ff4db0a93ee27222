import uuid

import pytest
from pydantic import ValidationError

from catalog_admin.hierarchy import ReferenceKind, normalize_reference, reference_id
from catalog_admin.models import CatalogCategory, CategoryStatus


def test_bare_identifier() -> None:
    reference = normalize_reference("64f1c0ffee")

    assert reference.kind == ReferenceKind.bare
    assert reference.id == "64f1c0ffee"
    assert reference.name is None


def test_embedded_document_with_mongo_id() -> None:
    reference = normalize_reference({"_id": "64f1", "name": "Grocery", "slug": "grocery"})

    assert reference.kind == ReferenceKind.embedded
    assert reference.id == "64f1"
    assert reference.name == "Grocery"


def test_embedded_document_with_plain_id() -> None:
    assert reference_id({"id": 42}) == "42"


def test_numeric_and_uuid_identifiers() -> None:
    value = uuid.uuid4()

    assert reference_id(7) == "7"
    assert reference_id(value) == str(value)


@pytest.mark.parametrize("value", [None, "", "   ", {}, {"name": "No id"}, [], True])
def test_empty_or_unrecognized_shapes_are_missing(value) -> None:
    assert normalize_reference(value) is None


def test_catalog_category_normalizes_both_reference_shapes() -> None:
    bare = CatalogCategory.model_validate(
        {"_id": "c1", "name": "Milk", "parentId": "p1", "headerCategoryId": "h1"}
    )
    embedded = CatalogCategory.model_validate(
        {
            "_id": "c2",
            "name": "Curd",
            "parentId": {"_id": "p1", "name": "Dairy"},
            "headerCategoryId": {"_id": "h1", "name": "Grocery"},
        }
    )

    assert bare.parent.id == embedded.parent.id == "p1"
    assert bare.header_reference.id == embedded.header_reference.id == "h1"
    assert embedded.header_reference.name == "Grocery"


def test_catalog_category_falls_back_to_header_category_field() -> None:
    category = CatalogCategory.model_validate(
        {"_id": "c1", "name": "Milk", "headerCategory": {"_id": "h2", "name": "Pharmacy"}}
    )

    assert category.header_reference.id == "h2"


def test_catalog_category_defaults() -> None:
    category = CatalogCategory.model_validate(
        {"_id": 12, "name": "Bread", "order": None, "isBestseller": None}
    )

    assert category.id == "12"
    assert category.parent is None
    assert category.order == 0
    assert category.status == CategoryStatus.active
    assert category.is_bestseller is False
    assert category.children is None


def test_catalog_category_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        CatalogCategory.model_validate({"_id": "c1", "name": "Milk", "status": "Deleted"})
