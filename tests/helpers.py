from catalog_admin.models import Category, CategoryStatus


def make_category(
    category_id: str,
    parent_id: str | None = None,
    *,
    name: str | None = None,
    order: int = 0,
    status: CategoryStatus = CategoryStatus.active,
    header: str | None = None,
) -> Category:
    return Category(
        id=category_id,
        name=name or f"Category {category_id}",
        parent_id=parent_id,
        order=order,
        status=status,
        header_category_id=header,
    )


def ids(records) -> list[str]:
    return [record.id for record in records]
