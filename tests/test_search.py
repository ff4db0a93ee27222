from catalog_admin.hierarchy import filter_categories, visible_tree
from catalog_admin.models import CategoryStatus, StatusFilter
from tests.helpers import ids, make_category

RECORDS = [
    make_category("fruits", name="Fruits"),
    make_category("apples", "fruits", name="Apples"),
    make_category("green", "apples", name="Green Apples"),
    make_category("berries", "fruits", name="Berries", status=CategoryStatus.inactive),
    make_category("dairy", name="Dairy"),
    make_category("milk", "dairy", name="Milk"),
]


def test_empty_query_matches_everything() -> None:
    assert ids(filter_categories(RECORDS)) == ids(RECORDS)
    assert ids(filter_categories(RECORDS, "   ")) == ids(RECORDS)


def test_query_is_case_insensitive_substring() -> None:
    assert ids(filter_categories(RECORDS, "APPLE")) == ["apples", "green"]
    assert ids(filter_categories(RECORDS, "ilk")) == ["milk"]


def test_status_filter_is_exact_with_all_wildcard() -> None:
    assert ids(filter_categories(RECORDS, status=StatusFilter.inactive)) == ["berries"]
    assert "berries" not in ids(filter_categories(RECORDS, status=StatusFilter.active))
    assert len(filter_categories(RECORDS, status=StatusFilter.all)) == len(RECORDS)


def test_query_and_status_combine() -> None:
    assert filter_categories(RECORDS, "berr", StatusFilter.active) == []


def test_widening_adds_direct_children_of_matches() -> None:
    assert ids(filter_categories(RECORDS, "fruit", widen=True)) == [
        "fruits",
        "apples",
        "berries",
    ]


def test_widening_is_one_level_only() -> None:
    widened = ids(filter_categories(RECORDS, "fruit", widen=True))

    assert "green" not in widened


def test_widening_ignores_status_of_added_children() -> None:
    widened = ids(filter_categories(RECORDS, "fruit", StatusFilter.active, widen=True))

    assert widened == ["fruits", "apples", "berries"]


def test_widening_deduplicates_by_id() -> None:
    widened = ids(filter_categories(RECORDS, "a", widen=True))

    assert len(widened) == len(set(widened))


def test_widening_twice_matches_widening_once() -> None:
    for query, status in [
        ("fruit", StatusFilter.all),
        ("apple", StatusFilter.all),
        ("a", StatusFilter.active),
        ("", StatusFilter.inactive),
    ]:
        once = filter_categories(RECORDS, query, status, widen=True)
        twice = filter_categories(once, query, status, widen=True)
        assert ids(twice) == ids(once)


def test_visible_tree_without_filters_is_full_forest() -> None:
    forest = visible_tree(RECORDS)

    assert ids(forest) == ["fruits", "dairy"]
    assert ids(forest[0].children) == ["apples", "berries"]


def test_visible_tree_keeps_ancestors_of_matching_child() -> None:
    forest = visible_tree(RECORDS, "green")

    assert ids(forest) == ["fruits"]
    assert ids(forest[0].children) == ["apples"]
    assert ids(forest[0].children[0].children) == ["green"]


def test_visible_tree_shows_children_of_matching_parent() -> None:
    forest = visible_tree(RECORDS, "dairy")

    assert ids(forest) == ["dairy"]
    assert ids(forest[0].children) == ["milk"]


def test_visible_tree_respects_expanded_arena() -> None:
    forest = visible_tree(RECORDS, "green", expanded_ids={"fruits"})

    assert ids(forest[0].children) == ["apples"]
    assert forest[0].children[0].children is None


def test_visible_tree_with_no_matches_is_empty() -> None:
    assert visible_tree(RECORDS, "bread") == []
