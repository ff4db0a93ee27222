from catalog_admin.hierarchy import header_category_source, resolve_header_category
from tests.helpers import make_category


def test_root_without_value_resolves_to_none() -> None:
    assert resolve_header_category("1", [make_category("1")]) is None


def test_own_value_wins() -> None:
    records = [
        make_category("1", header="hdr-a"),
        make_category("2", "1", header="hdr-b"),
    ]

    assert resolve_header_category("2", records) == "hdr-b"


def test_three_level_chain_inherits_root_value() -> None:
    records = [
        make_category("1", header="hdr-root"),
        make_category("2", "1"),
        make_category("3", "2"),
    ]

    for category_id in ("1", "2", "3"):
        assert resolve_header_category(category_id, records) == "hdr-root"


def test_nearest_ancestor_value_wins() -> None:
    records = [
        make_category("1", header="hdr-root"),
        make_category("2", "1", header="hdr-mid"),
        make_category("3", "2"),
    ]

    assert resolve_header_category("3", records) == "hdr-mid"
    assert header_category_source("3", records).id == "2"


def test_missing_parent_resolves_to_none() -> None:
    records = [make_category("2", "gone")]

    assert resolve_header_category("2", records) is None


def test_unknown_category_resolves_to_none() -> None:
    assert resolve_header_category("missing", [make_category("1", header="h")]) is None


def test_cycle_without_value_resolves_to_none() -> None:
    records = [make_category("a", "b"), make_category("b", "a")]

    assert resolve_header_category("a", records) is None
