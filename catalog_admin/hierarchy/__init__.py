from .index import index_by_id, unique_records
from .inheritance import header_category_source, resolve_header_category
from .references import Reference, ReferenceKind, normalize_reference, reference_id
from .resolver import ancestor_path, descendant_ids, descendants
from .search import filter_categories, matches_query, matches_status, visible_tree
from .tree import build_tree, collect_ids, count_children, flatten_tree, reorder_siblings
from .validation import (
    ALLOWED,
    RejectionReason,
    ReparentDecision,
    available_parents,
    validate_reparent,
)
