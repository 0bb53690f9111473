"""Collection utility functions organized by responsibility."""

from fluent_collections.infrastructure.utilities.common.collections.transforming import (
    children,
    deep_flatten,
    extract_field,
    format_scalar,
    map_values,
    next_index,
    reindex,
)
from fluent_collections.infrastructure.utilities.common.collections.validation import (
    is_container,
    is_int_key,
    is_record,
    is_scalar,
    is_sequential,
)

__all__ = [
    # Validation functions
    "is_container",
    "is_int_key",
    "is_record",
    "is_scalar",
    "is_sequential",
    # Transformation functions
    "children",
    "deep_flatten",
    "extract_field",
    "format_scalar",
    "map_values",
    "next_index",
    "reindex",
]
