"""Collection validation utility functions."""

from numbers import Real
from typing import Any, Dict, Hashable, Mapping

from fluent_collections.domain.core.common_types import KeyedContainer


def is_int_key(key: Hashable) -> bool:
    """Check whether a key takes part in integer indexing (bools do not)."""
    return isinstance(key, int) and not isinstance(key, bool)


def is_sequential(collection: Dict[Hashable, Any]) -> bool:
    """
    Check whether keys are exactly 0..n-1 in iteration order.

    Args:
        collection: Ordered mapping to inspect

    Returns:
        True if the mapping can be rendered as a list
    """
    for expected, key in enumerate(collection):
        if not is_int_key(key) or key != expected:
            return False
    return True


def is_container(value: Any) -> bool:
    """
    Check whether a value holds nested elements for recursive traversal.

    Collections, mappings, lists and tuples are containers; strings, bytes
    and every other object are terminal values.
    """
    return isinstance(value, (KeyedContainer, Mapping, list, tuple))


def is_scalar(value: Any) -> bool:
    """Check whether a value is a string or a real number (bool excluded)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, Real))


def is_record(value: Any) -> bool:
    """Check whether a value exposes named fields by key or by attribute."""
    if isinstance(value, (KeyedContainer, Mapping)):
        return True
    if is_scalar(value) or isinstance(value, (bool, bytes, list, tuple, set, frozenset)) or value is None:
        return False
    return hasattr(value, "__dict__") or hasattr(value, "__slots__")
