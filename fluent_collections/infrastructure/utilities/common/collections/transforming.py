"""Collection transformation utility functions."""

from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, TypeVar

from fluent_collections.domain.core.common_types import KeyedContainer

from .validation import is_container, is_int_key

K = TypeVar("K")
V = TypeVar("V")


def map_values(
    collection: Dict[K, V], transform_func: Callable[[V], Any]
) -> Dict[K, Any]:
    """
    Transform dictionary values.

    Args:
        collection: Dictionary to transform
        transform_func: Function to transform values

    Returns:
        Dictionary with transformed values
    """
    return {key: transform_func(value) for key, value in collection.items()}


def next_index(collection: Dict[Hashable, Any]) -> int:
    """
    Compute the integer key an appended element receives.

    Args:
        collection: Ordered mapping

    Returns:
        One past the largest non-negative integer key, or 0
    """
    indexes = [key for key in collection if is_int_key(key) and key >= 0]
    return max(indexes) + 1 if indexes else 0


def reindex(collection: Dict[Hashable, V]) -> Dict[Hashable, V]:
    """
    Renumber integer keys contiguously from 0, keeping order.

    Args:
        collection: Ordered mapping

    Returns:
        New mapping; non-integer keys are carried over untouched
    """
    result: Dict[Hashable, V] = {}
    position = 0
    for key, value in collection.items():
        if is_int_key(key):
            result[position] = value
            position += 1
        else:
            result[key] = value
    return result


def children(value: Any) -> Iterable[Any]:
    """Return the nested elements of a container value, in order."""
    if isinstance(value, KeyedContainer):
        return value.to_dict().values()
    if isinstance(value, Mapping):
        return value.values()
    return value


def deep_flatten(collection: Iterable[Any]) -> List[Any]:
    """
    Recursively flatten nested containers depth-first.

    Args:
        collection: Iterable whose elements may be collections, mappings,
                    lists or tuples

    Returns:
        Completely flattened list of terminal values
    """
    result = []
    for item in collection:
        if is_container(item):
            result.extend(deep_flatten(children(item)))
        else:
            result.append(item)
    return result


def extract_field(item: Any, field: Hashable, default: Any = 0) -> Any:
    """
    Read a named field from a record-like value.

    Args:
        item: Mapping, collection or attribute-bearing object
        field: Key or attribute name
        default: Value returned when the field is missing

    Returns:
        Field value or default
    """
    if isinstance(item, KeyedContainer):
        return item.to_dict().get(field, default)
    if isinstance(item, Mapping):
        return item.get(field, default)
    if isinstance(field, str):
        return getattr(item, field, default)
    return default


def format_scalar(value: Any) -> str:
    """
    Render a string or number as text for joining.

    Integral floats below 1e15 drop their fraction, so ``1.0`` becomes
    ``"1"``; other values use ``str``.
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return str(value)
