"""Ordered collection with a fluent, chainable API.

A ``Collection`` wraps one insertion-ordered ``dict``. Keys are usually
integer positions, but explicit keys (typically strings) may be mixed in,
so the same type covers both list-like and record-like data.

Queries on an empty collection (``first``, ``last``, ``pop``, ``shift``)
return ``None``; strict key access (``collection[key]``) raises
``KeyNotFoundError``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterator, List, Mapping, Optional, Union

from fluent_collections.domain.core.common_types import Key, KeyedContainer
from fluent_collections.domain.core.exceptions import KeyNotFoundError
from fluent_collections.helpers.logger import get_logger
from fluent_collections.infrastructure.utilities.common.callables import bind_callback, count_parameters
from fluent_collections.infrastructure.utilities.common.collections import (
    deep_flatten,
    extract_field,
    format_scalar,
    is_int_key,
    is_record,
    is_scalar,
    is_sequential,
    map_values,
    next_index,
    reindex,
)
from fluent_collections.infrastructure.utilities.file.json_utils import encode_json

logger = get_logger(__name__)


class Collection(KeyedContainer):
    """Ordered key/value container with chainable operations."""

    def __init__(self, items: Any = None):
        """
        Initialize the collection.

        Args:
            items: None for an empty collection; a Collection or mapping to
                   copy (keys kept); a list or tuple (keys 0..n-1); any other
                   value becomes the single element at key 0.
        """
        if items is None:
            self._items: Dict[Key, Any] = {}
        elif isinstance(items, KeyedContainer):
            self._items = items.to_dict()
        elif isinstance(items, Mapping):
            self._items = dict(items)
        elif isinstance(items, (list, tuple)):
            self._items = dict(enumerate(items))
        else:
            self._items = {0: items}

        # Key used by the next push
        if isinstance(items, (list, tuple)):
            self._next_index = len(self._items)
        else:
            self._next_index = next_index(self._items)

    @classmethod
    def make(cls, items: Any = None) -> Collection:
        """Named constructor, see ``__init__``."""
        return cls(items)

    @property
    def items(self) -> Dict[Key, Any]:
        """Shallow copy of the backing mapping."""
        return dict(self._items)

    # Mutation

    def push(self, item: Any) -> Collection:
        """Append an item at the next integer key."""
        self._items[self._next_index] = item
        self._next_index += 1
        return self

    def add(self, item: Any) -> Collection:
        """Alias for ``push``."""
        return self.push(item)

    def pop(self) -> Any:
        """Remove and return the last item, or None when empty."""
        if not self._items:
            return None
        key, value = self._items.popitem()
        if is_int_key(key) and key == self._next_index - 1:
            self._next_index = key
        return value

    def shift(self) -> Any:
        """
        Remove and return the first item, or None when empty.

        Remaining integer keys are renumbered from 0; other keys are kept.
        """
        if not self._items:
            return None
        first_key = next(iter(self._items))
        value = self._items.pop(first_key)
        self._items = reindex(self._items)
        self._next_index = next_index(self._items)
        return value

    def put(self, key: Key, value: Any) -> Collection:
        self[key] = value
        return self

    def forget(self, key: Key) -> Collection:
        self._items.pop(key, None)
        return self

    # Queries

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def first(self) -> Any:
        """Return the first item, or None when empty."""
        return next(iter(self._items.values()), None)

    def last(self) -> Any:
        """Return the last item, or None when empty."""
        return next(reversed(self._items.values()), None)

    def count(self) -> int:
        return len(self._items)

    def has(self, key: Key) -> bool:
        """Check that a key exists and holds a value other than None."""
        return self._items.get(key) is not None

    def get(self, key: Key, default: Any = None) -> Any:
        return self._items.get(key, default)

    def keys(self) -> List[Key]:
        return list(self._items.keys())

    def values(self) -> List[Any]:
        return list(self._items.values())

    # Iteration and transformation

    def each(self, callback: Callable[..., Any], with_key: Optional[bool] = None) -> Collection:
        """
        Call ``callback`` for every item in order.

        Args:
            callback: Called with (value) or (value, key) depending on the
                      number of parameters it declares; a callback without
                      parameters is called with no arguments
            with_key: Force one of the two calling conventions

        Returns:
            This collection
        """
        if with_key is None and count_parameters(callback) == 0:
            def call(value: Any, key: Key) -> Any:
                return callback()
        else:
            call = bind_callback(callback, "each", with_key)
        for key, value in list(self._items.items()):
            call(value, key)
        return self

    def map(self, callback: Callable[[Any], Any]) -> Collection:
        """Return a new collection with the same keys and mapped values."""
        return Collection(map_values(self._items, callback))

    def filter(self, callback: Callable[..., Any], with_key: Optional[bool] = None) -> Collection:
        """
        Return a new collection of the items the callback accepts.

        Args:
            callback: Predicate taking (value) or (value, key)
            with_key: Force one of the two calling conventions instead of
                      inspecting the callback

        Returns:
            New collection; original keys are preserved

        Raises:
            ArityError: If the callback declares 0 or more than 2 parameters
        """
        return self._select(callback, True, "filter", with_key)

    def reject(self, callback: Callable[..., Any], with_key: Optional[bool] = None) -> Collection:
        """Return a new collection of the items the callback does not accept."""
        return self._select(callback, False, "reject", with_key)

    def every(self, callback: Callable[..., Any], with_key: Optional[bool] = None) -> bool:
        """Check that the callback accepts every item."""
        return self._select(callback, True, "every", with_key).count() == self.count()

    def _select(
        self, callback: Callable[..., Any], keep: bool, operation: str, with_key: Optional[bool]
    ) -> Collection:
        call = bind_callback(callback, operation, with_key)
        return Collection(
            {key: value for key, value in self._items.items() if bool(call(value, key)) is keep}
        )

    def reduce(self, callback: Callable[[Any, Any], Any], initial: Any) -> Any:
        """Fold items left to right: ``callback(carry, value)``."""
        carry = initial
        for value in self._items.values():
            carry = callback(carry, value)
        return carry

    def sum(self, field: Optional[Hashable] = None) -> Union[int, float, Any]:
        """
        Sum the collection.

        Args:
            field: When given, items are records (mappings, collections or
                   objects) and this key or attribute is summed; missing
                   or None fields and non-record items count as 0.

        Returns:
            The total, 0 for an empty collection
        """
        if field is None:
            return sum(self._items.values(), 0)

        def add_field(carry: Any, item: Any) -> Any:
            value = extract_field(item, field) if is_record(item) else None
            return carry + (0 if value is None else value)

        return self.reduce(add_field, 0)

    def flatten(self) -> Collection:
        """Return a new collection of all nested terminal values, re-indexed from 0."""
        return Collection(deep_flatten(self._items.values()))

    def implode(self, glue: Optional[str] = "") -> str:
        """
        Join string and numeric items with ``glue``; other items are skipped.

        Integral floats are written without a fraction (``1.0`` as ``1``).
        A glue of None uses the configured default glue.
        """
        if glue is None:
            from fluent_collections.config import get_serialization_config
            glue = get_serialization_config().default_glue

        scalars = self.filter(is_scalar, with_key=False)
        return glue.join(format_scalar(value) for value in scalars.values())

    # Serialization

    def to_array(self) -> Union[List[Any], Dict[Key, Any]]:
        """
        Return the items as a plain value.

        Returns:
            A list when keys are 0..n-1 in order, otherwise a dict copy.
            Nested collections are returned as they are.
        """
        if is_sequential(self._items):
            return list(self._items.values())
        return dict(self._items)

    def to_dict(self) -> Dict[Key, Any]:
        return dict(self._items)

    def to_json(self, options: Optional[int] = None) -> str:
        """
        Serialize the collection to JSON text.

        Args:
            options: JsonOptions bits; None uses the configured default

        Returns:
            Compact JSON; an array when keys are 0..n-1, otherwise an object

        Raises:
            SerializationError: If a value cannot be represented in JSON
        """
        from fluent_collections.config import get_serialization_config
        settings = get_serialization_config()
        if options is None:
            options = settings.default_json_options
        return encode_json(self._items, options, settings.pretty_print_indent)

    # Container protocol

    def __getitem__(self, key: Key) -> Any:
        try:
            return self._items[key]
        except KeyError:
            logger.debug("Strict lookup of missing key", key=repr(key))
            raise KeyNotFoundError(key) from None

    def __setitem__(self, key: Optional[Key], value: Any) -> None:
        if key is None:
            self.push(value)
        else:
            self._items[key] = value
            if is_int_key(key) and key >= self._next_index:
                self._next_index = key + 1

    def __delitem__(self, key: Key) -> None:
        try:
            del self._items[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __str__(self) -> str:
        return self.to_json()
