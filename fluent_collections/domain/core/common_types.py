# fluent_collections/domain/core/common_types.py
from abc import ABC, abstractmethod
from enum import IntFlag
from typing import Any, Callable, Dict, Hashable

Key = Hashable
Callback = Callable[..., Any]

class KeyedContainer(ABC):
    """Anything backed by an ordered key/value mapping.

    Utilities recognise instances as nested containers without importing the
    concrete collection type.
    """

    @abstractmethod
    def to_dict(self) -> Dict[Key, Any]:
        """Return a shallow copy of the backing mapping."""

class JsonOptions(IntFlag):
    """Encoding flags accepted by ``Collection.to_json``.

    Bit values follow the widely used ``json_encode`` constants so option
    integers stored in configuration stay portable.
    """
    NONE = 0
    FORCE_OBJECT = 16
    UNESCAPED_SLASHES = 64
    PRETTY_PRINT = 128
    UNESCAPED_UNICODE = 256

    @classmethod
    def coerce(cls, value: int) -> "JsonOptions":
        """Build flags from a plain int, ignoring unknown bits."""
        known = 0
        for member in cls:
            known |= member.value
        return cls(int(value) & known)
