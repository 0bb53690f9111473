"""
Domain layer.

- core/: shared kernel with the error taxonomy and common types
- collection.py: the ordered Collection type
"""

from .collection import Collection
from .core import (
    ArityError,
    CollectionException,
    ConfigurationError,
    JsonOptions,
    KeyedContainer,
    KeyNotFoundError,
    SerializationError,
)

__all__ = [
    "Collection",
    "ArityError",
    "CollectionException",
    "ConfigurationError",
    "JsonOptions",
    "KeyedContainer",
    "KeyNotFoundError",
    "SerializationError",
]
