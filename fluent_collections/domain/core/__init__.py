"""Shared kernel: error taxonomy and common types."""

from .common_types import Callback, JsonOptions, Key, KeyedContainer
from .exceptions import (
    ArityError,
    CollectionException,
    ConfigurationError,
    KeyNotFoundError,
    SerializationError,
)

__all__ = [
    "ArityError",
    "Callback",
    "CollectionException",
    "ConfigurationError",
    "JsonOptions",
    "Key",
    "KeyNotFoundError",
    "KeyedContainer",
    "SerializationError",
]
