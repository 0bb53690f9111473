"""Fluent Collections - Root Package.

An ordered collection with a fluent, chainable API for building, mutating,
transforming, aggregating and serializing sequences of values or key/value
pairs.

Key Components:
    - domain: the Collection type and its error taxonomy
    - infrastructure: helpers over ordered mappings, callback inspection
      and JSON encoding
    - config: pydantic configuration schemas and loading
    - helpers: structlog logging setup

Usage:
    >>> from fluent_collections import Collection
    >>> Collection([1, 2, 3, 4]).filter(lambda n: n % 2 == 0).sum()
    6
    >>> Collection({"name": "john", "age": 35}).to_json()
    '{"name":"john","age":35}'
"""

import logging

from ._version import __version__
from .domain import (
    ArityError,
    Collection,
    CollectionException,
    ConfigurationError,
    JsonOptions,
    KeyNotFoundError,
    SerializationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

make = Collection.make

__all__ = [
    "__version__",
    "ArityError",
    "Collection",
    "CollectionException",
    "ConfigurationError",
    "JsonOptions",
    "KeyNotFoundError",
    "SerializationError",
    "make",
]
