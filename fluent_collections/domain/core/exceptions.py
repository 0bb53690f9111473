# fluent_collections/domain/core/exceptions.py
from typing import Any, Hashable, List, Optional

class CollectionException(Exception):
    """Base exception for all collection errors."""
    pass

class ArityError(CollectionException, TypeError):
    """Raised when a callback declares an unsupported number of parameters."""
    def __init__(self, operation: str, parameter_count: int):
        qualifier = "few" if parameter_count < 1 else "many"
        super().__init__(f"Too {qualifier} parameters for {operation}() callback")
        self.operation = operation
        self.parameter_count = parameter_count

class KeyNotFoundError(CollectionException, KeyError):
    """Raised when a key is read or deleted through strict access and is missing."""
    def __init__(self, key: Hashable):
        super().__init__(f"Undefined key {key!r} in collection")
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])

class SerializationError(CollectionException, ValueError):
    """Raised when collection contents cannot be encoded."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

class ConfigurationError(CollectionException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
