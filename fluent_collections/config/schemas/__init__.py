"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig
from .serialization_schema import SerializationConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "SerializationConfig",
]
