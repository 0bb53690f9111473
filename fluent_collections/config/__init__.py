"""Configuration package with clean public API."""

from typing import Optional

from fluent_collections.domain.core.exceptions import ConfigurationError

from .defaults import DEFAULT_CONFIG, ConfigurationManager
from .schemas import AppConfig, LoggingConfig, SerializationConfig, validate_config

_app_config: Optional[AppConfig] = None
_serialization_config: Optional[SerializationConfig] = None


# Lazy import logger
def _get_logger():
    """Lazy import logger."""
    from fluent_collections.helpers.logger import get_logger
    return get_logger(__name__)


def get_config() -> AppConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _app_config
    if _app_config is None:
        _app_config = ConfigurationManager().get_app_config()
    return _app_config


def get_serialization_config() -> SerializationConfig:
    """
    Return the serialization settings used by implode and to_json.

    Only the serialization section is validated, so a bad logging setting
    does not affect serialization. Invalid serialization settings fall back
    to the defaults with a warning.
    """
    global _serialization_config
    if _app_config is not None:
        return _app_config.serialization

    if _serialization_config is None:
        try:
            _serialization_config = ConfigurationManager(validate=False).get_serialization_config()
        except ConfigurationError as e:
            _get_logger().warning("Using default serialization settings", error=str(e))
            _serialization_config = SerializationConfig()
    return _serialization_config


def set_config(config: AppConfig) -> None:
    """Install an explicit configuration, bypassing defaults and environment."""
    global _app_config
    _app_config = config


def reset_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _app_config, _serialization_config
    _app_config = None
    _serialization_config = None


__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'LoggingConfig',
    'SerializationConfig',

    # Configuration management
    'ConfigurationManager',
    'DEFAULT_CONFIG',
    'get_config',
    'get_serialization_config',
    'set_config',
    'reset_config',
]
