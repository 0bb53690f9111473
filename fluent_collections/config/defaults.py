# fluent_collections/config/defaults.py
import copy
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError

from fluent_collections.domain.core.exceptions import ConfigurationError
from fluent_collections.infrastructure.utilities.file.json_utils import read_config_file

from .schemas import AppConfig, SerializationConfig, validate_config

CONFIG_FILE_ENV_VAR = "FLUENT_COLLECTIONS_CONFIG"

DEFAULT_CONFIG = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "${FLUENT_COLLECTIONS_LOG_LEVEL:WARNING}",
        "destination": "${FLUENT_COLLECTIONS_LOG_DESTINATION:none}",
        "file_path": "${FLUENT_COLLECTIONS_LOG_FILE:}",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Serialization configuration
    "serialization": {
        "default_json_options": 0,
        "pretty_print_indent": "${FLUENT_COLLECTIONS_JSON_INDENT:4}",
        "default_glue": "",
    },
}

class ConfigurationManager:
    """
    Manages library configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying a JSON or YAML configuration file
    - Variable interpolation from the environment
    - Configuration validation
    """

    def __init__(self, config_file: Optional[str] = None, validate: bool = True):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a .json/.yaml/.yml file. If not
                        provided, FLUENT_COLLECTIONS_CONFIG is consulted.
            validate: Validate the whole configuration up front
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        if config_file:
            self._load_config_file(config_file)

        self._app_config = self.validate_config() if validate else None

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            user_config = read_config_file(config_path)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}")

        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
        self.update_config(user_config)

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} placeholders."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default)
                return os.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary, merged recursively
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        config = self._interpolate_values(self._config)
        # An empty file path means "not configured"
        if not config["logging"].get("file_path"):
            config["logging"]["file_path"] = None
        return config

    def get_app_config(self) -> AppConfig:
        if self._app_config is None:
            self._app_config = self.validate_config()
        return self._app_config

    def get_serialization_config(self) -> SerializationConfig:
        """
        Validate the serialization section on its own.

        Raises:
            ConfigurationError: If the serialization section is invalid
        """
        section = self._interpolate_values(self._config.get("serialization", {}))
        try:
            return SerializationConfig(**section)
        except (TypeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid serialization configuration: {str(e)}")

    def validate_config(self) -> AppConfig:
        """
        Validate the configuration.

        Returns:
            Validated AppConfig

        Raises:
            ConfigurationError: If configuration is invalid with detailed error messages
        """
        config = self.get_config()
        missing = []

        log_config = config["logging"]
        if str(log_config.get("destination", "")).lower() in ("file", "both") and not log_config.get("file_path"):
            missing.append("logging.file_path")

        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}", missing_fields=missing
            )

        try:
            return validate_config(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {str(e)}")
