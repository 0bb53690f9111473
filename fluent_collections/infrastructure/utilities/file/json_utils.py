"""JSON encoding and configuration file utilities."""

import json
import os
from typing import Any, Dict, Hashable, Mapping

from fluent_collections.domain.core.common_types import JsonOptions, KeyedContainer
from fluent_collections.domain.core.exceptions import SerializationError
from fluent_collections.infrastructure.utilities.common.collections import is_sequential


# Lazy import logger
def _get_logger():
    """Lazy import logger."""
    from fluent_collections.helpers.logger import get_logger
    return get_logger(__name__)


def _encode_key(key: Hashable) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return ""
    if isinstance(key, (str, int, float)):
        return str(key)
    raise SerializationError(f"Cannot use {type(key).__name__} as a JSON object key", details=repr(key))


def to_json_structure(value: Any, force_object: bool = False) -> Any:
    """
    Convert a value into plain lists/dicts ready for the json module.

    Mappings and collections whose keys are 0..n-1 become lists, other
    mappings become dicts with string keys in insertion order. Lists and
    tuples become lists unless ``force_object`` is set.

    Args:
        value: Value to convert
        force_object: Render every list as an index-keyed object

    Returns:
        Structure built from dict, list and JSON scalars
    """
    if isinstance(value, KeyedContainer):
        value = value.to_dict()

    if isinstance(value, Mapping):
        mapping = dict(value)
        if is_sequential(mapping) and not force_object:
            return [to_json_structure(item, force_object) for item in mapping.values()]

        result: Dict[str, Any] = {}
        for k, v in mapping.items():
            encoded = _encode_key(k)
            if encoded in result:
                raise SerializationError(
                    f"Keys collide as JSON object key {encoded!r}", details=repr(k)
                )
            result[encoded] = to_json_structure(v, force_object)
        return result

    if isinstance(value, (list, tuple)):
        if force_object:
            return {str(i): to_json_structure(v, force_object) for i, v in enumerate(value)}
        return [to_json_structure(v, force_object) for v in value]

    return value


def encode_json(data: Any, options: int = 0, indent: int = 4) -> str:
    """
    Encode data as JSON text.

    Args:
        data: Mapping, collection or plain value to encode
        options: JsonOptions bits
        indent: Indent width used with JsonOptions.PRETTY_PRINT

    Returns:
        JSON text; compact unless PRETTY_PRINT is set

    Raises:
        SerializationError: If data contains values JSON cannot represent
    """
    flags = JsonOptions.coerce(options)
    pretty = JsonOptions.PRETTY_PRINT in flags

    try:
        text = json.dumps(
            to_json_structure(data, JsonOptions.FORCE_OBJECT in flags),
            ensure_ascii=JsonOptions.UNESCAPED_UNICODE not in flags,
            allow_nan=False,
            indent=indent if pretty else None,
            separators=(",", ": ") if pretty else (",", ":"),
        )
    except (TypeError, ValueError) as e:
        _get_logger().debug("JSON encoding failed", error=str(e))
        raise SerializationError(f"Failed to encode collection as JSON: {str(e)}", details=str(e)) from e

    if JsonOptions.UNESCAPED_SLASHES not in flags:
        text = text.replace("/", "\\/")
    return text


def read_json_file(file_path: str, encoding: str = "utf-8") -> Dict[str, Any]:
    """
    Read a JSON file and return parsed data.

    Args:
        file_path: Path to JSON file
        encoding: File encoding (default: utf-8)

    Returns:
        Parsed JSON data as dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON parsing fails
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"JSON file not found: {file_path}") from e
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(f"Failed to parse JSON file {file_path}: {str(e)}", e.doc, e.pos)


def read_yaml_file(file_path: str, encoding: str = "utf-8") -> Dict[str, Any]:
    """
    Read a YAML file with lazy import.

    Args:
        file_path: File path
        encoding: File encoding

    Returns:
        Parsed YAML data

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If YAML parsing fails
    """
    import yaml
    try:
        with open(file_path, "r", encoding=encoding) as f:
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"YAML file not found: {file_path}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {str(e)}") from e


def read_config_file(file_path: str) -> Dict[str, Any]:
    """Read a configuration file, choosing the parser by extension."""
    extension = os.path.splitext(file_path)[1].lower()
    if extension in (".yaml", ".yml"):
        data = read_yaml_file(file_path)
    else:
        data = read_json_file(file_path)
    _get_logger().debug("Configuration file loaded", path=file_path)
    return data
