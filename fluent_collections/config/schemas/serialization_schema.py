"""Serialization configuration schema."""

from pydantic import BaseModel, Field, field_validator

from fluent_collections.domain.core.common_types import JsonOptions


class SerializationConfig(BaseModel):
    """Defaults used by ``to_json`` and ``implode``."""

    default_json_options: int = Field(0, description="JsonOptions bits used when to_json() gets options=None")
    pretty_print_indent: int = Field(4, description="Indent width used with JsonOptions.PRETTY_PRINT")
    default_glue: str = Field("", description="Separator used when implode() gets glue=None")

    @field_validator("default_json_options")
    @classmethod
    def validate_json_options(cls, v: int) -> int:
        """
        Validate JSON option bits.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If the value is negative or carries unknown bits
        """
        if v < 0:
            raise ValueError("JSON options cannot be negative")
        if JsonOptions.coerce(v) != v:
            raise ValueError(f"Unsupported JSON option bits in {v}")
        return v

    @field_validator("pretty_print_indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        """Validate pretty print indent."""
        if v < 1 or v > 16:
            raise ValueError("Pretty print indent must be between 1 and 16")
        return v

    @property
    def json_options(self) -> JsonOptions:
        return JsonOptions.coerce(self.default_json_options)
