"""Tests for the error taxonomy."""

from fluent_collections import (
    ArityError,
    CollectionException,
    ConfigurationError,
    KeyNotFoundError,
    SerializationError,
)


class TestExceptions:
    """Test exception hierarchy and attributes."""

    def test_arity_error(self):
        """Test ArityError message and attributes."""
        error = ArityError("filter", 3)
        assert isinstance(error, CollectionException)
        assert isinstance(error, TypeError)
        assert str(error) == "Too many parameters for filter() callback"
        assert (error.operation, error.parameter_count) == ("filter", 3)

    def test_arity_error_too_few(self):
        """Test the message for callbacks without parameters."""
        assert str(ArityError("every", 0)) == "Too few parameters for every() callback"

    def test_key_not_found_error(self):
        """Test KeyNotFoundError message and attributes."""
        error = KeyNotFoundError(7)
        assert isinstance(error, KeyError)
        assert error.key == 7
        assert str(error) == "Undefined key 7 in collection"

    def test_serialization_error(self):
        """Test SerializationError details."""
        error = SerializationError("failed", details="boom")
        assert isinstance(error, ValueError)
        assert error.details == "boom"

    def test_configuration_error(self):
        """Test ConfigurationError missing fields default."""
        assert ConfigurationError("bad").missing_fields == []
        assert ConfigurationError("bad", ["a"]).missing_fields == ["a"]
