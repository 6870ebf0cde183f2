"""Tests for custom exception hierarchy."""

from property_book.exceptions import (
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidFieldError,
    MissingFieldError,
    PropertyBookError,
    StorageError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_property_book_error_is_exception(self) -> None:
        assert isinstance(PropertyBookError("test"), Exception)

    def test_invalid_field_is_value_error(self) -> None:
        err = InvalidFieldError("test")
        assert isinstance(err, PropertyBookError)
        assert isinstance(err, ValueError)

    def test_missing_field_is_invalid_field(self) -> None:
        err = MissingFieldError("test")
        assert isinstance(err, InvalidFieldError)
        assert isinstance(err, PropertyBookError)

    def test_entity_not_found_is_property_book_error(self) -> None:
        assert isinstance(EntityNotFoundError("test"), PropertyBookError)

    def test_duplicate_entity_is_property_book_error(self) -> None:
        assert isinstance(DuplicateEntityError("test"), PropertyBookError)

    def test_configuration_error_is_property_book_error(self) -> None:
        assert isinstance(ConfigurationError("test"), PropertyBookError)

    def test_storage_error_is_property_book_error(self) -> None:
        assert isinstance(StorageError("test"), PropertyBookError)

    def test_exception_message(self) -> None:
        err = MissingFieldError("Property.price is required")
        assert str(err) == "Property.price is required"
