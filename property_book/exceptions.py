"""Custom exception hierarchy for property-book."""


class PropertyBookError(Exception):
    """Base exception for all property-book errors."""


class InvalidFieldError(PropertyBookError, ValueError):
    """Raised when a field value fails validation."""


class MissingFieldError(InvalidFieldError):
    """Raised when a required field is absent."""


class EntityNotFoundError(PropertyBookError):
    """Raised when a referenced entity does not exist."""


class DuplicateEntityError(PropertyBookError):
    """Raised when an entity with the same identity already exists."""


class ConfigurationError(PropertyBookError):
    """Raised when configuration is invalid or missing."""


class StorageError(PropertyBookError):
    """Raised when reading or writing a book file fails."""
