"""Custom exception hierarchy for listings."""


class ListingsError(Exception):
    """Base exception for all listings errors."""


class EntityNotFoundError(ListingsError):
    """Raised when a referenced entity does not exist."""


class PropertyNotFoundError(EntityNotFoundError):
    """Raised when no property is stored under the requested slug."""


class IntegrityError(ListingsError):
    """Raised when a write would violate a storage constraint."""


class DuplicateSlugError(IntegrityError):
    """Raised when a slug is already taken by another property."""


class InvalidEntityStateError(ListingsError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(ListingsError):
    """Raised when configuration is invalid or missing."""


class SinkError(ListingsError):
    """Raised when a sink operation fails."""
