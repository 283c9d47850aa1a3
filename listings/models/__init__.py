"""Domain models for property listings."""

from listings.models.enums import (
    LISTING_TYPES,
    PROPERTY_TYPES,
    STATUS_COLORS,
    STATUSES,
    TYPE_ICONS,
    ListingType,
    PropertyStatus,
    PropertyType,
)
from listings.models.property import (
    Property,
    configure_display,
    format_price,
    prepare_for_create,
    prepare_for_update,
)

__all__ = [
    "LISTING_TYPES",
    "PROPERTY_TYPES",
    "STATUSES",
    "STATUS_COLORS",
    "TYPE_ICONS",
    "ListingType",
    "Property",
    "PropertyStatus",
    "PropertyType",
    "configure_display",
    "format_price",
    "prepare_for_create",
    "prepare_for_update",
]
