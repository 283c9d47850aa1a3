"""Enumeration types and lookup tables for property listings."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class PropertyType(str, Enum):
    HOUSE = "house"
    APARTMENT = "apartment"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    VILLA = "villa"
    LAND = "land"
    COMMERCIAL = "commercial"


class ListingType(str, Enum):
    SALE = "sale"
    RENT = "rent"


class PropertyStatus(str, Enum):
    DRAFT = "draft"
    AVAILABLE = "available"
    PENDING = "pending"
    SOLD = "sold"
    RENTED = "rented"


# Code -> display label
PROPERTY_TYPES: Mapping[str, str] = MappingProxyType({
    PropertyType.HOUSE.value: "House",
    PropertyType.APARTMENT.value: "Apartment",
    PropertyType.CONDO.value: "Condo",
    PropertyType.TOWNHOUSE.value: "Townhouse",
    PropertyType.VILLA.value: "Villa",
    PropertyType.LAND.value: "Land",
    PropertyType.COMMERCIAL.value: "Commercial",
})

LISTING_TYPES: Mapping[str, str] = MappingProxyType({
    ListingType.SALE.value: "For Sale",
    ListingType.RENT.value: "For Rent",
})

STATUSES: Mapping[str, str] = MappingProxyType({
    PropertyStatus.DRAFT.value: "Draft",
    PropertyStatus.AVAILABLE.value: "Available",
    PropertyStatus.PENDING.value: "Pending",
    PropertyStatus.SOLD.value: "Sold",
    PropertyStatus.RENTED.value: "Rented",
})

DEFAULT_STATUS_COLOR = "secondary"

STATUS_COLORS: Mapping[str, str] = MappingProxyType({
    PropertyStatus.AVAILABLE.value: "success",
    PropertyStatus.SOLD.value: "danger",
    PropertyStatus.RENTED.value: "warning",
    PropertyStatus.PENDING.value: "info",
    PropertyStatus.DRAFT.value: "secondary",
})

DEFAULT_TYPE_ICON = "🏠"

TYPE_ICONS: Mapping[str, str] = MappingProxyType({
    PropertyType.HOUSE.value: "🏠",
    PropertyType.APARTMENT.value: "🏢",
    PropertyType.CONDO.value: "🏬",
    PropertyType.TOWNHOUSE.value: "🏘️",
    PropertyType.VILLA.value: "🏡",
    PropertyType.LAND.value: "🌍",
    PropertyType.COMMERCIAL.value: "🏢",
})


def code_of(value: Enum | str | None) -> str | None:
    """Return the raw code for an enum member or plain string."""
    if isinstance(value, Enum):
        return value.value
    return value
