"""Real-estate listing records, query scopes and sample-data generation."""

from listings.models import ListingType, Property, PropertyStatus, PropertyType
from listings.query import PropertyQuery
from listings.store import PropertyStore
from listings.text import slugify

__all__ = [
    "ListingType",
    "Property",
    "PropertyQuery",
    "PropertyStatus",
    "PropertyStore",
    "PropertyType",
    "slugify",
]

__version__ = "0.1.0"
