"""Property listing model."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

from listings.logging import get_logger
from listings.models.enums import (
    DEFAULT_STATUS_COLOR,
    DEFAULT_TYPE_ICON,
    LISTING_TYPES,
    PROPERTY_TYPES,
    STATUS_COLORS,
    STATUSES,
    TYPE_ICONS,
    ListingType,
    PropertyStatus,
    PropertyType,
    code_of,
)
from listings.storage import MediaStorage, PublicDiskStorage
from listings.text import slugify

if TYPE_CHECKING:
    from listings.store.property import PropertyStore

logger = get_logger(__name__)

DEFAULT_CURRENCY = "JOD"

MONEY_PLACES = Decimal("0.01")
COORDINATE_PLACES = Decimal("0.00000001")

_DATETIME_FIELDS = ("featured_until", "created_at", "updated_at")

_default_currency = DEFAULT_CURRENCY
_default_storage: MediaStorage = PublicDiskStorage()


@dataclass
class Property:
    """A single listing in the catalog.

    Enum-valued fields accept either the enum member or its raw code.
    Codes that are not part of the enumeration are kept as plain
    strings; display helpers fall back to defaults for them.
    """

    title: str
    description: str = ""
    property_type: PropertyType | str = PropertyType.HOUSE
    listing_type: ListingType | str = ListingType.SALE
    status: PropertyStatus | str = PropertyStatus.DRAFT
    price: Decimal | None = Decimal("0.00")
    price_per_sqft: Decimal | None = None

    # Location
    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None

    # Physical
    bedrooms: int | None = None
    bathrooms: int | None = None
    total_area: float | Decimal | None = 0  # Square meters
    built_year: int | None = None
    furnished: bool = False
    parking: bool = False
    parking_spaces: int | None = None

    features: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)

    slug: str = ""
    meta_title: str = ""
    meta_description: str = ""

    # Promotion
    is_featured: bool = False
    is_active: bool = True
    featured_until: datetime | None = None

    contact_name: str = ""
    contact_phone: str = ""
    contact_email: str = ""

    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.property_type = _coerce_enum(PropertyType, self.property_type)
        self.listing_type = _coerce_enum(ListingType, self.listing_type)
        self.status = _coerce_enum(PropertyStatus, self.status)
        self.price = _quantize(self.price, MONEY_PLACES)
        self.price_per_sqft = _quantize(self.price_per_sqft, MONEY_PLACES)
        self.latitude = _quantize(self.latitude, COORDINATE_PLACES)
        self.longitude = _quantize(self.longitude, COORDINATE_PLACES)
        self.features = list(dict.fromkeys(self.features or []))
        self.images = list(self.images or [])

        # Persistence bookkeeping; kept out of fields() so rows and equality ignore it
        self._store: PropertyStore | None = None
        self._persisted_slug: str | None = None
        self._original: dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Lookup tables
    # ------------------------------------------------------------------

    @staticmethod
    def property_types() -> Mapping[str, str]:
        return PROPERTY_TYPES

    @staticmethod
    def listing_types() -> Mapping[str, str]:
        return LISTING_TYPES

    @staticmethod
    def statuses() -> Mapping[str, str]:
        return STATUSES

    # ------------------------------------------------------------------
    # Derived attributes
    # ------------------------------------------------------------------

    @property
    def formatted_price(self) -> str:
        """Price with currency prefix, no decimals, thousands grouped."""
        return format_price(self.price)

    @property
    def full_address(self) -> str:
        parts = (self.address, self.city, self.state, self.country)
        joined = ", ".join(part.strip() for part in parts if part and part.strip())
        return joined.strip(", ")

    @property
    def main_image(self) -> str | None:
        return self.images[0] if self.images else None

    def image_url(self, storage: MediaStorage | None = None) -> str | None:
        """Public URL of the main image, resolved through ``storage``."""
        if self.main_image is None:
            return None
        return (storage or _default_storage).url(self.main_image)

    @property
    def status_color(self) -> str:
        return STATUS_COLORS.get(code_of(self.status), DEFAULT_STATUS_COLOR)

    @property
    def type_icon(self) -> str:
        return TYPE_ICONS.get(code_of(self.property_type), DEFAULT_TYPE_ICON)

    @property
    def type_label(self) -> str:
        return _label(PROPERTY_TYPES, self.property_type)

    @property
    def listing_type_label(self) -> str:
        return _label(LISTING_TYPES, self.listing_type)

    @property
    def status_label(self) -> str:
        return _label(STATUSES, self.status)

    @property
    def exists(self) -> bool:
        """Whether the record has been written to a store."""
        return self._persisted_slug is not None

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_featured_now(self, now: datetime | None = None) -> bool:
        """Whether the promotion flag is set and has not lapsed."""
        if not self.is_featured:
            return False
        if self.featured_until is None:
            return True
        return self.featured_until > _now_like(self.featured_until, now)

    def is_available(self) -> bool:
        return self.status == PropertyStatus.AVAILABLE and bool(self.is_active)

    def has_feature(self, feature: str) -> bool:
        return feature in self.features

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def recompute_price_per_sqft(self) -> None:
        """Set ``price_per_sqft`` from price and area, then save.

        Does nothing when the area is missing or not positive.
        """
        area = _quantize(self.total_area, None)
        if area is None or area <= 0:
            return

        price = self.price or Decimal("0")
        self.price_per_sqft = _quantize(price / area, MONEY_PLACES)
        self.save()

    def add_feature(self, feature: str) -> None:
        if feature in self.features:
            return
        self.features.append(feature)
        self.save()

    def remove_feature(self, feature: str) -> None:
        self.features = [f for f in self.features if f != feature]
        self.save()

    def save(self) -> None:
        """Write the record through the store it is bound to.

        Records that were never saved or loaded are detached and only
        change in memory.
        """
        if self._store is None:
            logger.debug("Property %r is detached, skipping save", self.slug or self.title)
            return
        self._store.save(self)

    # ------------------------------------------------------------------
    # Dirty tracking
    # ------------------------------------------------------------------

    def is_dirty(self, *names: str) -> bool:
        """Whether any of ``names`` (or any field) changed since load/save.

        A record that has never been persisted is always dirty.
        """
        if not self._original:
            return True
        current = self.to_row()
        keys = names or tuple(current)
        return any(current.get(key) != self._original.get(key) for key in keys)

    def original(self, name: str) -> Any:
        """Value of field ``name`` as of the last load/save."""
        return self._original.get(name)

    def _bind(self, store: PropertyStore | None) -> None:
        """Attach to ``store`` and snapshot the current state as clean."""
        self._store = store
        self._persisted_slug = self.slug
        self._original = self.to_row()

    # ------------------------------------------------------------------
    # Row conversion
    # ------------------------------------------------------------------

    def to_row(self) -> dict[str, Any]:
        """Full field set as a plain dict, enum members reduced to codes."""
        row: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, list):
                value = list(value)
            row[f.name] = value
        return row

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Property":
        """Build a record from a stored row, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        values = {key: value for key, value in row.items() if key in names}
        for key in _DATETIME_FIELDS:
            if isinstance(values.get(key), str):
                values[key] = datetime.fromisoformat(values[key])
        return cls(**values)


def configure_display(currency: str | None = None, storage: MediaStorage | None = None) -> None:
    """Set the currency and storage used by ``formatted_price`` and ``image_url``."""
    global _default_currency, _default_storage
    if currency is not None:
        _default_currency = currency
    if storage is not None:
        _default_storage = storage


# ----------------------------------------------------------------------
# Save hooks
# ----------------------------------------------------------------------

def prepare_for_create(record: Property) -> None:
    """Fill in the slug from the title when none was given."""
    if not record.slug:
        record.slug = slugify(record.title)


def prepare_for_update(record: Property) -> None:
    """Re-derive the slug when the title changed since load."""
    if record.is_dirty("title"):
        record.slug = slugify(record.title)


def format_price(amount: Decimal | float | int | None, currency: str | None = None) -> str:
    """Render ``amount`` as e.g. ``JOD 250,000``.

    Without ``currency`` the configured display currency is used.
    """
    currency = currency or _default_currency
    value = Decimal(str(amount or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{currency} {value:,}"


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def _coerce_enum(enum_cls: type[Enum], value: Any) -> Any:
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _quantize(value: Any, places: Decimal | None) -> Decimal | None:
    if value is None or value == "":
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    if places is None:
        return value
    return value.quantize(places, rounding=ROUND_HALF_UP)


def _label(table: Mapping[str, str], value: Any) -> str:
    code = code_of(value)
    if not code:
        return ""
    return table.get(code, code.replace("_", " ").title())


def _now_like(moment: datetime, now: datetime | None) -> datetime:
    """``now`` (or the current time) in the same timezone style as ``moment``."""
    if now is None:
        return datetime.now(moment.tzinfo)
    if now.tzinfo is None and moment.tzinfo is not None:
        return now.replace(tzinfo=moment.tzinfo)
    if now.tzinfo is not None and moment.tzinfo is None:
        return now.replace(tzinfo=None)
    return now
