"""Property listing generator for seeding and tests."""

from __future__ import annotations

import copy
import random
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterator, Mapping

from listings.generators.base import BaseGenerator
from listings.models import Property
from listings.models.enums import PROPERTY_TYPES as TYPE_LABELS
from listings.models.enums import ListingType, PropertyStatus, PropertyType, code_of
from listings.text import slugify

Attributes = dict[str, Any]
StateFn = Callable[[Attributes], Mapping[str, Any]]


class PropertyGenerator(BaseGenerator):
    """Generate plausible listings across Amman districts.

    Prices follow the property and listing type, coordinates stay inside
    the chosen district and amenities match the property type. Named
    variants (``featured()``, ``sold()``, ``for_rent()``) return new
    generators, so they chain in any order::

        gen = PropertyGenerator(seed=42)
        gen.featured().for_rent().generate()
    """

    PROPERTY_TYPES = list(PropertyType)
    LISTING_TYPES = list(ListingType)
    STATUSES = list(PropertyStatus)

    # (lat_min, lat_max), (lng_min, lng_max)
    DISTRICT_BOUNDS: dict[str, tuple[tuple[float, float], tuple[float, float]]] = {
        "Abdoun": ((31.946, 31.950), (35.850, 35.860)),
        "Jabal Amman": ((31.949, 31.955), (35.910, 35.920)),
        "Jabal Al Lweibdeh": ((31.958, 31.963), (35.910, 35.915)),
        "Khalda": ((31.995, 32.002), (35.830, 35.840)),
        "Sweifieh": ((31.956, 31.961), (35.860, 35.870)),
        "Dabouq": ((32.014, 32.019), (35.810, 35.820)),
        "Shmeisani": ((31.982, 31.987), (35.900, 35.910)),
        "Mecca Street": ((31.970, 31.979), (35.850, 35.870)),
        "Al Rabiah": ((31.974, 31.978), (35.880, 35.900)),
        "Al Jubeiha": ((32.024, 32.028), (35.850, 35.860)),
    }
    DISTRICTS = list(DISTRICT_BOUNDS)
    # Covers every district
    DEFAULT_BOUNDS = ((31.90, 32.05), (35.80, 35.95))

    # Sale prices (JOD)
    SALE_PRICE_RANGES = {
        PropertyType.LAND: (100_000, 1_000_000),
        PropertyType.APARTMENT: (45_000, 250_000),
        PropertyType.HOUSE: (120_000, 800_000),
        PropertyType.VILLA: (400_000, 2_500_000),
        PropertyType.COMMERCIAL: (150_000, 1_500_000),
    }
    DEFAULT_SALE_PRICE_RANGE = (70_000, 500_000)
    # Monthly rent (JOD), whatever the property type
    RENT_PRICE_RANGE = (250, 5_000)

    TITLE_ADJECTIVES = [
        "Modern",
        "Luxury",
        "Spacious",
        "Elegant",
        "Premium",
        "Exclusive",
        "Beautiful",
        "High-End",
    ]
    TITLE_NOUNS = {PropertyType.COMMERCIAL: "Commercial Property"}

    DESCRIPTIONS = {
        PropertyType.HOUSE: (
            "A beautiful home offering spacious living areas, modern finishes, "
            "and excellent location near top schools and amenities."
        ),
        PropertyType.APARTMENT: (
            "A stylish apartment with contemporary design, secure building, "
            "and close proximity to shopping centers and cafes."
        ),
        PropertyType.VILLA: (
            "A luxurious villa offering privacy, premium architecture, and "
            "high-end facilities in one of Amman's elite neighborhoods."
        ),
        PropertyType.CONDO: "A modern condo with excellent building amenities and a prime location in Amman.",
        PropertyType.TOWNHOUSE: "A modern townhouse that offers comfort, privacy, and community living.",
        PropertyType.LAND: "Prime investment land suitable for residential or commercial development.",
        PropertyType.COMMERCIAL: (
            "A commercial space ideal for offices, clinics, or retail with excellent visibility."
        ),
    }
    DEFAULT_DESCRIPTION = "A premium real estate opportunity in Amman."
    META_DESCRIPTION_LENGTH = 155

    COMMON_FEATURES = [
        "Central Heating",
        "Split A/C",
        "Balcony",
        "Parking",
        "Security System",
        "Water Tank",
        "Solar Water Heater",
    ]
    TYPE_FEATURES = {
        PropertyType.HOUSE: ["Garden", "Maid Room", "Laundry Room", "Storage Room", "Private Entrance"],
        PropertyType.VILLA: ["Garden", "Maid Room", "Laundry Room", "Storage Room", "Private Entrance"],
        PropertyType.APARTMENT: ["Elevator", "Shared Gym", "Shared Pool", "Generator"],
        PropertyType.CONDO: ["Elevator", "Shared Gym", "Shared Pool", "Generator"],
        PropertyType.TOWNHOUSE: ["Private Terrace", "Garage", "Small Garden"],
        PropertyType.COMMERCIAL: ["Reception Area", "Conference Room", "Central AC", "Backup Generator"],
        PropertyType.LAND: ["Main Road Access", "Zoned for Building", "Registered Title Deed"],
    }
    DEFAULT_TYPE_FEATURES = ["High-Quality Finishes"]
    FEATURE_COUNT_RANGE = (3, 7)

    FEATURED_PROBABILITY = 0.20
    ACTIVE_PROBABILITY = 0.95
    FURNISHED_PROBABILITY = 0.40
    PARKING_PROBABILITY = 0.80

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(seed, locale, rng)
        self._states: tuple[StateFn, ...] = ()

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    def state(
        self,
        overrides: StateFn | Mapping[str, Any] | None = None,
        **attrs: Any,
    ) -> PropertyGenerator:
        """Return a generator that applies extra overrides after the base draw.

        ``overrides`` may be a mapping or a callable receiving the
        attributes drawn so far and returning the ones to replace.
        """
        if callable(overrides):
            fn = overrides
        else:
            fixed = {**(overrides or {}), **attrs}

            def fn(_: Attributes) -> Mapping[str, Any]:
                return fixed

        clone = copy.copy(self)
        clone._states = self._states + (fn,)
        return clone

    def featured(self) -> PropertyGenerator:
        return self.state(lambda _: {
            "is_featured": True,
            "featured_until": self._future_datetime(days=180),
        })

    def sold(self) -> PropertyGenerator:
        return self.state(status=PropertyStatus.SOLD)

    def for_rent(self) -> PropertyGenerator:
        return self.state(lambda _: {
            "listing_type": ListingType.RENT,
            "price": Decimal(self.random.randint(*self.RENT_PRICE_RANGE)),
        })

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, **overrides: Any) -> Property:
        """Generate a single property.

        Parameters
        ----------
        **overrides
            Field values applied after the base draw and every variant.

        Returns
        -------
        Property
            Generated, unsaved property.
        """
        attrs = self.definition(
            property_type=overrides.get("property_type"),
            listing_type=overrides.get("listing_type"),
            city=overrides.get("city"),
        )
        drawn_title = attrs["title"]

        for state in self._states:
            attrs.update(state(attrs))
        attrs.update(overrides)

        # Keep the slug in step with a replaced title unless one was given
        if attrs["title"] != drawn_title and attrs["slug"] == slugify(drawn_title):
            attrs["slug"] = slugify(attrs["title"])

        return Property(**attrs)

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self.generate()

    def definition(
        self,
        property_type: PropertyType | str | None = None,
        listing_type: ListingType | str | None = None,
        city: str | None = None,
    ) -> Attributes:
        """Draw the base attribute set for one listing.

        Fixing ``property_type``, ``listing_type`` or ``city`` up front
        keeps the fields that depend on them (price, rooms, features,
        coordinates, title) consistent with the fixed value.
        """
        property_type = _known(PropertyType, property_type or self.random.choice(self.PROPERTY_TYPES))
        listing_type = _known(ListingType, listing_type or self.random.choice(self.LISTING_TYPES))
        city = city or self.random.choice(self.DISTRICTS)
        latitude, longitude = self._coordinates(city)
        is_land = property_type == PropertyType.LAND

        title = self._title(property_type, city)
        description = self.DESCRIPTIONS.get(property_type, self.DEFAULT_DESCRIPTION)

        return {
            "title": title,
            "slug": slugify(title),
            "description": description,
            "property_type": property_type,
            "listing_type": listing_type,
            "status": self.random.choice(self.STATUSES),
            "price": self._price(property_type, listing_type),
            "address": self.fake.street_address(),
            "city": city,
            "state": "Amman",
            "country": "Jordan",
            "postal_code": self.fake.postcode() if self.random.random() < 0.5 else None,
            "latitude": latitude,
            "longitude": longitude,
            "bedrooms": None if is_land else self.random.randint(1, 6),
            "bathrooms": None if is_land else self.random.randint(1, 4),
            "total_area": self.random.randint(80, 1500),
            "built_year": None if is_land else self.random.randint(1980, 2025),
            "furnished": self._chance(self.FURNISHED_PROBABILITY),
            "parking": self._chance(self.PARKING_PROBABILITY),
            "parking_spaces": (
                self.random.randint(1, 3) if self._chance(self.PARKING_PROBABILITY) else None
            ),
            "features": self._features(property_type),
            "images": [],
            "meta_title": f"{title} - Real Estate in Amman",
            "meta_description": _truncate(description, self.META_DESCRIPTION_LENGTH),
            "is_featured": self._chance(self.FEATURED_PROBABILITY),
            "is_active": self._chance(self.ACTIVE_PROBABILITY),
            "featured_until": (
                self._future_datetime(days=90) if self._chance(self.FEATURED_PROBABILITY) else None
            ),
            "contact_name": self.fake.name(),
            "contact_phone": self.fake.phone_number(),
            "contact_email": self.fake.email(),
        }

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------

    def _title(self, property_type: PropertyType | str, city: str) -> str:
        adjective = self.random.choice(self.TITLE_ADJECTIVES)
        if property_type == PropertyType.LAND:
            return f"Prime Land in {city}"
        noun = self.TITLE_NOUNS.get(property_type, TYPE_LABELS.get(code_of(property_type), "Property"))
        return f"{adjective} {noun} in {city}"

    def _price(self, property_type: PropertyType | str, listing_type: ListingType | str) -> Decimal:
        low, high = self.SALE_PRICE_RANGES.get(property_type, self.DEFAULT_SALE_PRICE_RANGE)
        sale_price = self.random.randint(low, high)
        if listing_type == ListingType.RENT:
            return Decimal(self.random.randint(*self.RENT_PRICE_RANGE))
        return Decimal(sale_price)

    def _coordinates(self, city: str) -> tuple[Decimal, Decimal]:
        (lat_min, lat_max), (lng_min, lng_max) = self.DISTRICT_BOUNDS.get(city, self.DEFAULT_BOUNDS)
        latitude = round(self.random.uniform(lat_min, lat_max), 6)
        longitude = round(self.random.uniform(lng_min, lng_max), 6)
        return Decimal(str(latitude)), Decimal(str(longitude))

    def _features(self, property_type: PropertyType | str) -> list[str]:
        specific = self.TYPE_FEATURES.get(property_type, self.DEFAULT_TYPE_FEATURES)
        candidates = list(dict.fromkeys(self.COMMON_FEATURES + specific))
        count = min(self.random.randint(*self.FEATURE_COUNT_RANGE), len(candidates))
        return self.random.sample(candidates, count)

    def _future_datetime(self, days: int) -> datetime:
        # At least an hour ahead so the promotion is still live when used
        seconds = self.random.randint(3600, days * 24 * 3600)
        return datetime.now().replace(microsecond=0) + timedelta(seconds=seconds)

    def _chance(self, probability: float) -> bool:
        return self.random.random() < probability


def _known(enum_cls: type[Enum], value: Any) -> Any:
    """Enum member for a known code, otherwise the code itself."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _truncate(text: str, limit: int, end: str = "...") -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + end
