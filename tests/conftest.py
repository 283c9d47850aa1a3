"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from listings.models import ListingType, Property, PropertyStatus, PropertyType


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for expiry checks."""
    return datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def sample_property() -> Property:
    """A fully populated available villa."""
    return Property(
        title="Luxury Villa in Abdoun",
        description="A luxurious villa.",
        property_type=PropertyType.VILLA,
        listing_type=ListingType.SALE,
        status=PropertyStatus.AVAILABLE,
        price=Decimal("950000"),
        address="12 Zahran St",
        city="Abdoun",
        state="Amman",
        country="Jordan",
        latitude=Decimal("31.948"),
        longitude=Decimal("35.855"),
        bedrooms=5,
        bathrooms=4,
        total_area=650,
        built_year=2015,
        features=["Garden", "Balcony"],
        images=["properties/villa-1.jpg", "properties/villa-2.jpg"],
        contact_name="Test Agent",
        contact_phone="+962790000000",
        contact_email="agent@test.com",
    )


@pytest.fixture
def listings(now: datetime) -> list[Property]:
    """Fixed record set covering every scope."""
    return [
        Property(
            title="Sale House Abdoun",
            slug="sale-house-abdoun",
            property_type="house",
            listing_type="sale",
            status="available",
            price=Decimal("300000"),
            city="Abdoun",
            bedrooms=4,
            is_featured=True,
        ),
        Property(
            title="Rent Apartment Khalda",
            slug="rent-apartment-khalda",
            property_type="apartment",
            listing_type="rent",
            status="available",
            price=Decimal("800"),
            city="Khalda",
            bedrooms=2,
            is_featured=True,
            featured_until=now + timedelta(days=10),
        ),
        Property(
            title="Rent Villa Dabouq",
            slug="rent-villa-dabouq",
            property_type="villa",
            listing_type="rent",
            status="rented",
            price=Decimal("1500"),
            city="Dabouq",
            bedrooms=6,
            is_featured=True,
            featured_until=now - timedelta(days=1),
        ),
        Property(
            title="Rent Condo Jabal Amman",
            slug="rent-condo-jabal-amman",
            property_type="condo",
            listing_type="rent",
            status="available",
            price=Decimal("2500"),
            city="Jabal Amman",
            bedrooms=3,
            is_active=False,
        ),
        Property(
            title="Land Al Jubeiha",
            slug="land-al-jubeiha",
            property_type="land",
            listing_type="sale",
            status="pending",
            price=Decimal("500"),
            city="Al Jubeiha",
            bedrooms=None,
        ),
    ]


@pytest.fixture
def display_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Restore the display currency and storage after the test."""
    from listings.models import property as property_module

    monkeypatch.setattr(property_module, "_default_currency", property_module._default_currency)
    monkeypatch.setattr(property_module, "_default_storage", property_module._default_storage)
