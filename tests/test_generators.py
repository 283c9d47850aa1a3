"""Tests for PropertyGenerator."""

import random
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from listings.generators import PropertyGenerator
from listings.models import ListingType, Property, PropertyStatus, PropertyType
from listings.text import slugify


class TestPropertyGenerator:
    """Tests for base generation."""

    def test_generate_property(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)
        record = gen.generate()

        assert isinstance(record, Property)
        assert record.property_type in list(PropertyType)
        assert record.listing_type in list(ListingType)
        assert record.status in list(PropertyStatus)
        assert record.city in PropertyGenerator.DISTRICTS
        assert record.state == "Amman"
        assert record.country == "Jordan"
        assert record.images == []
        assert record.contact_name
        assert record.contact_phone
        assert "@" in record.contact_email
        assert 80 <= record.total_area <= 1500

    def test_title_slug_and_meta(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for record in gen.generate_batch(50):
            assert record.slug == slugify(record.title)
            assert record.title.endswith(f" in {record.city}")
            assert record.meta_title == f"{record.title} - Real Estate in Amman"

    def test_title_phrasing(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        land = gen.generate(property_type="land", city="Khalda")
        assert land.title == "Prime Land in Khalda"

        shop = gen.generate(property_type="commercial", city="Shmeisani")
        adjective, rest = shop.title.split(" ", 1)
        assert adjective in PropertyGenerator.TITLE_ADJECTIVES
        assert rest == "Commercial Property in Shmeisani"

        flat = gen.generate(property_type="apartment", city="Sweifieh")
        assert flat.title.endswith(" Apartment in Sweifieh")

    def test_meta_description_truncates_description(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for record in gen.generate_batch(30):
            assert record.description == PropertyGenerator.DESCRIPTIONS[record.property_type]
            limit = PropertyGenerator.META_DESCRIPTION_LENGTH
            if len(record.description) <= limit:
                assert record.meta_description == record.description
            else:
                assert record.meta_description.endswith("...")
                assert record.description.startswith(record.meta_description[:-3])

    def test_long_description_truncated(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)
        gen.DESCRIPTIONS = {t: "word " * 60 for t in PropertyType}

        record = gen.generate()

        assert len(record.meta_description) <= PropertyGenerator.META_DESCRIPTION_LENGTH + 3
        assert record.meta_description.endswith("...")

    def test_coordinates_inside_district(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for record in gen.generate_batch(200):
            (lat_min, lat_max), (lng_min, lng_max) = PropertyGenerator.DISTRICT_BOUNDS[record.city]
            assert Decimal(str(lat_min)) <= record.latitude <= Decimal(str(lat_max))
            assert Decimal(str(lng_min)) <= record.longitude <= Decimal(str(lng_max))

    def test_unknown_district_uses_wide_bounds(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)
        record = gen.generate(city="Zarqa")

        assert record.city == "Zarqa"
        assert Decimal("31.90") <= record.latitude <= Decimal("32.05")
        assert Decimal("35.80") <= record.longitude <= Decimal("35.95")

    def test_unknown_type_uses_defaults(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)
        record = gen.generate(property_type="castle", listing_type="sale", city="Abdoun")

        assert record.property_type == "castle"
        assert record.title.endswith(" Property in Abdoun")
        assert record.description == PropertyGenerator.DEFAULT_DESCRIPTION
        assert Decimal(70_000) <= record.price <= Decimal(500_000)
        allowed = set(PropertyGenerator.COMMON_FEATURES) | set(PropertyGenerator.DEFAULT_TYPE_FEATURES)
        assert set(record.features) <= allowed

    def test_land_has_no_rooms(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for _ in range(1000):
            record = gen.generate(property_type=PropertyType.LAND)
            assert record.bedrooms is None
            assert record.bathrooms is None
            assert record.built_year is None

    def test_random_land_has_no_rooms(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)
        land = [r for r in gen.generate_batch(700) if r.property_type == PropertyType.LAND]

        assert land
        assert all(r.bedrooms is None and r.bathrooms is None and r.built_year is None for r in land)

    def test_buildings_have_rooms(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for _ in range(200):
            record = gen.generate(property_type=PropertyType.HOUSE)
            assert 1 <= record.bedrooms <= 6
            assert 1 <= record.bathrooms <= 4
            assert 1980 <= record.built_year <= 2025

    def test_rent_price_range(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for _ in range(1000):
            record = gen.generate(listing_type=ListingType.RENT)
            assert Decimal(250) <= record.price <= Decimal(5000)

    @pytest.mark.parametrize(
        ("property_type", "low", "high"),
        [
            (PropertyType.LAND, 100_000, 1_000_000),
            (PropertyType.APARTMENT, 45_000, 250_000),
            (PropertyType.HOUSE, 120_000, 800_000),
            (PropertyType.VILLA, 400_000, 2_500_000),
            (PropertyType.COMMERCIAL, 150_000, 1_500_000),
            (PropertyType.CONDO, 70_000, 500_000),
            (PropertyType.TOWNHOUSE, 70_000, 500_000),
        ],
    )
    def test_sale_price_ranges(self, seed: int, property_type: PropertyType, low: int, high: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for _ in range(100):
            record = gen.generate(property_type=property_type, listing_type=ListingType.SALE)
            assert Decimal(low) <= record.price <= Decimal(high)

    def test_features(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for record in gen.generate_batch(200):
            allowed = set(PropertyGenerator.COMMON_FEATURES) | set(
                PropertyGenerator.TYPE_FEATURES[record.property_type]
            )
            assert 3 <= len(record.features) <= 7
            assert len(set(record.features)) == len(record.features)
            assert set(record.features) <= allowed

    def test_parking_spaces(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        for record in gen.generate_batch(100):
            assert record.parking_spaces is None or 1 <= record.parking_spaces <= 3

    def test_generate_batch(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)
        records = list(gen.generate_batch(10))

        assert len(records) == 10

    def test_reproducible_with_seed(self) -> None:
        first = [(r.title, r.price, r.contact_name) for r in PropertyGenerator(seed=7).generate_batch(20)]
        second = [(r.title, r.price, r.contact_name) for r in PropertyGenerator(seed=7).generate_batch(20)]

        assert first == second

    def test_injected_random_source(self) -> None:
        first = [r.title for r in PropertyGenerator(rng=random.Random(3)).generate_batch(10)]
        second = [r.title for r in PropertyGenerator(rng=random.Random(3)).generate_batch(10)]

        assert first == second

    def test_all_types_and_statuses_appear(self, seed: int) -> None:
        records = list(PropertyGenerator(seed=seed).generate_batch(300))

        assert {r.property_type for r in records} == set(PropertyType)
        assert {r.listing_type for r in records} == set(ListingType)
        assert {r.status for r in records} == set(PropertyStatus)


class TestGeneratorVariants:
    """Tests for featured(), sold(), for_rent() and state()."""

    def test_featured(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed).featured()
        horizon = datetime.now() + timedelta(days=181)

        for record in gen.generate_batch(50):
            assert record.is_featured is True
            assert datetime.now() < record.featured_until <= horizon
            assert record.is_featured_now() is True

    def test_sold(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed).sold()

        assert all(r.status == PropertyStatus.SOLD for r in gen.generate_batch(20))

    def test_for_rent(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed).for_rent()

        for record in gen.generate_batch(200):
            assert record.listing_type == ListingType.RENT
            assert Decimal(250) <= record.price <= Decimal(5000)

    def test_variants_compose(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed).featured().sold().for_rent()

        for record in gen.generate_batch(20):
            assert record.is_featured_now() is True
            assert record.status == PropertyStatus.SOLD
            assert record.listing_type == ListingType.RENT
            assert record.price <= Decimal(5000)

    def test_variant_order_irrelevant(self, seed: int) -> None:
        record = PropertyGenerator(seed=seed).for_rent().sold().featured().generate()

        assert record.status == PropertyStatus.SOLD
        assert record.listing_type == ListingType.RENT
        assert record.is_featured is True

    def test_variants_do_not_change_base_generator(self, seed: int) -> None:
        base = PropertyGenerator(seed=seed)
        base.sold()

        statuses = {r.status for r in base.generate_batch(100)}
        assert statuses != {PropertyStatus.SOLD}

    def test_state_mapping(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed).state({"is_active": False}, furnished=True)
        record = gen.generate()

        assert record.is_active is False
        assert record.furnished is True

    def test_state_callable_sees_drawn_attributes(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed).state(lambda attrs: {"contact_name": attrs["city"]})
        record = gen.generate()

        assert record.contact_name == record.city

    def test_overrides_win_over_variants(self, seed: int) -> None:
        record = PropertyGenerator(seed=seed).sold().generate(status="pending")

        assert record.status == PropertyStatus.PENDING

    def test_title_override_updates_slug(self, seed: int) -> None:
        record = PropertyGenerator(seed=seed).generate(title="Corner Shop on Rainbow Street")

        assert record.slug == "corner-shop-on-rainbow-street"

    def test_explicit_slug_kept(self, seed: int) -> None:
        record = PropertyGenerator(seed=seed).generate(title="Corner Shop", slug="shop-1")

        assert record.slug == "shop-1"
