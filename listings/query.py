"""Named, composable filters over collections of properties.

Each scope factory returns a plain predicate, so scopes can be tested
on their own and combined freely::

    rentals = apply_scopes(records, for_rent(), price_between(500, 1500))

    PropertyQuery(records).available().in_city("abdoun").with_bedrooms(3).all()
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable, Iterable, Iterator

from listings.models.enums import ListingType, PropertyType, code_of
from listings.models.property import Property

Scope = Callable[[Property], bool]


def available() -> Scope:
    """Status is available and the listing is active."""
    return lambda record: record.is_available()


def for_sale() -> Scope:
    return lambda record: record.listing_type == ListingType.SALE


def for_rent() -> Scope:
    return lambda record: record.listing_type == ListingType.RENT


def featured(now: datetime | None = None) -> Scope:
    """Flagged as featured with no expiry or an expiry after ``now``."""
    return lambda record: record.is_featured_now(now)


def in_city(city: str) -> Scope:
    """City contains ``city``, ignoring case."""
    needle = city.casefold()
    return lambda record: needle in (record.city or "").casefold()


def price_between(minimum: Decimal | float | int, maximum: Decimal | float | int) -> Scope:
    """Price within ``[minimum, maximum]``; records without a price never match."""
    low = Decimal(str(minimum))
    high = Decimal(str(maximum))

    def predicate(record: Property) -> bool:
        return record.price is not None and low <= record.price <= high

    return predicate


def by_type(property_type: PropertyType | str) -> Scope:
    code = code_of(property_type)
    return lambda record: code_of(record.property_type) == code


def with_bedrooms(bedrooms: int) -> Scope:
    """At least ``bedrooms`` bedrooms; records without a count never match."""
    return lambda record: record.bedrooms is not None and record.bedrooms >= bedrooms


def apply_scopes(records: Iterable[Property], *scopes: Scope) -> list[Property]:
    """Records matching every scope, in their original order."""
    return [record for record in records if all(scope(record) for scope in scopes)]


class PropertyQuery:
    """Immutable builder chaining scopes with logical AND.

    Every scope method returns a new query sharing the same records.
    The source is copied once on construction, so a generator can be
    queried repeatedly.

    Parameters
    ----------
    records : Iterable[Property]
        Collection to filter.
    scopes : tuple[Scope, ...]
        Scopes already applied.
    """

    def __init__(self, records: Iterable[Property], scopes: tuple[Scope, ...] = ()) -> None:
        self._records = tuple(records)
        self._scopes = scopes

    def where(self, scope: Scope) -> PropertyQuery:
        return PropertyQuery(self._records, self._scopes + (scope,))

    def available(self) -> PropertyQuery:
        return self.where(available())

    def for_sale(self) -> PropertyQuery:
        return self.where(for_sale())

    def for_rent(self) -> PropertyQuery:
        return self.where(for_rent())

    def featured(self, now: datetime | None = None) -> PropertyQuery:
        return self.where(featured(now))

    def in_city(self, city: str) -> PropertyQuery:
        return self.where(in_city(city))

    def price_between(
        self,
        minimum: Decimal | float | int,
        maximum: Decimal | float | int,
    ) -> PropertyQuery:
        return self.where(price_between(minimum, maximum))

    def by_type(self, property_type: PropertyType | str) -> PropertyQuery:
        return self.where(by_type(property_type))

    def with_bedrooms(self, bedrooms: int) -> PropertyQuery:
        return self.where(with_bedrooms(bedrooms))

    def all(self) -> list[Property]:
        return apply_scopes(self._records, *self._scopes)

    def first(self) -> Property | None:
        return next(iter(self), None)

    def count(self) -> int:
        return sum(1 for _ in self)

    def exists(self) -> bool:
        return self.first() is not None

    def __iter__(self) -> Iterator[Property]:
        for record in self._records:
            if all(scope(record) for scope in self._scopes):
                yield record
