"""Slug-keyed property store."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterator

from listings.exceptions import (
    DuplicateSlugError,
    InvalidEntityStateError,
    PropertyNotFoundError,
)
from listings.logging import get_logger
from listings.models.property import Property, prepare_for_create, prepare_for_update
from listings.query import PropertyQuery

logger = get_logger(__name__)


class PropertyStore:
    """In-memory store holding one row per listing, addressed by slug.

    Rows are plain dicts produced by ``Property.to_row()``; every read
    builds a fresh ``Property`` bound to this store, so edits only
    become visible to other readers once saved.
    """

    def __init__(self) -> None:
        self._rows: dict[str, dict[str, Any]] = {}

    def save(self, record: Property) -> Property:
        """Insert or update ``record``.

        Runs the slug hooks for the write, rejects slugs owned by
        another row and moves the row when its slug changed.

        Raises
        ------
        InvalidEntityStateError
            If no slug can be derived from the title.
        DuplicateSlugError
            If the slug belongs to a different stored property.
        """
        previous_slug = record._persisted_slug if record._store is self else None
        creating = previous_slug is None or previous_slug not in self._rows

        slug_before = record.slug
        if creating:
            prepare_for_create(record)
        else:
            prepare_for_update(record)

        try:
            self._check_slug(record, previous_slug)
        except (InvalidEntityStateError, DuplicateSlugError):
            # A rejected write leaves the record as the caller had it
            record.slug = slug_before
            raise

        now = datetime.now()
        if record.created_at is None:
            record.created_at = now
        record.updated_at = now

        if not creating and previous_slug != record.slug:
            del self._rows[previous_slug]
            logger.debug(
                "Moved property %s -> %s",
                previous_slug,
                record.slug,
                extra={"slug": record.slug, "previous_slug": previous_slug},
            )

        self._rows[record.slug] = record.to_row()
        record._bind(self)
        logger.debug(
            "%s property %s",
            "Inserted" if creating else "Updated",
            record.slug,
            extra={"slug": record.slug},
        )
        return record

    def _check_slug(self, record: Property, previous_slug: str | None) -> None:
        if not record.slug:
            raise InvalidEntityStateError(f"Property {record.title!r} has no usable slug")
        if record.slug in self._rows and record.slug != previous_slug:
            raise DuplicateSlugError(f"Slug {record.slug!r} is already taken")

    def get(self, slug: str) -> Property:
        """Load the property stored under ``slug``.

        Raises
        ------
        PropertyNotFoundError
            If nothing is stored under ``slug``.
        """
        record = self.find(slug)
        if record is None:
            raise PropertyNotFoundError(f"Property {slug} not found")
        return record

    def find(self, slug: str) -> Property | None:
        row = self._rows.get(slug)
        if row is None:
            return None
        return self._load(row)

    def delete(self, slug: str) -> None:
        if slug not in self._rows:
            raise PropertyNotFoundError(f"Property {slug} not found")
        del self._rows[slug]
        logger.debug("Deleted property %s", slug, extra={"slug": slug})

    def all(self) -> list[Property]:
        return [self._load(row) for row in self._rows.values()]

    def query(self) -> PropertyQuery:
        """Start a scoped query over a snapshot of every stored property."""
        return PropertyQuery(self.all())

    def _load(self, row: dict[str, Any]) -> Property:
        record = Property.from_row(row)
        record._bind(self)
        return record

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, slug: object) -> bool:
        return slug in self._rows

    def __iter__(self) -> Iterator[Property]:
        return iter(self.all())
