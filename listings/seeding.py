"""Seed a store with generated listings."""

from __future__ import annotations

from listings.exceptions import DuplicateSlugError
from listings.generators.property import PropertyGenerator
from listings.logging import get_logger
from listings.models import Property
from listings.store import PropertyStore
from listings.text import slugify

logger = get_logger(__name__)

MAX_SLUG_ATTEMPTS = 100


def seed_properties(
    generator: PropertyGenerator,
    store: PropertyStore,
    count: int,
) -> list[Property]:
    """Generate ``count`` listings and save each one to ``store``.

    Generated titles repeat often enough that slugs collide; a
    colliding listing is saved under ``<slug>-2``, ``<slug>-3`` and so
    on.
    """
    saved = []
    for record in generator.generate_batch(count):
        saved.append(_save_with_unique_slug(store, record))
    logger.info(
        "Seeded %d properties (%d stored)",
        len(saved),
        len(store),
        extra={"seeded": len(saved), "stored": len(store)},
    )
    return saved


def _save_with_unique_slug(store: PropertyStore, record: Property) -> Property:
    base_slug = record.slug or slugify(record.title)
    for attempt in range(2, MAX_SLUG_ATTEMPTS + 2):
        try:
            return store.save(record)
        except DuplicateSlugError:
            record.slug = f"{base_slug}-{attempt}"
            logger.debug(
                "Slug %s taken, retrying as %s",
                base_slug,
                record.slug,
                extra={"slug": record.slug},
            )
    raise DuplicateSlugError(f"No free slug for {base_slug!r} after {MAX_SLUG_ATTEMPTS} attempts")
