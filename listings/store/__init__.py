"""In-memory persistence for property listings."""

from listings.store.property import PropertyStore

__all__ = ["PropertyStore"]
