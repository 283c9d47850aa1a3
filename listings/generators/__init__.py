"""Synthetic listing generators."""

from listings.generators.base import BaseGenerator
from listings.generators.property import PropertyGenerator

__all__ = ["BaseGenerator", "PropertyGenerator"]
