"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: a Faker instance for text fields
    and a ``random.Random`` for numeric draws, both seeded for
    reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    rng : random.Random | None
        Random source to draw from. Defaults to a new ``Random(seed)``;
        pass one in to share or replace the source in tests.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        self.fake = Faker(locale)
        self.random = rng or random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
