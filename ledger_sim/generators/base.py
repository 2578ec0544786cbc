"""Base generator class for demo data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all demo data generators.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility. Each generator draws from its own
    ``random.Random`` so that two generators built with the same seed
    produce the same sequence regardless of call interleaving.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
