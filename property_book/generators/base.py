"""Base generator class for sample data generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from faker import Faker

T = TypeVar("T")


class BaseGenerator(ABC, Generic[T]):
    """Base class for sample data generators.

    Provides common initialization: a Faker instance and a private
    ``random.Random``, both seeded for reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
    ) -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    @abstractmethod
    def generate(self) -> T:
        """Generate a single entity."""

    def generate_batch(self, count: int) -> Iterator[T]:
        """Generate multiple entities.

        Parameters
        ----------
        count : int
            Number of entities to generate.

        Yields
        ------
        T
            Generated entities.
        """
        for _ in range(count):
            yield self.generate()

    def _sample_characteristics(self, pool: list[str], max_count: int) -> list[str]:
        return self.rng.sample(pool, self.rng.randint(1, max_count))


# Shared by buyer and property generators
CHARACTERISTICS_POOL: list[str] = [
    "pool",
    "garage",
    "garden",
    "balcony",
    "gym",
    "near MRT",
    "near school",
    "sea view",
    "high floor",
    "pet friendly",
    "furnished",
    "corner unit",
]

TAGS_POOL: list[str] = ["new", "hot", "renovated", "freehold", "leasehold", "urgent", "vip"]
