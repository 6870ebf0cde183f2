"""Buyer generator for sample contacts."""

from __future__ import annotations

import re

from property_book.generators.base import CHARACTERISTICS_POOL, TAGS_POOL, BaseGenerator
from property_book.models.base import Email, Name, Phone, Tag
from property_book.models.buyer import Buyer, PriceRange
from property_book.models.characteristics import Characteristics
from property_book.models.enums import Priority
from property_book.models.property import Price

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class BuyerGenerator(BaseGenerator[Buyer]):
    """Generate synthetic buyers."""

    PRIORITIES = list(Priority)
    PRIORITY_WEIGHTS = [0.2, 0.6, 0.2]  # HIGH, NORMAL, LOW

    BUDGET_RATE = 0.8
    CHARACTERISTICS_RATE = 0.7

    def generate(self) -> Buyer:
        """Generate a buyer.

        Returns
        -------
        Buyer
            Generated buyer.
        """
        first = self.fake.first_name()
        last = self.fake.last_name()

        price_range = None
        if self.rng.random() < self.BUDGET_RATE:
            low = self.rng.randint(100, 1500) * 1000
            high = low + self.rng.randint(50, 800) * 1000
            price_range = PriceRange(Price(low), Price(high))

        desired = None
        if self.rng.random() < self.CHARACTERISTICS_RATE:
            desired = Characteristics(self._sample_characteristics(CHARACTERISTICS_POOL, 3))

        tags = self.rng.sample(TAGS_POOL, self.rng.randint(0, 1))

        return Buyer(
            name=Name(f"{first} {last}"),
            phone=Phone(self.fake.numerify("9#######")),
            email=Email(self._email(first, last)),
            tags=frozenset(Tag(t) for t in tags),
            price_range=price_range,
            desired_characteristics=desired,
            priority=self.rng.choices(self.PRIORITIES, weights=self.PRIORITY_WEIGHTS)[0],
        )

    def _email(self, first: str, last: str) -> str:
        parts = [_NON_ALNUM.sub("", part.lower()) for part in (first, last)]
        # Non-Latin names strip to nothing
        local = ".".join(part for part in parts if part) or self.fake.numerify("buyer####")
        return f"{local}{self.rng.randint(1, 99)}@{self.fake.free_email_domain()}"
