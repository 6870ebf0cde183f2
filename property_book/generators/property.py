"""Property generator for sample listings."""

from __future__ import annotations

from decimal import Decimal

from property_book.generators.base import CHARACTERISTICS_POOL, TAGS_POOL, BaseGenerator
from property_book.models.base import Address, Tag
from property_book.models.characteristics import Characteristics
from property_book.models.property import Description, Price, Property, PropertyName


class PropertyGenerator(BaseGenerator[Property]):
    """Generate synthetic property listings."""

    NAME_SUFFIXES = ["Residences", "Heights", "Villa", "Loft", "Court", "Gardens", "Towers"]

    # Share of listings that leave characteristics unspecified
    NO_CHARACTERISTICS_RATE = 0.2

    def generate(self) -> Property:
        """Generate a property.

        Returns
        -------
        Property
            Generated property.
        """
        name = f"{self.fake.street_name()} {self.rng.choice(self.NAME_SUFFIXES)}"
        price = Decimal(self.rng.randint(150, 2000) * 1000)
        address = f"{self.fake.street_address()}, {self.fake.city()}"

        characteristics = None
        if self.rng.random() >= self.NO_CHARACTERISTICS_RATE:
            characteristics = Characteristics(
                self._sample_characteristics(CHARACTERISTICS_POOL, 5)
            )

        tags = self.rng.sample(TAGS_POOL, self.rng.randint(0, 2))

        return Property(
            name=PropertyName(name),
            price=Price(price),
            address=Address(address),
            description=Description(self.fake.sentence(nb_words=8)),
            tags=frozenset(Tag(t) for t in tags),
            seller=self.fake.name(),
            characteristics=characteristics,
        )
