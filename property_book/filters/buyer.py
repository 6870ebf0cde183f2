"""Predicates over buyers."""

from dataclasses import dataclass

from property_book.filters.base import (
    EntityFilter,
    contains_word_ignore_case,
    normalize_keywords,
)
from property_book.models.base import require_present
from property_book.models.buyer import Buyer
from property_book.models.characteristics import Characteristics
from property_book.models.enums import Priority
from property_book.models.property import Price


@dataclass(frozen=True)
class BuyerHasAllCharacteristics(EntityFilter[Buyer]):
    """Tests that a buyer's desired characteristics contain all the given ones.

    A buyer without desired characteristics never matches.
    """

    characteristics: Characteristics

    def __post_init__(self) -> None:
        require_present(type(self).__name__, characteristics=self.characteristics)

    def test(self, entity: Buyer) -> bool:
        if entity.desired_characteristics is None:
            return False
        return entity.desired_characteristics.contains_all(self.characteristics)


@dataclass(frozen=True)
class BuyerHasAnyCharacteristic(EntityFilter[Buyer]):
    """Tests that a buyer desires at least one of the given characteristics."""

    characteristics: Characteristics

    def __post_init__(self) -> None:
        require_present(type(self).__name__, characteristics=self.characteristics)

    def test(self, entity: Buyer) -> bool:
        if entity.desired_characteristics is None:
            return False
        return entity.desired_characteristics.contains_any(self.characteristics)


@dataclass(frozen=True)
class BuyerCanAfford(EntityFilter[Buyer]):
    """Tests that a price lies within a buyer's budget."""

    price: Price

    def __post_init__(self) -> None:
        require_present(type(self).__name__, price=self.price)

    def test(self, entity: Buyer) -> bool:
        return entity.price_range is not None and entity.price_range.contains(self.price)


@dataclass(frozen=True)
class BuyerHasPriority(EntityFilter[Buyer]):
    priority: Priority

    def __post_init__(self) -> None:
        require_present(type(self).__name__, priority=self.priority)

    def test(self, entity: Buyer) -> bool:
        return entity.priority == self.priority


@dataclass(frozen=True)
class BuyerNameContainsKeywords(EntityFilter[Buyer]):
    """Tests that any keyword matches a whole word of the buyer's name, ignoring case."""

    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "keywords", normalize_keywords(type(self).__name__, self.keywords)
        )

    def test(self, entity: Buyer) -> bool:
        name = str(entity.name)
        return any(contains_word_ignore_case(name, keyword) for keyword in self.keywords)
