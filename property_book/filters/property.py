"""Predicates over properties."""

from dataclasses import dataclass

from property_book.exceptions import InvalidFieldError
from property_book.filters.base import (
    EntityFilter,
    contains_word_ignore_case,
    normalize_keywords,
)
from property_book.models.base import require_present
from property_book.models.buyer import PriceRange
from property_book.models.characteristics import Characteristics
from property_book.models.property import Property


@dataclass(frozen=True)
class PropertyHasAllCharacteristics(EntityFilter[Property]):
    """Tests that a property has all the given characteristics.

    A property without characteristics never matches.
    """

    characteristics: Characteristics

    def __post_init__(self) -> None:
        require_present(type(self).__name__, characteristics=self.characteristics)

    def test(self, entity: Property) -> bool:
        if entity.characteristics is None:
            return False
        return entity.characteristics.contains_all(self.characteristics)


@dataclass(frozen=True)
class PropertyHasAnyCharacteristic(EntityFilter[Property]):
    characteristics: Characteristics

    def __post_init__(self) -> None:
        require_present(type(self).__name__, characteristics=self.characteristics)

    def test(self, entity: Property) -> bool:
        if entity.characteristics is None:
            return False
        return entity.characteristics.contains_any(self.characteristics)


@dataclass(frozen=True)
class PropertyPriceInRange(EntityFilter[Property]):
    price_range: PriceRange

    def __post_init__(self) -> None:
        require_present(type(self).__name__, price_range=self.price_range)

    def test(self, entity: Property) -> bool:
        return self.price_range.contains(entity.price)


@dataclass(frozen=True)
class PropertySellerContains(EntityFilter[Property]):
    """Tests that the seller's name contains a fragment, ignoring case."""

    fragment: str

    def __post_init__(self) -> None:
        require_present(type(self).__name__, fragment=self.fragment)
        if not isinstance(self.fragment, str) or not self.fragment.strip():
            raise InvalidFieldError(f"{type(self).__name__} needs a non-blank text fragment")
        object.__setattr__(self, "fragment", self.fragment.strip())

    def test(self, entity: Property) -> bool:
        return self.fragment.casefold() in entity.seller.casefold()


@dataclass(frozen=True)
class PropertyNameContainsKeywords(EntityFilter[Property]):
    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "keywords", normalize_keywords(type(self).__name__, self.keywords)
        )

    def test(self, entity: Property) -> bool:
        name = str(entity.name)
        return any(contains_word_ignore_case(name, keyword) for keyword in self.keywords)
