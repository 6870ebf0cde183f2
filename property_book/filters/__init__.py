"""Attribute-based predicates for buyers and properties."""

from property_book.filters.base import AllOf, AnyOf, EntityFilter
from property_book.filters.buyer import (
    BuyerCanAfford,
    BuyerHasAllCharacteristics,
    BuyerHasAnyCharacteristic,
    BuyerHasPriority,
    BuyerNameContainsKeywords,
)
from property_book.filters.property import (
    PropertyHasAllCharacteristics,
    PropertyHasAnyCharacteristic,
    PropertyNameContainsKeywords,
    PropertyPriceInRange,
    PropertySellerContains,
)

__all__ = [
    "AllOf",
    "AnyOf",
    "BuyerCanAfford",
    "BuyerHasAllCharacteristics",
    "BuyerHasAnyCharacteristic",
    "BuyerHasPriority",
    "BuyerNameContainsKeywords",
    "EntityFilter",
    "PropertyHasAllCharacteristics",
    "PropertyHasAnyCharacteristic",
    "PropertyNameContainsKeywords",
    "PropertyPriceInRange",
    "PropertySellerContains",
]
