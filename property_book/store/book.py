"""In-memory property book with duplicate detection and buyer matching."""

from dataclasses import dataclass, field
from typing import Callable, TypeVar

from property_book.exceptions import DuplicateEntityError, EntityNotFoundError
from property_book.filters.base import AllOf, EntityFilter
from property_book.filters.buyer import BuyerCanAfford
from property_book.filters.property import PropertyHasAllCharacteristics, PropertyPriceInRange
from property_book.logging import get_logger
from property_book.models.buyer import Buyer
from property_book.models.property import Property

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class PropertyBook:
    """In-memory store for properties and buyers.

    Entries are kept in insertion order. Identity (``is_same_property`` /
    ``is_same_buyer``) is unique within each list.
    """

    properties: list[Property] = field(default_factory=list)
    buyers: list[Buyer] = field(default_factory=list)

    # Properties
    def has_property(self, prop: Property) -> bool:
        """Return True if a property with the same identity is in the book."""
        return any(p.is_same_property(prop) for p in self.properties)

    def add_property(self, prop: Property) -> None:
        """Add a property to the book."""
        if self.has_property(prop):
            raise DuplicateEntityError(f"Property {prop.name} at {prop.price} already exists")
        self.properties.append(prop)
        logger.debug("Added property %s", prop.name)

    def remove_property(self, prop: Property) -> None:
        """Remove a property equal to ``prop``."""
        _remove(self.properties, prop, "Property")
        logger.debug("Removed property %s", prop.name)

    def set_property(self, target: Property, edited: Property) -> None:
        """Replace ``target`` with ``edited``, keeping its position."""
        _replace(self.properties, target, edited, Property.is_same_property, "Property")
        logger.debug("Updated property %s", edited.name)

    def filter_properties(self, predicate: EntityFilter[Property]) -> list[Property]:
        """Return the properties matching ``predicate``."""
        return [p for p in self.properties if predicate.test(p)]

    # Buyers
    def has_buyer(self, buyer: Buyer) -> bool:
        """Return True if a buyer with the same identity is in the book."""
        return any(b.is_same_buyer(buyer) for b in self.buyers)

    def add_buyer(self, buyer: Buyer) -> None:
        """Add a buyer to the book."""
        if self.has_buyer(buyer):
            raise DuplicateEntityError(f"Buyer {buyer.name} already exists")
        self.buyers.append(buyer)
        logger.debug("Added buyer %s", buyer.name)

    def remove_buyer(self, buyer: Buyer) -> None:
        """Remove a buyer equal to ``buyer``."""
        _remove(self.buyers, buyer, "Buyer")
        logger.debug("Removed buyer %s", buyer.name)

    def set_buyer(self, target: Buyer, edited: Buyer) -> None:
        """Replace ``target`` with ``edited``, keeping its position."""
        _replace(self.buyers, target, edited, Buyer.is_same_buyer, "Buyer")
        logger.debug("Updated buyer %s", edited.name)

    def filter_buyers(self, predicate: EntityFilter[Buyer]) -> list[Buyer]:
        """Return the buyers matching ``predicate``."""
        return [b for b in self.buyers if predicate.test(b)]

    # Matching
    def match_properties(self, buyer: Buyer) -> list[Property]:
        """Return properties within the buyer's budget that have every desired characteristic.

        Criteria the buyer has not specified are not applied.
        """
        filters: list[EntityFilter[Property]] = []
        if buyer.price_range is not None:
            filters.append(PropertyPriceInRange(buyer.price_range))
        if buyer.desired_characteristics is not None:
            filters.append(PropertyHasAllCharacteristics(buyer.desired_characteristics))
        if not filters:
            return list(self.properties)
        return self.filter_properties(AllOf(tuple(filters)))

    def match_buyers(self, prop: Property) -> list[Buyer]:
        """Return buyers for whom ``match_properties`` would include ``prop``."""
        return [b for b in self.buyers if _buyer_accepts(b, prop)]

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "buyers": len(self.buyers),
        }


def _buyer_accepts(buyer: Buyer, prop: Property) -> bool:
    if buyer.price_range is not None and not BuyerCanAfford(prop.price).test(buyer):
        return False
    if buyer.desired_characteristics is None:
        return True
    if prop.characteristics is None:
        return False
    # Buyer wants a subset of what the property offers
    return prop.characteristics.contains_all(buyer.desired_characteristics)


def _remove(entries: list[T], entry: T, kind: str) -> None:
    try:
        entries.remove(entry)
    except ValueError as exc:
        raise EntityNotFoundError(f"{kind} {entry} not found") from exc


def _replace(
    entries: list[T],
    target: T,
    edited: T,
    same_identity: Callable[[T, T], bool],
    kind: str,
) -> None:
    try:
        index = entries.index(target)
    except ValueError as exc:
        raise EntityNotFoundError(f"{kind} {target} not found") from exc

    if not same_identity(target, edited) and any(same_identity(e, edited) for e in entries):
        raise DuplicateEntityError(f"{kind} {edited} already exists")

    entries[index] = edited
