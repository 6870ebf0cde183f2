"""Conversion between book entries and JSON-ready dictionaries."""

from decimal import Decimal
from enum import Enum
from typing import Any

from property_book.models.base import Address, Email, Name, Phone, Tag
from property_book.models.buyer import Buyer, PriceRange
from property_book.models.characteristics import Characteristics
from property_book.models.enums import Priority
from property_book.models.property import Description, Price, Property, PropertyName
from property_book.store.book import PropertyBook


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    return value


def _tags_to_list(tags: frozenset[Tag]) -> list[str]:
    return [tag.value for tag in sorted(tags)]


def _characteristics_to_str(characteristics: Characteristics | None) -> str | None:
    return None if characteristics is None else str(characteristics)


def _characteristics_from_str(text: str | None) -> Characteristics | None:
    return None if text is None else Characteristics.parse(text)


def property_to_dict(prop: Property) -> dict[str, Any]:
    """Convert a property to a JSON-ready dict."""
    return {
        "name": prop.name.value,
        "price": serialize_value(prop.price.value),
        "address": prop.address.value,
        "description": prop.description.value,
        "seller": prop.seller,
        "tags": _tags_to_list(prop.tags),
        "characteristics": _characteristics_to_str(prop.characteristics),
    }


def property_from_dict(data: dict[str, Any]) -> Property:
    """Build a property from a dict produced by ``property_to_dict``.

    Raises
    ------
    KeyError
        If a required key is missing.
    InvalidFieldError
        If a field value fails validation.
    """
    return Property(
        name=PropertyName(data["name"]),
        price=Price(data["price"]),
        address=Address(data["address"]),
        description=Description(data["description"]),
        tags=frozenset(Tag(t) for t in data.get("tags", [])),
        seller=data["seller"],
        characteristics=_characteristics_from_str(data.get("characteristics")),
    )


def buyer_to_dict(buyer: Buyer) -> dict[str, Any]:
    """Convert a buyer to a JSON-ready dict."""
    price_range = None
    if buyer.price_range is not None:
        price_range = {
            "low": serialize_value(buyer.price_range.low.value),
            "high": serialize_value(buyer.price_range.high.value),
        }
    return {
        "name": buyer.name.value,
        "phone": buyer.phone.value,
        "email": buyer.email.value,
        "tags": _tags_to_list(buyer.tags),
        "price_range": price_range,
        "desired_characteristics": _characteristics_to_str(buyer.desired_characteristics),
        "priority": serialize_value(buyer.priority),
    }


def buyer_from_dict(data: dict[str, Any]) -> Buyer:
    """Build a buyer from a dict produced by ``buyer_to_dict``."""
    price_range = data.get("price_range")
    return Buyer(
        name=Name(data["name"]),
        phone=Phone(data["phone"]),
        email=Email(data["email"]),
        tags=frozenset(Tag(t) for t in data.get("tags", [])),
        price_range=(
            None
            if price_range is None
            else PriceRange(Price(price_range["low"]), Price(price_range["high"]))
        ),
        desired_characteristics=_characteristics_from_str(data.get("desired_characteristics")),
        priority=data.get("priority", Priority.NORMAL),
    )


def book_to_dict(book: PropertyBook) -> dict[str, Any]:
    """Convert a whole book to a JSON-ready dict."""
    return {
        "properties": [property_to_dict(p) for p in book.properties],
        "buyers": [buyer_to_dict(b) for b in book.buyers],
    }


def book_from_dict(data: dict[str, Any]) -> PropertyBook:
    """Build a book from a dict produced by ``book_to_dict``.

    Duplicate entries raise ``DuplicateEntityError``.
    """
    book = PropertyBook()
    for item in data.get("properties", []):
        book.add_property(property_from_dict(item))
    for item in data.get("buyers", []):
        book.add_buyer(buyer_from_dict(item))
    return book
