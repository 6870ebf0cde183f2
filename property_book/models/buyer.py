"""Buyer model for prospective property buyers."""

from __future__ import annotations

from dataclasses import dataclass, field

from property_book.exceptions import InvalidFieldError
from property_book.models.base import Email, Name, Phone, Tag, require_present
from property_book.models.characteristics import Characteristics
from property_book.models.enums import Priority
from property_book.models.property import Price


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price range with ``low <= high``."""

    low: Price
    high: Price

    def __post_init__(self) -> None:
        require_present("PriceRange", low=self.low, high=self.high)
        if self.low > self.high:
            raise InvalidFieldError(
                f"Invalid PriceRange: lower bound {self.low} exceeds upper bound {self.high}"
            )

    @classmethod
    def parse(cls, text: str) -> PriceRange:
        """Build from ``"low - high"``, e.g. ``"100000 - 500000"``."""
        require_present("PriceRange", text=text)
        parts = text.split("-")
        if len(parts) != 2:
            raise InvalidFieldError(f"Invalid PriceRange {text!r}: expected 'low - high'")
        return cls(Price(parts[0]), Price(parts[1]))

    def contains(self, price: Price) -> bool:
        """Return True if ``price`` lies within the range, bounds included."""
        return self.low <= price <= self.high

    def __str__(self) -> str:
        return f"{self.low} - {self.high}"


@dataclass(frozen=True)
class Buyer:
    """Prospective buyer in the property book.

    ``price_range`` and ``desired_characteristics`` are optional; everything
    else is required.
    """

    name: Name
    phone: Phone
    email: Email
    tags: frozenset[Tag] = field(default_factory=frozenset)
    price_range: PriceRange | None = None
    desired_characteristics: Characteristics | None = None
    priority: Priority = Priority.NORMAL

    def __post_init__(self) -> None:
        require_present(
            "Buyer",
            name=self.name,
            phone=self.phone,
            email=self.email,
            tags=self.tags,
            priority=self.priority,
        )
        object.__setattr__(self, "tags", frozenset(self.tags))
        try:
            object.__setattr__(self, "priority", Priority(self.priority))
        except ValueError as exc:
            raise InvalidFieldError(f"Invalid Priority {self.priority!r}") from exc

    def is_same_buyer(self, other: Buyer | None) -> bool:
        """Return True if both buyers have the same name."""
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __str__(self) -> str:
        price_range = "Not Specified" if self.price_range is None else str(self.price_range)
        characteristics = (
            "Not Specified"
            if self.desired_characteristics is None
            else str(self.desired_characteristics)
        )
        text = (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}"
            f"; Budget: {price_range}; Desired Characteristics: {characteristics}"
            f"; Priority: {self.priority.value}"
        )
        if self.tags:
            text += "; Tags: " + "".join(str(tag) for tag in sorted(self.tags))
        return text
