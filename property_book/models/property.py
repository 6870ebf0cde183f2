"""Property model for real-estate listings."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from property_book.exceptions import InvalidFieldError
from property_book.models.base import Address, Tag, require_present, validate_name
from property_book.models.characteristics import Characteristics


@dataclass(frozen=True)
class PropertyName:
    """Listing name; follows the same rules as a person's ``Name``."""

    value: str

    def __post_init__(self) -> None:
        validate_name("PropertyName", self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Price:
    """Non-negative listing price.

    Accepts ``Decimal``, ``int`` or a numeric string; the value is always
    stored as a ``Decimal``.
    """

    value: Decimal

    def __post_init__(self) -> None:
        require_present("Price", value=self.value)
        if isinstance(self.value, (bool, float)):
            raise InvalidFieldError(f"Invalid Price {self.value!r}: use Decimal, int or str")
        try:
            amount = Decimal(str(self.value).strip())
        except InvalidOperation as exc:
            raise InvalidFieldError(f"Invalid Price {self.value!r}: not a number") from exc
        if not amount.is_finite() or amount < 0:
            raise InvalidFieldError(f"Invalid Price {self.value!r}: must be a non-negative amount")
        object.__setattr__(self, "value", amount)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Description:
    """Free-text description; must not be blank."""

    value: str

    def __post_init__(self) -> None:
        require_present("Description", value=self.value)
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidFieldError(f"Invalid Description {self.value!r}: must not be blank")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Property:
    """Real-estate listing in the property book.

    Every field except ``characteristics`` is required. Instances are
    immutable; ``tags`` is stored as a ``frozenset``.

    Two notions of equality are provided:

    - ``is_same_property``: identity by ``(name, price)``, used for
      duplicate detection.
    - ``has_same_details`` (and ``==``): every field except ``tags``.
    """

    name: PropertyName
    price: Price
    address: Address
    description: Description
    tags: frozenset[Tag]
    seller: str  # TODO: replace with a Seller entity once sellers are tracked
    characteristics: Characteristics | None = None

    def __post_init__(self) -> None:
        require_present(
            "Property",
            name=self.name,
            price=self.price,
            address=self.address,
            description=self.description,
            tags=self.tags,
            seller=self.seller,
        )
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_property(self, other: Property | None) -> bool:
        """Return True if both properties have the same name and price.

        This is a weaker notion of equality than ``has_same_details``.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name and other.price == self.price

    def has_same_details(self, other: Any) -> bool:
        """Return True if both properties have the same identity and data fields.

        Tags are not compared.
        """
        if other is self:
            return True
        if not isinstance(other, Property):
            return False
        return self._detail_key() == other._detail_key()

    def _detail_key(self) -> tuple:
        return (
            self.name,
            self.price,
            self.address,
            self.description,
            self.seller,
            self.characteristics,
        )

    def __eq__(self, other: object) -> bool:
        return self.has_same_details(other)

    def __hash__(self) -> int:
        return hash(self._detail_key())

    def __str__(self) -> str:
        characteristics = (
            "Not Specified" if self.characteristics is None else str(self.characteristics)
        )
        text = (
            f"{self.name}; Address: {self.address}; Price: {self.price}"
            f"; Description: {self.description}; Seller: {self.seller}"
            f"; Characteristics: {characteristics}"
        )
        if self.tags:
            text += "; Tags: " + "".join(str(tag) for tag in sorted(self.tags))
        return text
