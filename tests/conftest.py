"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from property_book.models import (
    Address,
    Buyer,
    Characteristics,
    Description,
    Email,
    Name,
    Phone,
    Price,
    PriceRange,
    Priority,
    Property,
    PropertyName,
    Tag,
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_property() -> Property:
    """Create a sample property with characteristics."""
    return Property(
        name=PropertyName("Sunrise Villa"),
        price=Price(Decimal("500000")),
        address=Address("12 Kent Ridge Road"),
        description=Description("Bright corner unit"),
        tags=frozenset({Tag("new")}),
        seller="Alice Tan",
        characteristics=Characteristics(["pool", "garage"]),
    )


@pytest.fixture
def plain_property() -> Property:
    """Create a sample property without characteristics."""
    return Property(
        name=PropertyName("Harbour Loft"),
        price=Price(Decimal("320000")),
        address=Address("8 Marina Way"),
        description=Description("Compact loft by the sea"),
        tags=frozenset(),
        seller="Bob Lim",
    )


@pytest.fixture
def sample_buyer() -> Buyer:
    """Create a sample buyer with a budget and desired characteristics."""
    return Buyer(
        name=Name("Carol Ng"),
        phone=Phone("91234567"),
        email=Email("carol@example.com"),
        tags=frozenset({Tag("vip")}),
        price_range=PriceRange(Price(400000), Price(600000)),
        desired_characteristics=Characteristics(["pool"]),
        priority=Priority.HIGH,
    )


@pytest.fixture
def plain_buyer() -> Buyer:
    """Create a buyer with only the required fields."""
    return Buyer(
        name=Name("Dan Koh"),
        phone=Phone("98765432"),
        email=Email("dan@example.com"),
    )
