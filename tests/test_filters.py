"""Tests for buyer and property filters."""

import dataclasses

import pytest

from property_book.exceptions import InvalidFieldError, MissingFieldError
from property_book.filters import (
    AllOf,
    AnyOf,
    BuyerCanAfford,
    BuyerHasAllCharacteristics,
    BuyerHasAnyCharacteristic,
    BuyerHasPriority,
    BuyerNameContainsKeywords,
    PropertyHasAllCharacteristics,
    PropertyHasAnyCharacteristic,
    PropertyNameContainsKeywords,
    PropertyPriceInRange,
    PropertySellerContains,
)
from property_book.models import Buyer, Characteristics, Price, PriceRange, Priority, Property


def _with_desires(buyer: Buyer, *traits: str) -> Buyer:
    desired = Characteristics(traits) if traits else None
    return dataclasses.replace(buyer, desired_characteristics=desired)


class TestBuyerHasAllCharacteristics:
    """Tests for the 'contains all characteristics' buyer predicate."""

    def test_superset_matches(self, sample_buyer: Buyer) -> None:
        predicate = BuyerHasAllCharacteristics(Characteristics(["pool"]))

        assert predicate.test(_with_desires(sample_buyer, "pool", "garage"))

    def test_exact_match(self, sample_buyer: Buyer) -> None:
        predicate = BuyerHasAllCharacteristics(Characteristics(["pool", "garage"]))

        assert predicate.test(_with_desires(sample_buyer, "garage", "pool"))

    def test_missing_trait_does_not_match(self, sample_buyer: Buyer) -> None:
        predicate = BuyerHasAllCharacteristics(Characteristics(["pool"]))

        assert not predicate.test(_with_desires(sample_buyer, "garage"))

    def test_proper_subset_does_not_match(self, sample_buyer: Buyer) -> None:
        predicate = BuyerHasAllCharacteristics(Characteristics(["pool", "garage"]))

        assert not predicate.test(_with_desires(sample_buyer, "pool"))

    @pytest.mark.parametrize("target", [["pool"], ["pool", "garage", "gym"], ["anything"]])
    def test_absent_characteristics_never_match(self, plain_buyer: Buyer, target: list) -> None:
        predicate = BuyerHasAllCharacteristics(Characteristics(target))

        assert not predicate.test(plain_buyer)

    def test_callable(self, sample_buyer: Buyer) -> None:
        predicate = BuyerHasAllCharacteristics(Characteristics(["pool"]))

        assert predicate(sample_buyer) is True

    def test_none_target_rejected(self) -> None:
        with pytest.raises(MissingFieldError):
            BuyerHasAllCharacteristics(None)  # type: ignore[arg-type]

    def test_equality(self) -> None:
        a = BuyerHasAllCharacteristics(Characteristics(["pool", "garage"]))
        b = BuyerHasAllCharacteristics(Characteristics(["garage", "pool"]))
        c = BuyerHasAllCharacteristics(Characteristics(["pool"]))

        assert a == b
        assert a == a
        assert a != c
        assert a != BuyerHasAnyCharacteristic(Characteristics(["pool", "garage"]))
        assert a is not None


class TestOtherBuyerFilters:
    def test_has_any_characteristic(self, sample_buyer: Buyer, plain_buyer: Buyer) -> None:
        predicate = BuyerHasAnyCharacteristic(Characteristics(["gym", "pool"]))

        assert predicate.test(sample_buyer)
        assert not predicate.test(_with_desires(sample_buyer, "garage"))
        assert not predicate.test(plain_buyer)

    def test_can_afford(self, sample_buyer: Buyer, plain_buyer: Buyer) -> None:
        assert BuyerCanAfford(Price(500000)).test(sample_buyer)
        assert not BuyerCanAfford(Price(700000)).test(sample_buyer)
        assert not BuyerCanAfford(Price(500000)).test(plain_buyer)

    def test_has_priority(self, sample_buyer: Buyer, plain_buyer: Buyer) -> None:
        predicate = BuyerHasPriority(Priority.HIGH)

        assert predicate.test(sample_buyer)
        assert not predicate.test(plain_buyer)

    def test_name_keywords_whole_word_ignore_case(self, sample_buyer: Buyer) -> None:
        assert BuyerNameContainsKeywords(("carol",)).test(sample_buyer)
        assert BuyerNameContainsKeywords(("bob", "NG")).test(sample_buyer)
        assert not BuyerNameContainsKeywords(("car",)).test(sample_buyer)

    def test_name_keywords_from_string(self, sample_buyer: Buyer) -> None:
        predicate = BuyerNameContainsKeywords("alice carol")  # type: ignore[arg-type]

        assert predicate.keywords == ("alice", "carol")
        assert predicate.test(sample_buyer)

    def test_name_keywords_required(self) -> None:
        with pytest.raises(InvalidFieldError):
            BuyerNameContainsKeywords(("", "  "))

    def test_name_keywords_must_be_text(self) -> None:
        with pytest.raises(InvalidFieldError, match="must be text"):
            BuyerNameContainsKeywords(("ok", 5))  # type: ignore[arg-type]


class TestPropertyFilters:
    def test_has_all_characteristics(self, sample_property: Property, plain_property: Property) -> None:
        predicate = PropertyHasAllCharacteristics(Characteristics(["POOL"]))

        assert predicate.test(sample_property)
        assert not predicate.test(plain_property)
        assert not PropertyHasAllCharacteristics(Characteristics(["pool", "gym"])).test(
            sample_property
        )

    def test_has_any_characteristic(self, sample_property: Property, plain_property: Property) -> None:
        predicate = PropertyHasAnyCharacteristic(Characteristics(["gym", "garage"]))

        assert predicate.test(sample_property)
        assert not predicate.test(plain_property)

    def test_price_in_range(self, sample_property: Property, plain_property: Property) -> None:
        predicate = PropertyPriceInRange(PriceRange(Price(400000), Price(500000)))

        assert predicate.test(sample_property)
        assert not predicate.test(plain_property)

    def test_seller_contains(self, sample_property: Property) -> None:
        assert PropertySellerContains("tan").test(sample_property)
        assert PropertySellerContains(" Alice ").test(sample_property)
        assert not PropertySellerContains("Bob").test(sample_property)

    def test_seller_fragment_required(self) -> None:
        with pytest.raises(InvalidFieldError):
            PropertySellerContains("  ")

    def test_seller_fragment_must_be_text(self) -> None:
        with pytest.raises(InvalidFieldError):
            PropertySellerContains(3)  # type: ignore[arg-type]

    def test_name_keywords(self, sample_property: Property) -> None:
        assert PropertyNameContainsKeywords(("villa",)).test(sample_property)
        assert not PropertyNameContainsKeywords(("loft",)).test(sample_property)


class TestComposites:
    def test_all_of(self, sample_property: Property) -> None:
        cheap = PropertyPriceInRange(PriceRange(Price(0), Price(100)))
        has_pool = PropertyHasAllCharacteristics(Characteristics(["pool"]))

        assert AllOf((has_pool,)).test(sample_property)
        assert not AllOf((has_pool, cheap)).test(sample_property)

    def test_any_of(self, sample_property: Property) -> None:
        cheap = PropertyPriceInRange(PriceRange(Price(0), Price(100)))
        has_pool = PropertyHasAllCharacteristics(Characteristics(["pool"]))

        assert AnyOf([cheap, has_pool]).test(sample_property)
        assert not AnyOf([cheap]).test(sample_property)

    def test_composite_needs_filters(self) -> None:
        with pytest.raises(InvalidFieldError):
            AllOf(())
        with pytest.raises(InvalidFieldError):
            AnyOf([])

    def test_composite_equality(self) -> None:
        has_pool = PropertyHasAllCharacteristics(Characteristics(["pool"]))

        assert AllOf([has_pool]) == AllOf((has_pool,))
        assert AllOf([has_pool]) != AnyOf([has_pool])
