"""Sample data generators."""

from property_book.generators.buyer import BuyerGenerator
from property_book.generators.property import PropertyGenerator

__all__ = ["BuyerGenerator", "PropertyGenerator"]
