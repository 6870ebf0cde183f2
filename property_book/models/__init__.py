"""Domain models for the property book."""

from property_book.models.base import Address, Email, Name, Phone, Tag
from property_book.models.buyer import Buyer, PriceRange
from property_book.models.characteristics import Characteristics
from property_book.models.enums import Priority
from property_book.models.property import Description, Price, Property, PropertyName

__all__ = [
    "Address",
    "Buyer",
    "Characteristics",
    "Description",
    "Email",
    "Name",
    "Phone",
    "Price",
    "PriceRange",
    "Priority",
    "Property",
    "PropertyName",
    "Tag",
]
