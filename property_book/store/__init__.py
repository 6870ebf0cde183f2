"""In-memory store for buyers and properties."""

from property_book.store.book import PropertyBook

__all__ = ["PropertyBook"]
