"""Persistence for the property book."""

from property_book.storage.json_file import JsonBookStorage

__all__ = ["JsonBookStorage"]
