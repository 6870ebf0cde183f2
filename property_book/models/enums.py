"""Enumeration types for property-book entities."""

from enum import Enum


class Priority(str, Enum):
    HIGH = "HIGH"
    NORMAL = "NORMAL"
    LOW = "LOW"
