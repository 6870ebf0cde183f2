"""Characteristics: a set of named traits with containment checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from property_book.exceptions import InvalidFieldError
from property_book.models.base import require_present

SEPARATOR = ";"


@dataclass(frozen=True, eq=False)
class Characteristics:
    """Collection of traits such as ``pool`` or ``near MRT``.

    Traits keep the spelling and order in which they were first given, but
    duplicates, equality and containment are all case-insensitive.

    Parameters
    ----------
    traits : Iterable[str]
        Trait strings. Each is trimmed; blank entries are dropped. At least
        one non-blank trait is required, and no trait may contain ``;``.
    """

    traits: tuple[str, ...]
    _keys: frozenset[str] = field(init=False, repr=False)

    def __init__(self, traits: Iterable[str]) -> None:
        require_present("Characteristics", traits=traits)
        if isinstance(traits, str):
            traits = [traits]

        kept: list[str] = []
        seen: set[str] = set()
        for trait in traits:
            if not isinstance(trait, str):
                raise InvalidFieldError(f"Invalid characteristic {trait!r}: must be text")
            if SEPARATOR in trait:
                raise InvalidFieldError(
                    f"Invalid characteristic {trait!r}: must not contain {SEPARATOR!r}"
                )
            trait = trait.strip()
            key = trait.casefold()
            if trait and key not in seen:
                seen.add(key)
                kept.append(trait)

        if not kept:
            raise InvalidFieldError("Characteristics must contain at least one non-blank trait")

        object.__setattr__(self, "traits", tuple(kept))
        object.__setattr__(self, "_keys", frozenset(seen))

    @classmethod
    def parse(cls, text: str) -> Characteristics:
        """Build from a ``;``-separated string, e.g. ``"pool; garage"``."""
        require_present("Characteristics", text=text)
        return cls(text.split(SEPARATOR))

    def contains(self, trait: str) -> bool:
        """Return True if ``trait`` is one of these traits, ignoring case."""
        return trait.strip().casefold() in self._keys

    def contains_all(self, other: Characteristics) -> bool:
        """Return True if every trait of ``other`` is present here."""
        return other._keys <= self._keys

    def contains_any(self, other: Characteristics) -> bool:
        """Return True if at least one trait of ``other`` is present here."""
        return not self._keys.isdisjoint(other._keys)

    def __len__(self) -> int:
        return len(self.traits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Characteristics):
            return NotImplemented
        return self._keys == other._keys

    def __hash__(self) -> int:
        return hash(self._keys)

    def __str__(self) -> str:
        return f"{SEPARATOR} ".join(self.traits)
