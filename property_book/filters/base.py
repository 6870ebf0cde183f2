"""Base predicate types for filtering book entries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

from property_book.exceptions import InvalidFieldError
from property_book.models.base import require_present

T = TypeVar("T")


class EntityFilter(ABC, Generic[T]):
    """Predicate over a single book entry.

    Subclasses are frozen dataclasses, so two filters compare equal when
    they are of the same type and wrap equal state. Calling a filter is the
    same as calling ``test``.
    """

    @abstractmethod
    def test(self, entity: T) -> bool:
        """Return True if ``entity`` satisfies this filter."""

    def __call__(self, entity: T) -> bool:
        return self.test(entity)


@dataclass(frozen=True)
class AllOf(EntityFilter[T]):
    """Matches when every wrapped filter matches."""

    filters: tuple[EntityFilter[T], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", _as_filter_tuple("AllOf", self.filters))

    def test(self, entity: T) -> bool:
        return all(f.test(entity) for f in self.filters)


@dataclass(frozen=True)
class AnyOf(EntityFilter[T]):
    """Matches when at least one wrapped filter matches."""

    filters: tuple[EntityFilter[T], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", _as_filter_tuple("AnyOf", self.filters))

    def test(self, entity: T) -> bool:
        return any(f.test(entity) for f in self.filters)


def _as_filter_tuple(owner: str, filters: Iterable[EntityFilter[T]]) -> tuple[EntityFilter[T], ...]:
    require_present(owner, filters=filters)
    result = tuple(filters)
    if not result:
        raise InvalidFieldError(f"{owner} needs at least one filter")
    return result


def normalize_keywords(owner: str, keywords: Iterable[str]) -> tuple[str, ...]:
    """Return the non-blank keywords, trimmed; at least one is required."""
    require_present(owner, keywords=keywords)
    keywords = keywords.split() if isinstance(keywords, str) else tuple(keywords)
    for keyword in keywords:
        if not isinstance(keyword, str):
            raise InvalidFieldError(f"Invalid {owner} keyword {keyword!r}: must be text")
    result = tuple(k.strip() for k in keywords if k.strip())
    if not result:
        raise InvalidFieldError(f"{owner} needs at least one keyword")
    return result


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Return True if ``word`` equals one of the whitespace-separated words of ``sentence``."""
    target = word.casefold()
    return any(part.casefold() == target for part in sentence.split())
