"""Validated value types shared across entities."""

import re
from dataclasses import dataclass
from typing import Any

from property_book.exceptions import InvalidFieldError, MissingFieldError

_NAME_PATTERN = re.compile(r"[^\W_][\w .'-]*")
_PHONE_PATTERN = re.compile(r"\d{3,}")
_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9]([A-Za-z0-9._%+-]*[A-Za-z0-9])?"
    r"@[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?(\.[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?)*"
)


def require_present(owner: str, **fields: Any) -> None:
    """Raise ``MissingFieldError`` naming the first field that is ``None``.

    Parameters
    ----------
    owner : str
        Name of the type being constructed, used in the error message.
    **fields : Any
        Field name to value mapping, checked in order.
    """
    for name, value in fields.items():
        if value is None:
            raise MissingFieldError(f"{owner}.{name} is required")


def _require_match(owner: str, pattern: re.Pattern[str], value: Any, hint: str) -> None:
    require_present(owner, value=value)
    if not isinstance(value, str) or not pattern.fullmatch(value):
        raise InvalidFieldError(f"Invalid {owner} {value!r}: {hint}")


def validate_name(owner: str, value: Any) -> None:
    """Check ``value`` against the naming rules shared by people and listings."""
    _require_match(
        owner,
        _NAME_PATTERN,
        value,
        "must start with a letter or digit and contain only letters, digits, spaces, . ' -",
    )


@dataclass(frozen=True)
class Name:
    """Person name: letters, digits, spaces and ``.'-``; must not be blank."""

    value: str

    def __post_init__(self) -> None:
        validate_name("Name", self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Phone number of at least three digits."""

    value: str

    def __post_init__(self) -> None:
        _require_match("Phone", _PHONE_PATTERN, self.value, "must be at least 3 digits")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """Email address of the form ``local-part@domain``."""

    value: str

    def __post_init__(self) -> None:
        _require_match("Email", _EMAIL_PATTERN, self.value, "must be of the form local-part@domain")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """Free-form street address.

    Surrounding whitespace is stripped; the remaining text must not be empty.
    """

    value: str

    def __post_init__(self) -> None:
        require_present("Address", value=self.value)
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidFieldError(f"Invalid Address {self.value!r}: must not be blank")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Tag:
    """Single-word alphanumeric label."""

    value: str

    def __post_init__(self) -> None:
        require_present("Tag", value=self.value)
        if not isinstance(self.value, str) or not self.value.isalnum():
            raise InvalidFieldError(f"Invalid Tag {self.value!r}: must be alphanumeric")

    def __str__(self) -> str:
        return f"[{self.value}]"
