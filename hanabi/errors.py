"""Error taxonomy and result helpers for Hanabi card parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

__all__ = [
    "ErrorKind",
    "CardError",
    "InvalidCardError",
    "CardParseError",
    "ColorRegistryError",
    "ParseResult",
    "attempt",
]

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Distinct reasons a card, colour or rank can be rejected."""

    ABBREVIATION_EXPECTED = "abbreviation_expected"
    ABBREVIATION_TOO_SHORT = "abbreviation_too_short"
    ABBREVIATION_TOO_LONG = "abbreviation_too_long"
    COLOR_LETTER_EXPECTED = "color_letter_expected"
    UNKNOWN_COLOR_LETTER = "unknown_color_letter"
    COLOR_NAME_EXPECTED = "color_name_expected"
    UNKNOWN_COLOR_NAME = "unknown_color_name"
    INVALID_COLOR = "invalid_color"
    RANK_EXPECTED = "rank_expected"
    RANK_NOT_INTEGER = "rank_not_integer"
    RANK_OUT_OF_RANGE = "rank_out_of_range"


class CardError(ValueError):
    """Raised when caller supplied input does not describe a valid card."""

    def __init__(self, kind: ErrorKind, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value

    @property
    def message(self) -> str:
        return str(self)


class InvalidCardError(CardError):
    """Raised when a card is constructed from an invalid colour or rank."""


class CardParseError(CardError):
    """Raised when card, colour or rank text cannot be parsed."""


class ColorRegistryError(RuntimeError):
    """Raised when the colour enumeration cannot be keyed by first letter."""


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the :class:`CardError` explaining the failure."""

    value: T | None = None
    error: CardError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise TypeError("ParseResult holds exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the parsed value, re-raising the stored error on failure."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[..., T], *args: Any) -> ParseResult[T]:
    """Call ``func`` and capture input validation failures as a result.

    Only :class:`CardError` is captured; a :class:`ColorRegistryError`
    propagates because it signals a malformed colour set, not bad input.
    """

    try:
        return ParseResult(value=func(*args))
    except CardError as exc:
        return ParseResult(error=exc)
