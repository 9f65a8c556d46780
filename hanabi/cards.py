"""Card value type and text parsing helpers for Hanabi."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterable, Iterator, List

from .colors import Color, parse_color_letter
from .errors import CardParseError, ErrorKind, InvalidCardError, ParseResult, attempt

__all__ = [
    "RANK_LIMIT",
    "MAX_ABBREVIATION_LENGTH",
    "Card",
    "parse_rank",
    "iter_all_cards",
    "sort_cards",
    "format_cards",
    "parse_cards",
]

RANK_LIMIT: Final[int] = 5
MAX_ABBREVIATION_LENGTH: Final[int] = len(str(RANK_LIMIT)) + 1

_COLOR_ORDER: Final[dict[Color, int]] = {color: idx for idx, color in enumerate(Color)}
# Minus is recognised so that negative ranks report as out of range.
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


def _rank_in_range(rank: int) -> bool:
    return 1 <= rank <= RANK_LIMIT


def parse_rank(text: str | None) -> int:
    """Parse the rank portion of an abbreviation into a validated integer."""

    if not text:
        raise CardParseError(ErrorKind.RANK_EXPECTED, "Rank string expected", text)
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise CardParseError(ErrorKind.RANK_NOT_INTEGER, f"Card rank must be an integer: {text}", text)
    # Too many significant digits to be in range; int() may refuse very long strings.
    if len(text.lstrip("-").lstrip("0")) > len(str(RANK_LIMIT)):
        raise CardParseError(
            ErrorKind.RANK_OUT_OF_RANGE,
            f"Card rank out of range: {text} (expected 1-{RANK_LIMIT})",
            text,
        )
    rank = int(text)
    if not _rank_in_range(rank):
        raise CardParseError(
            ErrorKind.RANK_OUT_OF_RANGE,
            f"Card rank out of range: {rank} (expected 1-{RANK_LIMIT})",
            rank,
        )
    return rank


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable Hanabi card made of one colour and one rank."""

    color: Color
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise InvalidCardError(ErrorKind.INVALID_COLOR, f"Unknown card color: {self.color!r}", self.color)
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise InvalidCardError(
                ErrorKind.RANK_NOT_INTEGER,
                f"Card rank must be an integer: {self.rank!r}",
                self.rank,
            )
        if not _rank_in_range(self.rank):
            raise InvalidCardError(
                ErrorKind.RANK_OUT_OF_RANGE,
                f"Card rank out of range: {self.rank} (expected 1-{RANK_LIMIT})",
                self.rank,
            )

    @classmethod
    def from_abbreviation(cls, abbreviation: str | None) -> "Card":
        """Create a card from an abbreviation such as ``"G1"``, ``"B5"`` or ``"W2"``.

        The first character is the colour letter and the remainder is the
        rank. The colour is parsed before the rank, so ``"Z9"`` reports the
        unknown colour letter.
        """

        if not abbreviation:
            raise CardParseError(ErrorKind.ABBREVIATION_EXPECTED, "Card abbreviation expected", abbreviation)
        if len(abbreviation) < 2:
            raise CardParseError(
                ErrorKind.ABBREVIATION_TOO_SHORT,
                f"Card abbreviation must be at least 2 symbols long: {abbreviation}",
                abbreviation,
            )
        if len(abbreviation) > MAX_ABBREVIATION_LENGTH:
            raise CardParseError(
                ErrorKind.ABBREVIATION_TOO_LONG,
                f"Card abbreviation cannot be more than {MAX_ABBREVIATION_LENGTH} symbols long: "
                f"{abbreviation} has {len(abbreviation)}",
                abbreviation,
            )
        color = parse_color_letter(abbreviation[0])
        rank = parse_rank(abbreviation[1:])
        return cls(color=color, rank=rank)

    @classmethod
    def try_from_abbreviation(cls, abbreviation: str | None) -> ParseResult["Card"]:
        """Like :meth:`from_abbreviation` but return a :class:`ParseResult`."""

        return attempt(cls.from_abbreviation, abbreviation)

    @property
    def abbreviation(self) -> str:
        return f"{self.color.letter}{self.rank}"

    @property
    def display_name(self) -> str:
        """Return the colour name and rank separated by a space, e.g. ``"Blue 5"``."""

        return f"{self.color.value} {self.rank}"

    @property
    def sort_key(self) -> tuple[int, int]:
        """Return ``(colour enumeration index, rank)`` for deterministic ordering."""

        return _COLOR_ORDER[self.color], self.rank

    def __str__(self) -> str:
        return self.display_name


def iter_all_cards() -> Iterator[Card]:
    """Yield every distinct card, colour by colour in ascending rank."""

    for color in Color:
        for rank in range(1, RANK_LIMIT + 1):
            yield Card(color=color, rank=rank)


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    return sorted(cards, key=lambda card: card.sort_key)


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.abbreviation for card in cards)


def parse_cards(text: str) -> List[Card]:
    """Parse whitespace separated abbreviations, e.g. ``"R1 G2 B5"``."""

    return [Card.from_abbreviation(token) for token in text.split()]
