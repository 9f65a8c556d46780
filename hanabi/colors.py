"""Card colours and the first-letter registry used to parse them."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Iterable, Mapping

from .errors import CardParseError, ColorRegistryError, ErrorKind

__all__ = [
    "Color",
    "ColorRegistry",
    "NUMBER_OF_COLORS",
    "build_registry",
    "color_registry",
    "parse_color_letter",
    "parse_color_name",
    "parse_color",
]

logger = logging.getLogger(__name__)


class Color(str, Enum):
    """All card colours, in deck order.

    More colours can be added provided every canonical name starts with a
    different letter. Aliases (``CRIMSON = "Red"``) are never keyed.
    """

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    WHITE = "White"
    YELLOW = "Yellow"

    @property
    def letter(self) -> str:
        """Return the abbreviation letter of the colour."""

        return color_registry().letter_of[self]

    def __str__(self) -> str:
        return self.value


def _canonical_name(color: Enum) -> str:
    value = color.value
    return value if isinstance(value, str) else color.name


@dataclass(frozen=True, slots=True)
class ColorRegistry:
    """Read-only lookup tables between colours, first letters and names."""

    by_letter: Mapping[str, Enum]
    by_name: Mapping[str, Enum]
    letter_of: Mapping[Enum, str]

    def __len__(self) -> int:
        return len(self.by_letter)

    def letters(self) -> tuple[str, ...]:
        """Return the registered letters in enumeration order."""

        return tuple(self.by_letter)


def build_registry(colors: Iterable[Enum]) -> ColorRegistry:
    """Build a registry keyed by the upper-cased first letter of each colour.

    Raises:
        ColorRegistryError: two distinct colours share a first letter or a
            canonical name is empty.
    """

    by_letter: dict[str, Enum] = {}
    by_name: dict[str, Enum] = {}
    for color in dict.fromkeys(colors):
        name = _canonical_name(color)
        if not name:
            raise ColorRegistryError(f"color {color!r} has an empty name")
        letter = name[0].upper()
        clash = by_letter.get(letter)
        if clash is not None:
            logger.error("Colors %s and %s share the first letter %r", clash, color, letter)
            raise ColorRegistryError(
                f"two colors cannot start with the same letter: "
                f"{_canonical_name(clash)} and {name} both start with {letter!r}"
            )
        by_letter[letter] = color
        by_name[name] = color
    logger.debug("Built color registry for letters %s", "".join(by_letter))
    return ColorRegistry(
        by_letter=MappingProxyType(by_letter),
        by_name=MappingProxyType(by_name),
        letter_of=MappingProxyType({color: letter for letter, color in by_letter.items()}),
    )


_registry: ColorRegistry | None = None
_registry_error: ColorRegistryError | None = None
_registry_lock = threading.Lock()


def color_registry() -> ColorRegistry:
    """Return the process-wide registry for :class:`Color`, building it once.

    A failed build is remembered and re-raised on every later call; the
    registry is never rebuilt.
    """

    global _registry, _registry_error
    registry = _registry
    if registry is None:
        with _registry_lock:
            if _registry is None and _registry_error is None:
                try:
                    _registry = build_registry(Color)
                except ColorRegistryError as exc:
                    _registry_error = exc
            if _registry_error is not None:
                raise _registry_error
            registry = _registry
    return registry  # type: ignore[return-value]


def parse_color_letter(letter: str | None) -> Color:
    """Parse the first letter of a colour name, e.g. ``'R'`` or ``'Y'``.

    Lookup is case-sensitive: only the upper-case letter is registered.
    """

    if not letter:
        raise CardParseError(ErrorKind.COLOR_LETTER_EXPECTED, "Color letter expected", letter)
    color = color_registry().by_letter.get(letter)
    if color is None:
        raise CardParseError(
            ErrorKind.UNKNOWN_COLOR_LETTER,
            f"Unknown card color abbreviation: {letter}",
            letter,
        )
    return color  # type: ignore[return-value]


def parse_color_name(name: str | None) -> Color:
    """Parse a full canonical colour name such as ``"Red"`` (case-sensitive)."""

    if not name:
        raise CardParseError(ErrorKind.COLOR_NAME_EXPECTED, "Color name expected", name)
    color = color_registry().by_name.get(name)
    if color is None:
        raise CardParseError(ErrorKind.UNKNOWN_COLOR_NAME, f"Unknown color name: {name}", name)
    return color  # type: ignore[return-value]


def parse_color(text: str | None) -> Color:
    """Parse either a single colour letter or a full colour name."""

    if text is not None and len(text) == 1:
        return parse_color_letter(text)
    return parse_color_name(text)


# Built eagerly so a malformed colour set fails at import.
NUMBER_OF_COLORS: Final[int] = len(color_registry())
