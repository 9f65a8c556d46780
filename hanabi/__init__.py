"""Top-level package for the Hanabi card model."""

from . import cards, colors, errors

__all__ = [
    "cards",
    "colors",
    "errors",
]
