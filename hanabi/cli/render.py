"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable

from rich.markup import escape
from rich.table import Table

from ..cards import Card
from ..colors import Color
from ..errors import ParseResult

_COLOR_STYLES = {
    Color.RED: "red",
    Color.GREEN: "green",
    Color.BLUE: "blue",
    Color.WHITE: "white",
    Color.YELLOW: "yellow",
}


def color_style(color: Color) -> str:
    return _COLOR_STYLES.get(color, "default")


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    style = color_style(card.color)
    return f"[{style}]{card.abbreviation}[/{style}]"


def parse_table(results: Iterable[tuple[str, ParseResult[Card]]]) -> Table:
    """Return a table describing the outcome of each parsed abbreviation."""

    table = Table(title="Parsed Cards")
    table.add_column("Input", justify="left")
    table.add_column("Card", justify="center")
    table.add_column("Name", justify="left")
    table.add_column("Error", justify="left")
    for text, result in results:
        if result.ok:
            card = result.unwrap()
            table.add_row(escape(text), format_card(card), card.display_name, "")
        else:
            error = result.error
            table.add_row(escape(text), "", "", f"[red]{error.kind.value}[/red]: {escape(str(error))}")
    return table


def colors_table() -> Table:
    table = Table(title="Colors")
    table.add_column("Letter", justify="center")
    table.add_column("Name", justify="left")
    for color in Color:
        style = color_style(color)
        table.add_row(f"[{style}]{color.letter}[/{style}]", color.value)
    return table


def deck_table(cards: Iterable[Card]) -> Table:
    """Return a grid with one row per colour and one column per rank."""

    table = Table.grid(padding=(0, 1))
    rows: dict[Color, list[str]] = {}
    for card in cards:
        rows.setdefault(card.color, []).append(format_card(card))
    for color, labels in rows.items():
        table.add_row(f"[bold]{color.value}[/bold]", *labels)
    return table
