"""Typer entry-point wiring for the Hanabi card CLI."""

from __future__ import annotations

import logging
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..cards import Card, format_cards, iter_all_cards
from ..errors import ParseResult
from .render import colors_table, deck_table, parse_table

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich, at DEBUG when ``verbose`` is set."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def cli(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Parse and inspect Hanabi card abbreviations."""

    configure_logging(verbose)


@app.command()
def parse(
    abbreviations: List[str] = typer.Argument(..., help="Card abbreviations such as R1 or G5."),
) -> None:
    """Parse each abbreviation and report the card or the reason it was rejected."""

    results: list[tuple[str, ParseResult[Card]]] = []
    for text in abbreviations:
        result = Card.try_from_abbreviation(text)
        if not result.ok:
            logger.debug("Rejected %r: %s", text, result.error)
        results.append((text, result))

    console.print(parse_table(results))
    if not all(result.ok for _, result in results):
        raise typer.Exit(code=1)


@app.command()
def colors() -> None:
    """List every colour and the letter used to abbreviate it."""

    console.print(colors_table())


@app.command()
def deck(
    plain: bool = typer.Option(False, "--plain", help="Print abbreviations without colour styling."),
) -> None:
    """Show every distinct card."""

    cards = list(iter_all_cards())
    if plain:
        console.print(format_cards(cards), highlight=False)
        return
    console.print(deck_table(cards))


def main() -> None:
    """Entry-point for the ``hanabi-card`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
