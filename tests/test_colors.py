"""Tests covering the colour registry and colour parsing."""

from __future__ import annotations

import threading
from enum import Enum

import pytest

from hanabi import colors
from hanabi.cards import Card
from hanabi.colors import Color, build_registry, color_registry, parse_color, parse_color_letter, parse_color_name
from hanabi.errors import CardError, CardParseError, ColorRegistryError, ErrorKind


class ClashingColors(str, Enum):
    BLUE = "Blue"
    BLACK = "Black"


class MixedCaseColors(str, Enum):
    RED = "Red"
    ROSE = "rose"


class AliasedColors(str, Enum):
    RED = "Red"
    GREEN = "Green"
    CRIMSON = "Red"


def test_registry_covers_every_color() -> None:
    registry = color_registry()

    assert len(registry) == colors.NUMBER_OF_COLORS == 5
    assert registry.letters() == ("R", "G", "B", "W", "Y")


def test_registry_is_built_once() -> None:
    assert color_registry() is color_registry()


def test_registry_mappings_are_read_only() -> None:
    registry = color_registry()

    with pytest.raises(TypeError):
        registry.by_letter["Z"] = Color.RED  # type: ignore[index]


def test_registry_rejects_shared_first_letter() -> None:
    with pytest.raises(ColorRegistryError, match="Blue and Black"):
        build_registry(ClashingColors)


def test_registry_collision_is_case_insensitive() -> None:
    with pytest.raises(ColorRegistryError):
        build_registry(MixedCaseColors)


def test_registry_ignores_aliases() -> None:
    registry = build_registry(AliasedColors)

    assert len(registry) == 2
    assert registry.by_letter["R"] is AliasedColors.RED


def test_registry_error_is_not_an_input_error() -> None:
    assert not issubclass(ColorRegistryError, CardError)


def test_broken_registry_fails_every_lookup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(colors, "_registry", None)
    monkeypatch.setattr(colors, "_registry_error", None)
    monkeypatch.setattr(colors, "Color", ClashingColors)
    builds: list[object] = []
    original = colors.build_registry

    def counting_build(color_enum):  # type: ignore[no-untyped-def]
        builds.append(color_enum)
        return original(color_enum)

    monkeypatch.setattr(colors, "build_registry", counting_build)

    for _ in range(3):
        with pytest.raises(ColorRegistryError):
            parse_color_letter("B")
    with pytest.raises(ColorRegistryError):
        parse_color_name("Blue")
    with pytest.raises(ColorRegistryError):
        Card(Color.RED, 1).abbreviation
    with pytest.raises(ColorRegistryError):
        Color.GREEN.letter
    assert builds == [ClashingColors]
    assert colors._registry is None
    assert isinstance(colors._registry_error, ColorRegistryError)


def test_number_of_colors_comes_from_registry() -> None:
    assert colors.NUMBER_OF_COLORS == len(color_registry()) == len(Color)


def test_concurrent_first_use_builds_single_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(colors, "_registry", None)
    monkeypatch.setattr(colors, "_registry_error", None)
    built: list[object] = []
    original = colors.build_registry

    def counting_build(color_enum):  # type: ignore[no-untyped-def]
        registry = original(color_enum)
        built.append(registry)
        return registry

    monkeypatch.setattr(colors, "build_registry", counting_build)
    barrier = threading.Barrier(8)
    seen: list[object] = []

    def worker() -> None:
        barrier.wait()
        seen.append(color_registry())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(built) == 1
    assert all(registry is built[0] for registry in seen)


@pytest.mark.parametrize("color", list(Color))
def test_parse_color_letter_for_every_color(color: Color) -> None:
    assert parse_color_letter(color.value[0]) is color
    assert parse_color(color.letter) is color


@pytest.mark.parametrize("color", list(Color))
def test_parse_color_name_for_every_color(color: Color) -> None:
    assert parse_color_name(color.value) is color
    assert parse_color(color.value) is color


@pytest.mark.parametrize("letter", ["Z", "r", "1", "RE"])
def test_parse_color_letter_rejects_unknown(letter: str) -> None:
    with pytest.raises(CardParseError) as excinfo:
        parse_color_letter(letter)

    assert excinfo.value.kind is ErrorKind.UNKNOWN_COLOR_LETTER
    assert excinfo.value.value == letter
    assert letter in str(excinfo.value)


@pytest.mark.parametrize("letter", ["", None])
def test_parse_color_letter_requires_input(letter: str | None) -> None:
    with pytest.raises(CardParseError) as excinfo:
        parse_color_letter(letter)

    assert excinfo.value.kind is ErrorKind.COLOR_LETTER_EXPECTED


@pytest.mark.parametrize("name", ["red", "RED", "Purple", " Red", "Red "])
def test_parse_color_name_is_case_sensitive_and_exact(name: str) -> None:
    with pytest.raises(CardParseError) as excinfo:
        parse_color_name(name)

    assert excinfo.value.kind is ErrorKind.UNKNOWN_COLOR_NAME
    assert name in str(excinfo.value)


@pytest.mark.parametrize("name", ["", None])
def test_parse_color_name_requires_input(name: str | None) -> None:
    with pytest.raises(CardParseError) as excinfo:
        parse_color(name)

    assert excinfo.value.kind is ErrorKind.COLOR_NAME_EXPECTED


def test_color_string_forms() -> None:
    assert str(Color.GREEN) == "Green"
    assert Color.YELLOW.letter == "Y"
