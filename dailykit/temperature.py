"""Conversions between Celsius, Fahrenheit and Kelvin, with an interactive menu."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Callable

KELVIN_OFFSET = 273.15

_MENU = (
    "🌡️ Temperature Converter",
    "1: Celcius to Fahrenheit",
    "2: Fahrenheit to Celcius",
    "3: Kelvin to Celsius",
    "4: Celsius to Kelvin",
    "5: Kelvin to Fahrenheit",
    "6: Fahrenheit to Kelvin",
    "Please select an option (1-6)",
)
_INVALID_CHOICE = "❌ Invalid choice. Please enter a number between 1 and 6."
_INVALID_NUMBER = "❌ Invalid input. Enter a valid number."
_CHOICE_PATTERN = re.compile(r"\+?[0-9]+")


def celsius_to_fahrenheit(value: float) -> float:
    return (value * 9.0 / 5.0) + 32.0


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32.0) * 5.0 / 9.0


def kelvin_to_celsius(value: float) -> float:
    return value - KELVIN_OFFSET


def celsius_to_kelvin(value: float) -> float:
    return value + KELVIN_OFFSET


def kelvin_to_fahrenheit(value: float) -> float:
    return (value - KELVIN_OFFSET) * 9.0 / 5.0 + 32.0


def fahrenheit_to_kelvin(value: float) -> float:
    return (value - 32.0) * 5.0 / 9.0 + KELVIN_OFFSET


class Conversion(IntEnum):
    """The menu's conversions, numbered as the menu shows them."""

    CELSIUS_TO_FAHRENHEIT = 1
    FAHRENHEIT_TO_CELSIUS = 2
    KELVIN_TO_CELSIUS = 3
    CELSIUS_TO_KELVIN = 4
    KELVIN_TO_FAHRENHEIT = 5
    FAHRENHEIT_TO_KELVIN = 6

    @property
    def source_name(self) -> str:
        return _DETAILS[self][1]

    @property
    def source_symbol(self) -> str:
        return _DETAILS[self][2]

    @property
    def target_symbol(self) -> str:
        return _DETAILS[self][3]

    def apply(self, value: float) -> float:
        """Convert ``value`` in this conversion's direction."""
        return _DETAILS[self][0](value)


_DETAILS: dict[Conversion, tuple[Callable[[float], float], str, str, str]] = {
    Conversion.CELSIUS_TO_FAHRENHEIT: (celsius_to_fahrenheit, "Celsius", "ºC", "ºF"),
    Conversion.FAHRENHEIT_TO_CELSIUS: (fahrenheit_to_celsius, "Fahrenheit", "ºF", "ºC"),
    Conversion.KELVIN_TO_CELSIUS: (kelvin_to_celsius, "Kelvin", "K", "ºC"),
    Conversion.CELSIUS_TO_KELVIN: (celsius_to_kelvin, "Celsius", "ºC", "K"),
    Conversion.KELVIN_TO_FAHRENHEIT: (kelvin_to_fahrenheit, "Kelvin", "K", "ºF"),
    Conversion.FAHRENHEIT_TO_KELVIN: (fahrenheit_to_kelvin, "Fahrenheit", "ºF", "K"),
}


def convert(choice: int | Conversion, value: float) -> float:
    """Apply the conversion numbered ``choice``; raise ValueError for an unknown one."""
    return Conversion(choice).apply(value)


def _read_line() -> str:
    try:
        return input()
    except EOFError:
        return ""


def _parse_float(text: str) -> float:
    text = text.strip()
    if "_" in text:
        raise ValueError(f"not a number: {text!r}")
    return float(text)


def main(argv: list[str] | None = None) -> int:
    """Ask for a conversion and a temperature, and print the result."""
    for line in _MENU:
        print(line)

    raw = _read_line().strip()
    if not _CHOICE_PATTERN.fullmatch(raw):
        print(_INVALID_CHOICE)
        return 0
    try:
        conversion = Conversion(int(raw))
    except ValueError:
        print(_INVALID_CHOICE)
        return 0

    print(f"Enter temperature in {conversion.source_name}:")
    try:
        value = _parse_float(_read_line())
    except ValueError:
        print(_INVALID_NUMBER)
        return 1

    result = conversion.apply(value)
    print(
        f"{value:.2f}{conversion.source_symbol} is "
        f"{result:.2f}{conversion.target_symbol}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())