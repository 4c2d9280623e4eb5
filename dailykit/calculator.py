"""A calculator for a single ``number operator number`` expression."""

from __future__ import annotations

from typing import Callable

_FORMAT_MESSAGE = (
    "Invalid input. Please follow the format: number operator number(e.g. 4 + 5)"
)

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "_": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}


class CalculatorError(ValueError):
    """An expression that cannot be evaluated."""


def _parse_number(token: str, which: str) -> float:
    if "_" in token:
        raise CalculatorError(f"Invalid {which} number")
    try:
        return float(token)
    except ValueError:
        raise CalculatorError(f"Invalid {which} number") from None


def _parse(expression: str) -> tuple[float, str, float]:
    tokens = expression.split()
    if len(tokens) != 3:
        raise CalculatorError(_FORMAT_MESSAGE)
    first, operator, second = tokens
    return _parse_number(first, "first"), operator, _parse_number(second, "second")


def _apply(left: float, operator: str, right: float) -> float:
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise CalculatorError("Invalid operator. Use +, -, *, or /.") from None
    if operator == "/" and right == 0.0:
        raise CalculatorError("Undefined operation. Cannot divide by zero")
    return operation(left, right)


def evaluate(expression: str) -> float:
    """Evaluate an expression such as ``"5 + 3"``; raise CalculatorError if invalid."""
    return _apply(*_parse(expression))


def main(argv: list[str] | None = None) -> int:
    """Read one expression and print its result."""
    print("🧮 Simple Rust Calculator")
    print("Available operators: (+, -, *, /)")
    print("Enter your expression: (e.g. 5 + 3)")
    try:
        line = input()
    except EOFError:
        line = ""

    try:
        left, operator, right = _parse(line)
        result = _apply(left, operator, right)
    except CalculatorError as err:
        print(f"❌ {err}")
        return 0

    print(f"✅ Result: {left:.2f} {operator} {right:.2f} = {result:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())