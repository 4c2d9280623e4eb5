"""Generates the first terms of the Fibonacci sequence."""

from __future__ import annotations

import re

_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF
_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


def generate_fibonacci(n: int) -> list[int]:
    """The first ``n`` terms, starting 0, 1; OverflowError past 64 bits."""
    sequence: list[int] = []
    previous, current = 0, 1
    for _ in range(n):
        sequence.append(previous)
        previous, current = current, previous + current
        if len(sequence) < n and previous > _U64_MAX:
            raise OverflowError("Fibonacci term does not fit in 64 bits")
    return sequence


def _parse_count(text: str) -> int | None:
    text = text.strip()
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def main(argv: list[str] | None = None) -> int:
    """Ask for a count and print that many terms."""
    print("Fibonacci Sequence Generator")
    print("Enter the number of terms in the Fibonacci sequence you want to generate:")
    try:
        line = input()
    except EOFError:
        line = ""

    count = _parse_count(line)
    if count is None:
        print("❌ Please enter a valid positive integer.")
        return 0
    if count == 0:
        print("❌ The number of terms must be greater than zero.")
        return 0
    try:
        sequence = generate_fibonacci(count)
    except OverflowError as err:
        print(f"❌ {err}")
        return 1
    print(f"✅ Fibonacci sequence with ({count} terms): {sequence}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())