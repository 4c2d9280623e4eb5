"""Primality test and the list of primes up to a limit."""

from __future__ import annotations

import math
import re

_U32_MAX = 0xFFFFFFFF
_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")


def is_prime(number: int) -> bool:
    """True if ``number`` is a prime, by trial division by odd numbers."""
    if number <= 1:
        return False
    if number == 2:
        return True
    if number % 2 == 0:
        return False
    return all(number % divisor for divisor in range(3, math.isqrt(number) + 1))


def primes_up_to(limit: int) -> list[int]:
    """All primes from 2 up to and including ``limit``."""
    return [number for number in range(2, limit + 1) if is_prime(number)]


def _read_number() -> int | None:
    try:
        text = input().strip()
    except EOFError:
        return None
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def main(argv: list[str] | None = None) -> int:
    """Ask for a number, say whether it is prime and list the primes up to it."""
    print("Prime Number Checker")
    print("Enter a positive integer to check if it is a prime number:")
    number = _read_number()
    if number is None:
        print("❌ Please enter a valid positive integer.")
        return 0
    if number <= 1:
        print("❌ The number must be greater than 1.")
        return 0

    if is_prime(number):
        print(f"✅ {number} is a prime number.")
    else:
        print(f"❌ {number} is not a prime number.")

    print(f"\n🔢 Prime numbers up to {number}:")
    print(primes_up_to(number))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())