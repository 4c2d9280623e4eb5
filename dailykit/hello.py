"""The day-one greeting."""

from __future__ import annotations

import argparse

GREETING = "Hello, world, Welcome to Day 1!"


def greeting() -> str:
    """Return the welcome message."""
    return GREETING


def main(argv: list[str] | None = None) -> int:
    """Parse the (empty) command line and print the welcome message."""
    parser = argparse.ArgumentParser(
        prog="hello", description="Print the day-one welcome message."
    )
    parser.parse_args(argv)
    print(greeting())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())