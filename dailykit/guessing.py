"""A number guessing game with a limited number of tries."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

MAX_TRIES = 5
LOWEST = 1
HIGHEST = 100

_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFFFFFF


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Outcome(Enum):
    """The result of one guess, valued by the message shown for it."""

    TOO_SMALL = "Too small! Try again."
    TOO_BIG = "Too big! Try again."
    CORRECT = "🎉 Congratulations! You guessed the number!"


@dataclass
class GuessingGame:
    """One round: a secret number and the tries left to find it."""

    secret: int
    tries_left: int = MAX_TRIES
    won: bool = False

    @classmethod
    def random(cls, rng: _RandInt | None = None) -> "GuessingGame":
        """Start a round with a secret drawn from 1 to 100."""
        rng = rng if rng is not None else random.Random()
        return cls(secret=rng.randint(LOWEST, HIGHEST))

    @property
    def over(self) -> bool:
        return self.won or self.tries_left <= 0

    @property
    def lost(self) -> bool:
        return not self.won and self.tries_left <= 0

    def guess(self, number: int) -> Outcome:
        """Compare ``number`` with the secret; a wrong guess uses up a try."""
        if self.over:
            raise RuntimeError("the game is over")
        if number == self.secret:
            self.won = True
            return Outcome.CORRECT
        self.tries_left -= 1
        return Outcome.TOO_SMALL if number < self.secret else Outcome.TOO_BIG


def _parse_guess(text: str) -> int | None:
    text = text.strip()
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def play(
    input_func: Callable[[], str],
    output_func: Callable[[str], object],
    rng: _RandInt,
) -> None:
    """Run rounds until the player declines another one."""
    while True:
        output_func("🎯 Welcome to the Guessing Game!")
        output_func("I have selected a number between 1 and 100. Can you guess it?")
        output_func(f"You have {MAX_TRIES} tries to guess the number!")

        game = GuessingGame.random(rng)
        while not game.over:
            output_func(f"\nTries remaining: {game.tries_left}")
            output_func("Please input your guess:")
            number = _parse_guess(input_func())
            if number is None:
                output_func("That's not a valid number! Please try again.")
                continue
            output_func(f"You guessed: {number}")
            output_func(game.guess(number).value)
            if game.lost:
                output_func(f"💔 Game Over! The number was {game.secret}.")

        output_func("\nWould you like to play again? (y/n)")
        if input_func().strip().lower() != "y":
            output_func("Thanks for playing the Guessing Game! 🎮")
            break


def main(argv: list[str] | None = None) -> int:
    """Play the game on the terminal."""
    try:
        play(input, print, random.Random())
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())