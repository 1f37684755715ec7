"""A number-guessing game with a limited number of turns."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum


class Outcome(Enum):
    """What a guess led to."""

    WIN = "win"
    TOO_LOW = "too low"
    TOO_HIGH = "too high"
    LOSE = "lose"


def judge_guess(secret: int, guess: int) -> Outcome:
    """Compare one guess with the secret number."""
    if guess == secret:
        return Outcome.WIN
    return Outcome.TOO_LOW if guess < secret else Outcome.TOO_HIGH


def _rounds(secret: int, guesses: Iterable[int], turns: int) -> Iterator[tuple[Outcome, int]]:
    for guess in guesses:
        outcome = judge_guess(secret, guess)
        turns -= 1
        if outcome is Outcome.WIN:
            yield outcome, turns
            return
        if turns == 0:
            yield Outcome.LOSE, 0
            return
        yield outcome, turns


def play(secret: int, guesses: Iterable[int], turns: int = 5) -> Iterator[tuple[Outcome, int]]:
    """Play the game, yielding (outcome, turns left) after each guess.

    The game ends on a correct guess or when the turns run out, whichever comes first.
    """
    if turns < 1:
        raise ValueError("the game needs at least one turn")
    return _rounds(secret, guesses, turns)


def _ask() -> Iterator[int]:
    while True:
        yield int(input("Enter your guess (between 1 and 100): "))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-game", description=__doc__)
    parser.add_argument("--turns", type=int, default=5)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--secret", type=int, help="fix the number instead of drawing it")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.turns < 1:
        parser.error("--turns must be at least 1")
    secret = args.secret if args.secret is not None else random.Random(args.seed).randint(1, 100)
    print("Welcome to the Number Guessing Game!")
    print(f"You have {args.turns} turns to guess the correct number")
    for outcome, left in play(secret, _ask(), args.turns):
        if outcome is Outcome.WIN:
            print("YOU WIN!")
        elif outcome is Outcome.LOSE:
            print(f"You lose! The number was {secret}")
        elif outcome is Outcome.TOO_LOW:
            print(f"Too low You have {left} turns left")
        else:
            print(f"Too high You have {left} turns left")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())