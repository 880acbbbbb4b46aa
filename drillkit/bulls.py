"""Rules of the Bulls and Cows number guessing game."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass

DIGITS = 4


@dataclass(frozen=True)
class GuessResult:
    bulls: int
    cows: int


def generate_number(rng: random.Random | None = None) -> str:
    """Return a secret of four distinct digits; it may start with zero."""
    source = rng if rng is not None else random
    digits = list(string.digits)
    source.shuffle(digits)
    return "".join(digits[:DIGITS])


def check(secret: str, guess: str) -> GuessResult:
    """Score ``guess`` against ``secret``: bulls are exact hits, cows misplaced digits."""
    if len(secret) != len(guess):
        raise ValueError("secret and guess must have the same length")
    bulls = cows = 0
    for position, digit in enumerate(secret):
        if guess[position] == digit:
            bulls += 1
        elif digit in guess:
            cows += 1
    return GuessResult(bulls, cows)


def is_valid(guess: str) -> bool:
    """True when ``guess`` is exactly four distinct decimal digits."""
    return (
        len(guess) == DIGITS
        and all(c in string.digits for c in guess)
        and len(set(guess)) == DIGITS
    )