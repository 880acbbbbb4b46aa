"""Console Bulls and Cows game."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from drillkit.bulls import check, generate_number, is_valid

WELCOME = (
    "====Быки и Коровы===\n"
    "Цель игры: Угадать 4-значное число\n"
    "Количество 🐂 - цифры расположены на своих местах\n"
    "Количество 🐄 - в числе есть такие цифры, но не на своих местах\n"
)


def play(secret: str, guesses: Iterable[str], out: TextIO | None = None) -> int | None:
    """Play until ``secret`` is guessed; return the attempt count, or None if guesses run out."""
    stream = sys.stdout if out is None else out
    pending = iter(guesses)
    attempts = 0
    while True:
        stream.write("Введите число: ")
        stream.flush()
        guess = next(pending, None)
        if guess is None:
            return None
        if not is_valid(guess):
            stream.write("Введите 4 разные цифры\n")
            continue
        attempts += 1
        result = check(secret, guess)
        stream.write(f"Быки: {result.bulls}, Коровы: {result.cows}\n")
        if result.bulls == len(secret):
            stream.write(f"Вы угадали число {secret}\n за {attempts} попыток\n")
            return attempts


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Play one game on standard input and output."""
    sys.stdout.write(WELCOME)
    attempts = play(generate_number(), _tokens(sys.stdin), sys.stdout)
    return 0 if attempts is not None else 1


if __name__ == "__main__":
    sys.exit(main())