"""Reverse the decimal digits of a signed 64-bit integer."""

from __future__ import annotations

import sys

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


def reverse_digits(x: int) -> int:
    """Return ``x`` with its decimal digits reversed, keeping the sign.

    Returns 0 when the reversed value does not fit in a signed 64-bit
    integer. Raises ValueError when ``x`` itself does not fit.
    """
    if not INT64_MIN <= x <= INT64_MAX:
        raise ValueError(f"{x} is outside the signed 64-bit range")
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    limit = INT64_MAX // 10
    result = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        if result > limit:
            return 0
        result = result * 10 + digit
    result *= sign
    if not INT64_MIN <= result <= INT64_MAX:
        return 0
    return result


def main(argv: list[str] | None = None) -> int:
    """Read an integer from the arguments or standard input and print it reversed."""
    args = sys.argv[1:] if argv is None else argv
    text = args[0] if args else sys.stdin.readline()
    try:
        number = int(text.strip())
        print(reverse_digits(number))
    except ValueError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())