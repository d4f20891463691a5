"""Conversion between decimal text and 32-bit integers."""

from __future__ import annotations

from itertools import takewhile

from ftkit.chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _wrap32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _sign_and_digits(s: str) -> tuple[int, str]:
    body = s.lstrip(_WHITESPACE)
    sign = -1 if body.startswith("-") else 1
    if body[:1] in ("-", "+"):
        body = body[1:]
    return sign, "".join(takewhile(is_digit, body))


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace and one sign are skipped; parsing stops at the
    first non-digit. Text with no digits gives 0. Values outside the
    32-bit range wrap around.
    """
    sign, digits = _sign_and_digits(s)
    return _wrap32(sign * int(digits or "0"))


def atoi_checked(s: str) -> int:
    """Like :func:`atoi`, but raise OverflowError outside the 32-bit range."""
    sign, digits = _sign_and_digits(s)
    value = 0
    for ch in digits:
        value = value * 10 + int(ch)
        if not INT_MIN <= value * sign <= INT_MAX:
            raise OverflowError(f"{s!r} does not fit in a 32-bit integer")
    return value * sign


def itoa(n: int) -> str:
    """Decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)