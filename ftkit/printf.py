"""A small printf with the conversions %s %c %d %i %u %x %X %p and %%.

Any other character after ``%`` is written as it is. A ``%`` at the very
end of the format is dropped.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, Optional, TextIO

from ftkit.convert import INT_MIN

DEC = "0123456789"
HEX = "0123456789abcdef"
UP_HEX = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def format_number(n: int, base: int, symbols: str) -> str:
    """Digits of ``n`` in ``base`` written with ``symbols``, with a leading '-' if negative."""
    if not 2 <= base <= len(symbols):
        raise ValueError(
            f"base {base} needs between 2 and {len(symbols)} symbols"
        )
    n = operator.index(n)
    if n < 0:
        return "-" + format_number(-n, base, symbols)
    digits = []
    while True:
        n, digit = divmod(n, base)
        digits.append(symbols[digit])
        if n == 0:
            break
    return "".join(reversed(digits))


def format_pointer(address: Any) -> str:
    """Hexadecimal address with a ``0x`` prefix, or ``(nil)`` for a null one.

    ``address`` may be an integer, None, or any object, in which case its
    identity is used as the address.
    """
    if address is None:
        return "(nil)"
    if isinstance(address, int):
        value = address & _POINTER_MASK
    else:
        value = id(address) & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format_number(value, 16, HEX)


def _as_int32(value: Any) -> int:
    return (operator.index(value) - INT_MIN) % 2**32 + INT_MIN


def _as_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _as_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _as_string,
    "c": _as_char,
    "d": lambda v: format_number(_as_int32(v), 10, DEC),
    "i": lambda v: format_number(_as_int32(v), 10, DEC),
    "u": lambda v: format_number(_as_uint32(v), 10, DEC),
    "x": lambda v: format_number(_as_uint32(v), 16, HEX),
    "X": lambda v: format_number(_as_uint32(v), 16, UP_HEX),
    "p": format_pointer,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return conversion(value)


def sformat(fmt: str, *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``."""
    pieces = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sformat(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)