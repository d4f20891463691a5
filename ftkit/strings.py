"""String helpers with C string-library semantics.

Positions are returned as indices, or None where nothing is found. A
search for the NUL character finds the implicit terminator, which sits
at index ``len(s)``.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None."""
    index = (s + _NUL).find(_char(c))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None."""
    index = (s + _NUL).rfind(_char(c))
    return None if index < 0 else index


def _compare(s1: str, s2: str) -> int:
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing characters; 0 if equal.

    A string that ends first compares as if followed by NUL.
    """
    return _compare(s1, s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_size(n, "n")
    return _compare(s1[:n], s2[:n])


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters.

    Returns the text that fits (at most ``dstsize - 1`` characters, room
    being kept for the terminator) and the full length of ``src``.
    """
    _check_size(dstsize, "dstsize")
    if dstsize == 0:
        return "", len(src)
    return src[:dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``dstsize`` characters.

    Returns the resulting text and the length the full result would
    have had. If ``dst`` already fills the buffer it is returned
    unchanged, with ``dstsize + len(src)`` as the length.
    """
    _check_size(dstsize, "dstsize")
    dst_len = min(len(dst), dstsize)
    if dstsize <= dst_len:
        return dst, dstsize + len(src)
    room = dstsize - 1 - dst_len
    return dst[:dst_len] + src[:room], dst_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim needs two strings")
    return s.strip(charset)


def split(s: str, c: CharLike) -> list[str]:
    """Words of ``s`` separated by runs of the delimiter ``c``."""
    delimiter = _char(c)
    if delimiter == _NUL:
        return [s] if s else []
    return [word for word in s.split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` for each item of ``chars`` in place.

    A result other than None replaces the item at that index.
    """
    for index, ch in enumerate(list(chars)):
        result = f(index, ch)
        if result is not None:
            chars[index] = result