"""Byte-buffer helpers over bytes, bytearray and memoryview objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_span(buf, start: int, length: int, what: str) -> None:
    if start < 0 or length < 0 or start + length > len(buf):
        raise ValueError(
            f"{what}: span [{start}, {start + length}) is outside a buffer of {len(buf)} bytes"
        )


def memset(buf, c: int, length: int):
    """Fill the first ``length`` bytes of ``buf`` with ``c`` (as a byte)."""
    _check_span(buf, 0, length, "memset")
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product overflows a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(total)


def memchr(data, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_span(data, 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_span(a, 0, n, "memcmp")
    _check_span(b, 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst, src, n: int):
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    if dst is None and src is None:
        return None
    _check_span(dst, 0, n, "memcpy")
    _check_span(src, 0, n, "memcpy")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf, dst: int, src: int, length: int):
    """Copy ``length`` bytes from offset ``src`` to offset ``dst`` within ``buf``.

    The regions may overlap. Returns ``buf``.
    """
    _check_span(buf, src, length, "memmove")
    _check_span(buf, dst, length, "memmove")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf