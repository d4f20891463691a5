import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 4)
    assert result is buf
    assert buf[:4] == b"z" * 4
    assert buf[4:] == b"ef"


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray([0x41]) * 3
    memset(buf, -1, 2)
    assert buf[:2] == bytes([255, 255])


def test_memset_out_of_bounds():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"hello")
    assert bzero(buf, 3) is None
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"lo"


def test_calloc_is_zeroed():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_count():
    assert len(calloc(0, 100)) == 0


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(2**40, 2**40)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("a"), len(data)) == 1
    assert memchr(data, ord("n"), len(data)) == 2


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("x"), len(data)) is None


def test_memchr_casts_to_byte():
    data = bytes([0, 255, 7])
    assert memchr(data, -1, 3) == 1


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) < 0


def test_memcmp_only_first_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_unsigned_difference():
    assert memcmp(bytes([200]), bytes([100]), 1) == 100


def test_memcpy_copies():
    dst = bytearray(5)
    result = memcpy(dst, b"hello", 5)
    assert result is dst
    assert dst == b"hello"


def test_memcpy_partial():
    dst = bytearray(b"xxxxx")
    memcpy(dst, b"ab", 2)
    assert dst == b"abxxx"


def test_memcpy_both_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_too_long():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == b"12345"
    assert buf[:2] == b"12"
    assert buf[7:] == b"89"


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    result = memmove(buf, 0, 2, 5)
    assert result is buf
    assert buf[:5] == b"34567"
    assert buf[5:] == b"6789"


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)