import pytest

from philo.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_and_returns_same_buffer():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    first = memset(bytearray(4), 256 + ord("A"), 2)
    second = memset(bytearray(4), ord("A"), 2)
    assert first == second


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix_only():
    buffer = bytearray(b"hello")
    bzero(buffer, 2)
    assert buffer[:2] == bytearray(2)
    assert buffer[2:] == bytearray(b"llo")


@pytest.mark.parametrize("count, size", [(1, 1), (4, 8), (10, 3), (0, 5)])
def test_calloc_is_zeroed_and_sized(count, size):
    block = calloc(count, size)
    assert len(block) == count * size
    assert all(byte == 0 for byte in block)


def test_calloc_zero_size_is_empty():
    assert calloc(7, 0) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX // 2 + 1, 4)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_length():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_missing_byte():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    assert memcmp(b"\x00q", b"\xffq", 2) == -memcmp(b"\xffq", b"\x00q", 2)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"------")
    result = memcpy(dest, b"abcd", 4)
    assert result is dest
    assert dest[:4] == bytearray(b"abcd")
    assert dest[4:] == bytearray(b"--")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 4)


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buffer = bytearray(original)
    memmove(buffer, 2, 0, 5)
    assert buffer[2:7] == bytearray(original[0:5])
    assert buffer[:2] == bytearray(original[:2])


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buffer = bytearray(original)
    memmove(buffer, 0, 3, 5)
    assert buffer[0:5] == bytearray(original[3:8])
    assert len(buffer) == len(original)


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)