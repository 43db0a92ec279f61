"""Byte-buffer operations over bytearray and bytes-like objects."""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer of size {len(buffer)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with ``value`` truncated to a byte."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the total size would overflow the address range.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)


def memchr(data, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, length: int) -> int:
    """Compare ``length`` bytes; return the difference at the first mismatch, else 0."""
    _check_length(length, first, second)
    for left, right in zip(first[:length], second[:length]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, buffer[src:], buffer[dest:])
    buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer