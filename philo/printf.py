"""A small printf-style formatter and stream writers."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, TextIO

from philo.chars import itoa

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1
_CONVERSIONS = frozenset("cspdiuxX%")
_DIRECTIVE = re.compile(r"%([cspdiuxX%])")
_MISSING = object()


def _output(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _signed32(value: Any) -> int:
    value = operator.index(value) & _UINT_MASK
    return value - (1 << 32) if value & (1 << 31) else value


def digit_count(number: int, base: int) -> int:
    """Return how many base-``base`` digits ``number`` has; zero has none."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    count = 0
    while number:
        number //= base
        count += 1
    return count


def is_conversion(char: str) -> bool:
    """Return True if ``char`` is a supported conversion letter (or '%')."""
    return char in _CONVERSIONS


def unsigned_itoa(number: int) -> str:
    """Render ``number`` as an unsigned 32-bit decimal value."""
    return str(operator.index(number) & _UINT_MASK)


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _convert_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) & _POINTER_MASK
    return "(nil)" if address == 0 else "0x" + format(address, "x")


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        return _convert_char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        return _convert_pointer(value)
    if conversion in "di":
        return itoa(_signed32(value))
    if conversion == "u":
        return unsigned_itoa(value)
    return format(operator.index(value) & _UINT_MASK, conversion)


def format_string(fmt: str, *args: Any) -> str:
    """Expand the %c %s %p %d %i %u %x %X and %% directives of ``fmt``.

    A '%' not followed by a known conversion is kept as it is. Extra
    arguments are ignored; too few raise TypeError.
    """
    remaining = iter(args)

    def expand(match: re.Match[str]) -> str:
        conversion = match.group(1)
        if conversion == "%":
            return "%"
        value = next(remaining, _MISSING)
        if value is _MISSING:
            raise TypeError("not enough arguments for format string")
        return _convert(conversion, value)

    return _DIRECTIVE.sub(expand, fmt)


def printf(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written; a missing format writes nothing.
    """
    if fmt is None:
        return 0
    text = format_string(fmt, *args)
    _output(stream).write(text)
    return len(text)


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write one character."""
    _output(stream).write(_convert_char(char))


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; a missing text writes nothing."""
    if text is not None:
        _output(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; a missing text writes nothing."""
    if text is not None:
        _output(stream).write(text + "\n")


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write ``number`` in decimal."""
    _output(stream).write(itoa(operator.index(number)))