"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices into the given text, and ``None`` stands
for "not found".
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(text: str | None) -> int:
    """Return the length of ``text``; a missing text counts as empty."""
    return 0 if text is None else len(text)


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``.

    Searching for the terminator ``"\\0"`` yields the length of the text.
    """
    if _single_char(char) == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``.

    Searching for the terminator ``"\\0"`` yields the length of the text.
    """
    if _single_char(char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the code points at the first mismatch, a
    shorter string comparing as if padded with ``"\\0"``, or 0 when equal.
    """
    _non_negative("count", count)
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for left, right in islice(pairs, count):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``, which exceeds the copy when it was truncated.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    needed. When ``dest`` already fills the buffer nothing is appended and
    the returned length is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size == 0:
        return dest, len(src)
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or beyond the end yields an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    _single_char(separator)
    return [piece for piece in text.split(separator) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply ``func(index, char)`` to each character of ``chars`` in place.

    A non-None result replaces the character at that index. Returns ``chars``.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars