"""Character classification and integer/text conversion helpers."""

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_WHITESPACE = frozenset(chr(code) for code in range(9, 14)) | {" "}
_DIGITS = "0123456789"


def _code(char: str) -> int:
    if not isinstance(char, str):
        raise TypeError(f"expected a one-character string, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def is_alpha(char: str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return 48 <= _code(char) <= 57


def is_alnum(char: str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str) -> bool:
    """Return True for a character in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def to_lower(char: str) -> str:
    """Lower-case an ASCII upper-case letter; other characters pass through."""
    code = _code(char)
    return chr(code + 32) if 65 <= code <= 90 else char


def to_upper(char: str) -> str:
    """Upper-case an ASCII lower-case letter; other characters pass through."""
    code = _code(char)
    return chr(code - 32) if 97 <= code <= 122 else char


def _wrap_int(value: int) -> int:
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits yields 0.
    Values outside the 32-bit range wrap around.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    value = 0
    for char in text[position:]:
        if char not in _DIGITS:
            break
        value = value * 10 + (ord(char) - 48)
    return _wrap_int(value * sign)


def itoa(number: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)