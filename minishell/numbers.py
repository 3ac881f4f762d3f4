"""Integer parsing and formatting with C ``int`` semantics."""

from __future__ import annotations

from minishell.chars import is_whitespace, to_upper

_DIGITS = "0123456789ABCDEF"
_C_SPACES = frozenset(" \t\n\v\f\r")


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range, as a C int would hold it."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def _skip_whitespace(text: str) -> int:
    index = 0
    while index < len(text) and is_whitespace(text[index]):
        index += 1
    return index


def atoi(text: str) -> int:
    """Parse a leading decimal integer, stopping at the first non-digit."""
    index = 0
    while index < len(text) and text[index] in _C_SPACES:
        index += 1
    sign = 1
    if _char_at(text, index) == "-":
        sign = -1
        index += 1
    elif _char_at(text, index) == "+":
        index += 1
    result = 0
    while index < len(text) and "0" <= text[index] <= "9":
        result = result * 10 + (ord(text[index]) - 48)
        index += 1
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Format a 32-bit integer in decimal."""
    if not -0x80000000 <= n <= 0x7FFFFFFF:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def digit_value(c: str, base: int) -> int:
    """Return the value of ``c`` as a digit in ``base``, or -1 if it is not one."""
    if not c:
        return -1
    upper = to_upper(c)
    for value, digit in enumerate(_DIGITS[: max(base, 0)]):
        if digit == upper:
            return value
    return -1


def has_prefix(text: str, base: int) -> bool:
    """Tell whether ``text`` starts with the prefix of base 2 (0b), 8 (0) or 16 (0x)."""
    if base not in (2, 8, 16):
        return False
    if _char_at(text, 0) != "0":
        return False
    marker = _char_at(text, 1)
    if base == 2:
        return marker in "bB" and marker != "\0"
    if base == 16:
        return marker in "xX" and marker != "\0"
    return True


def _number_start(text: str, base: int) -> tuple[int, int] | None:
    """Return (index of first digit, sign), or None when the prefix is missing."""
    index = _skip_whitespace(text)
    if base != 10 and not has_prefix(text[index:], base):
        return None
    sign = 1
    if base in (2, 16):
        index += 2
    elif base == 8:
        index += 1
    elif base == 10 and _char_at(text, index) in "+-" and index < len(text):
        if text[index] == "-":
            sign = -1
        index += 1
    return index, sign


def atoi_base(text: str, base: int) -> int:
    """Parse an integer in base 2, 8, 10 or 16; non-decimal input needs its prefix."""
    start = _number_start(text, base)
    if start is None:
        return 0
    index, sign = start
    result = 0
    while index < len(text):
        value = digit_value(text[index], base)
        if value < 0:
            break
        result = result * base + value
        index += 1
    return _to_int32(result * sign)


def is_number(text: str, base: int) -> bool:
    """Tell whether ``text`` is entirely a number in ``base``, after leading whitespace."""
    start = _number_start(text, base)
    if start is None:
        return False
    index, _ = start
    digits = 0
    while index < len(text) and digit_value(text[index], base) >= 0:
        index += 1
        digits += 1
    return index >= len(text) and digits > 0