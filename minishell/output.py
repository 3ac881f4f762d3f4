"""Writing characters, strings and numbers to streams, and error messages to stderr."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_NULL_TEXT = "(null)"


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream`` (standard output by default)."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    out = _target(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n``."""
    _target(stream).write(str(int(n)))


def print_error(fmt: str, *args: object) -> int:
    """Write ``fmt`` to standard error, replacing each ``%s`` with the next argument.

    Other ``%`` conversions are consumed and print nothing. A ``None`` argument
    prints as ``(null)``. Returns the number of characters written.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, "")
        if conversion != "s":
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None
        pieces.append(_NULL_TEXT if value is None else str(value))
    text = "".join(pieces)
    sys.stderr.write(text)
    return len(text)