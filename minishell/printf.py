"""A small printf supporting the c, s, p, d, i, u, x and X conversions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator

_TYPES = "cspdiuxX"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass
class FormatSpec:
    """Flags, width, precision and conversion of one ``%`` directive."""

    left: bool = False
    sign: bool = False
    space: bool = False
    hash: bool = False
    zero: bool = False
    width: int = 0
    precision: int = -1
    type: str = ""

    @property
    def zero_padded(self) -> bool:
        """True when padding of a number is done with zeros rather than spaces."""
        return self.zero and not self.left and self.precision < 0


class _Arguments:
    """Hands out the variadic arguments in order."""

    def __init__(self, args: tuple[object, ...]) -> None:
        self._items: Iterator[object] = iter(args)

    def next(self) -> object:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None

    def next_int(self) -> int:
        value = self.next()
        if not isinstance(value, int):
            raise TypeError(f"expected an integer argument, got {type(value).__name__}")
        return value


def _wrap_signed(value: int) -> int:
    value &= _UINT_MASK
    return value - 0x100000000 if value >= 0x80000000 else value


def _pad(count: int, fill: str) -> str:
    return fill * max(count, 0)


def _read_number(fmt: str, pos: int, spec: FormatSpec, args: _Arguments) -> tuple[int, int]:
    """Read a width or precision: a literal number or ``*`` taken from the arguments."""
    if pos < len(fmt) and fmt[pos] == "*":
        value = args.next_int()
        if value < 0:
            spec.left = True
            value = -value
        return value, pos + 1
    value = 0
    while pos < len(fmt) and "0" <= fmt[pos] <= "9":
        value = value * 10 + ord(fmt[pos]) - 48
        pos += 1
    return value, pos


def _parse_spec(fmt: str, pos: int, args: _Arguments) -> tuple[FormatSpec, int]:
    """Parse the directive starting just after ``%``; unknown characters are skipped."""
    spec = FormatSpec()
    while not spec.type and pos < len(fmt):
        ch = fmt[pos]
        if ch in _TYPES:
            spec.type = ch
        if ch == "-":
            spec.left = True
            spec.zero = False
        if ch == "+":
            spec.sign = True
        if ch == " ":
            spec.space = True
        if ch == "#":
            spec.hash = True
        if ch == "0" and not spec.left:
            spec.zero = True
        if ch == "*" or "0" <= ch <= "9":
            spec.width, pos = _read_number(fmt, pos, spec, args)
        elif ch == ".":
            spec.precision, pos = _read_number(fmt, pos + 1, spec, args)
        else:
            pos += 1
    return spec, pos


def _pad_width(spec: FormatSpec, digits: str, value: int) -> int:
    """Number of padding characters a numeric conversion needs."""
    width = spec.width
    if spec.precision or value:
        if spec.type in ("x", "X") and spec.hash and value:
            width -= 2
        width -= len(digits) if spec.precision < len(digits) else spec.precision
    if value < 0 or spec.sign or spec.space:
        width -= 1
    return width


def _sign(spec: FormatSpec, value: int) -> str:
    if value < 0:
        return "-"
    if spec.sign:
        return "+"
    if spec.space:
        return " "
    return ""


def _render_char(spec: FormatSpec, arg: object) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c needs a single character, got {arg!r}")
        ch = arg
    elif isinstance(arg, int):
        ch = chr(arg & 0xFF)
    else:
        raise TypeError(f"%c needs a character or an integer, got {type(arg).__name__}")
    padding = _pad(spec.width - 1, " ")
    return ch + padding if spec.left else padding + ch


def _render_string(spec: FormatSpec, text: str | None) -> str:
    if text is None:
        if spec.precision >= 6 or spec.precision < 0:
            return _render_string(spec, "(null)")
        return _pad(spec.width, " ")
    precision = spec.precision
    if precision > len(text) or precision < 0:
        precision = len(text)
    width = spec.width
    if width:
        width -= precision
    body = text[:precision]
    padding = _pad(width, " ")
    return body + padding if spec.left else padding + body


def _render_pointer(spec: FormatSpec, address: int | None) -> str:
    address = (address or 0) & _POINTER_MASK
    text = "(nil)" if not address else "0x" + format(address, "x")
    padding = _pad(spec.width - len(text), " ")
    body = text if address or spec.precision else ""
    return body + padding if spec.left else padding + body


def _render_signed(spec: FormatSpec, value: int) -> str:
    fill = "0" if spec.zero_padded else " "
    digits = str(abs(value))
    to_pad = _pad_width(spec, digits, value)
    out: list[str] = []
    if spec.zero and spec.precision < 0 and not spec.left:
        out.append(_sign(spec, value))
    if not spec.left:
        out.append(_pad(to_pad, fill))
    if spec.left or not spec.zero or spec.precision >= 0:
        out.append(_sign(spec, value))
    out.append(_pad(spec.precision - len(digits), "0"))
    if value or spec.precision:
        out.append(digits)
    if spec.left:
        out.append(_pad(to_pad, fill))
    return "".join(out)


def _render_unsigned(spec: FormatSpec, value: int) -> str:
    fill = "0" if spec.zero_padded else " "
    digits = str(value)
    to_pad = _pad_width(spec, digits, value)
    if spec.sign or spec.space:
        to_pad -= 1
    out: list[str] = []
    if not spec.left:
        out.append(_pad(to_pad, fill))
    out.append(_pad(spec.precision - len(digits), "0"))
    if value or spec.precision:
        out.append(digits)
    if spec.left:
        out.append(_pad(to_pad, fill))
    return "".join(out)


def _render_hex(spec: FormatSpec, value: int) -> str:
    upper = spec.type == "X"
    digits = format(value, "X" if upper else "x")
    to_pad = _pad_width(spec, digits, value)
    out: list[str] = []
    if not spec.left and (not spec.zero or spec.precision >= 0):
        out.append(_pad(to_pad, " "))
    if spec.hash and value:
        out.append("0X" if upper else "0x")
    if not spec.left and spec.zero and spec.precision < 0:
        out.append(_pad(to_pad, "0"))
    out.append(_pad(spec.precision - len(digits), "0"))
    if value or spec.precision:
        out.append(digits)
    if spec.left:
        out.append(_pad(to_pad, " "))
    return "".join(out)


def _render(spec: FormatSpec, args: _Arguments) -> str:
    kind = spec.type
    if not kind:
        return ""
    if kind == "c":
        return _render_char(spec, args.next())
    if kind == "s":
        text = args.next()
        if text is not None and not isinstance(text, str):
            raise TypeError(f"%s needs a string or None, got {type(text).__name__}")
        return _render_string(spec, text)
    if kind == "p":
        address = args.next()
        if address is not None and not isinstance(address, int):
            raise TypeError(f"%p needs an integer address or None, got {type(address).__name__}")
        return _render_pointer(spec, address)
    if kind in ("d", "i"):
        return _render_signed(spec, _wrap_signed(args.next_int()))
    if kind == "u":
        return _render_unsigned(spec, args.next_int() & _UINT_MASK)
    return _render_hex(spec, args.next_int() & _UINT_MASK)


def format_string(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the resulting text."""
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    arguments = _Arguments(args)
    pieces: list[str] = []
    pos = 0
    length = len(fmt)
    while pos < length:
        if fmt[pos] != "%":
            end = fmt.find("%", pos)
            if end < 0:
                end = length
            pieces.append(fmt[pos:end])
            pos = end
        elif pos + 1 >= length:
            raise ValueError("format string ends with a lone '%'")
        elif fmt[pos + 1] == "%":
            pieces.append("%")
            pos += 2
        else:
            spec, pos = _parse_spec(fmt, pos + 1, arguments)
            pieces.append(_render(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)