"""String and byte-buffer helpers with the semantics of their C counterparts."""

from __future__ import annotations

from typing import Callable


def _code_at(s: str, index: int) -> int:
    """Code point at ``index``, or 0 past the end (the terminating NUL)."""
    return ord(s[index]) if index < len(s) else 0


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    index = 0
    while (
        index < n - 1
        and _code_at(s1, index)
        and _code_at(s2, index)
        and _code_at(s1, index) == _code_at(s2, index)
    ):
        index += 1
    return _code_at(s1, index) - _code_at(s2, index)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    limit = min(length, len(haystack))
    for start in range(limit):
        end = start + len(needle)
        if end > length:
            break
        if haystack.startswith(needle, start):
            return start
    return None


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL matches the end of the string."""
    _single_char(c, "c")
    if c == "\0":
        return len(s)
    index = s.find(c)
    return index if index >= 0 else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL matches the end of the string."""
    _single_char(c, "c")
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size``; return the copy and ``len(src)``."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size``.

    Returns the resulting string and the length the full result would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Strip characters of ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    _single_char(sep, "sep")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(s))


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` (taken modulo 256) in ``data[:n]``."""
    if not 0 <= n <= len(data):
        raise ValueError(f"n must be between 0 and {len(data)}, got {n}")
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    if n < 0 or n > len(a) or n > len(b):
        raise ValueError(f"n={n} reaches past the end of a buffer")
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0