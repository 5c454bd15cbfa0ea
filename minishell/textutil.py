"""String helpers used by the shell's parser and expansions."""

from __future__ import annotations

from collections.abc import Callable

_ATOI_SPACE = frozenset("\t\n\v\f\r ")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping blanks and one sign.

    Parsing stops at the first non-digit; no digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in text.split(sep) if part]


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _compare(s1: str, s2: str, limit: int | None) -> int:
    count = max(len(s1), len(s2))
    if limit is not None:
        count = min(count, limit)
    for pos in range(count):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first code-point difference."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(s1, s2, n)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the first code-point difference or 0."""
    return _compare(s1, s2, None)


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; ``"\\0"`` matches the end."""
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; ``"\\0"`` matches the end."""
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def remove_backslashes(text: str, size: int) -> str:
    """Copy ``text`` dropping escaping backslashes, keeping under ``size`` chars.

    A backslash makes the following character literal; at most ``size - 1``
    characters are kept.
    """
    if size < 1:
        return ""
    limit = size - 1
    result: list[str] = []
    chars = iter(text)
    for char in chars:
        if len(result) >= limit:
            break
        if char == "\\":
            escaped = next(chars, None)
            if escaped is None:
                break
            char = escaped
        result.append(char)
    return "".join(result)