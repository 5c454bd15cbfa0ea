"""Minimal printf-style formatting and small writers for text streams."""

from __future__ import annotations

import re
import sys
from typing import Any, TextIO

_CONVERSION = re.compile(r"%([diucspxX%])")
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(
            f"%{conversion} needs an integer, not {type(value).__name__}"
        )
    return value


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _convert(conversion: str, value: Any) -> str:
    if conversion in "di":
        return str(_as_int32(_as_int(value, conversion)))
    if conversion == "u":
        return str(_as_int(value, conversion) & _UINT_MASK)
    if conversion in "xX":
        return format(_as_int(value, conversion) & _UINT_MASK, conversion)
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError("%c needs a single character")
            return value
        return chr(_as_int(value, conversion) & 0xFF)
    if conversion == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s needs a string, not {type(value).__name__}")
        return value
    # conversion == "p"
    if value is None:
        return "0x0"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


def format_basic(fmt: str, *args: Any) -> str:
    """Expand ``%d %i %u %c %s %p %x %X %%`` in ``fmt`` with ``args``.

    Integer conversions take their value as a C ``int``/``unsigned int``;
    ``%s`` of None gives ``(null)`` and ``%p`` of None or 0 gives ``0x0``.
    A ``%`` before any other character is copied unchanged. Too few
    arguments raise TypeError; extra arguments are ignored.
    """
    remaining = iter(args)

    def substitute(match: re.Match[str]) -> str:
        conversion = match.group(1)
        if conversion == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        return _convert(conversion, value)

    return _CONVERSION.sub(substitute, fmt)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write ``format_basic(fmt, *args)`` to ``stream``; return its length."""
    text = format_basic(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string as it is."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of an integer."""
    _target(stream).write(str(_as_int(n, "d")))