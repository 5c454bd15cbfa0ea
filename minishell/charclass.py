"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code
point. The case converters return the same kind of value they were given.
"""

from __future__ import annotations


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer, not {type(c).__name__}")


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code point from 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)