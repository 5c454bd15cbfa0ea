"""Filename wildcard expansion for command words and redirections.

Patterns support ``*`` and ``?``. Matching is greedy and never backtracks:
after a ``*`` the name is advanced to the next occurrence of the following
pattern character, and matching goes on from there.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

_REDIRECT_SIGNS = "<>"


def pattern_match(name: str, pattern: str) -> bool:
    """Return True if ``name`` matches the wildcard ``pattern``."""
    name_len = len(name)
    pattern_len = len(pattern)
    f = p = 0
    while f < name_len:
        current = pattern[p] if p < pattern_len else ""
        if current == "*":
            p += 1
            if p == pattern_len:
                return True
            target = pattern[p]
            while f < name_len and name[f] != target:
                f += 1
        elif current and (current == name[f] or current == "?"):
            f += 1
            p += 1
        else:
            return False
    while p < pattern_len and pattern[p] == "*":
        p += 1
    return p == pattern_len


def sort_names(names: Iterable[str]) -> list[str]:
    """Return the names in ascending code-point order, duplicates kept."""
    return sorted(names)


def list_matches(pattern: str, directory: str | os.PathLike[str] = ".") -> list[str]:
    """Return the sorted entries of ``directory`` that match ``pattern``.

    The entries ``.`` and ``..`` are considered like any other name. A
    directory that cannot be read gives no matches.
    """
    try:
        entries = os.listdir(directory)
    except OSError:
        return []
    return sort_names(
        name for name in (".", "..", *entries) if pattern_match(name, pattern)
    )


def expand_wildcards(
    words: Iterable[str], directory: str | os.PathLike[str] = "."
) -> list[str]:
    """Expand the wildcard words of a command line.

    Every word holding ``*`` that matches something is removed (unless it
    is the first word) and its sorted matches are appended after the
    remaining words. Words after the first later word containing ``/`` are
    dropped, and that word itself is put at the very end.
    """
    words = list(words)
    slash_word: str | None = None
    for pos, word in enumerate(words[1:], start=1):
        if "/" in word:
            slash_word = word
            words = words[:pos]
            break

    expanded: list[str] = []
    matched_patterns: set[str] = set()
    for word in words:
        if "*" not in word:
            continue
        matches = list_matches(word, directory)
        if matches:
            matched_patterns.add(word)
            expanded.extend(matches)

    result = words[:1] + [word for word in words[1:] if word not in matched_patterns]
    result.extend(expanded)
    if slash_word is not None:
        result.append(slash_word)
    return result


def _word_span(text: str, index: int) -> tuple[int, int]:
    """Start and end of the word following the redirection at ``index``."""
    length = len(text)
    pos = index
    if pos < length and text[pos] in _REDIRECT_SIGNS:
        pos += 1
    while pos < length and text[pos] == " ":
        pos += 1
    end = pos
    while end < length and text[end] != " ":
        end += 1
    return pos, end


def find_redirect_pattern(text: str) -> tuple[int, str, str] | None:
    """Find the first redirection whose target word holds ``*``.

    Returns ``(index of the sign, sign, pattern)`` or None. Each ``<`` or
    ``>`` is looked at on its own, so the word after the first sign of
    ``>>`` starts with the second one.
    """
    for index, char in enumerate(text):
        if char not in _REDIRECT_SIGNS:
            continue
        start, end = _word_span(text, index)
        word = text[start:end]
        if "*" in word:
            return index, char, word
    return None


def format_redirect_files(names: Iterable[str], sign: str) -> str:
    """Turn each name into ``<sign><name> `` and join them."""
    return "".join(f"{sign}{name} " for name in names)


def merge_redirect_files(text: str, replacement: str, index: int) -> str:
    """Replace the redirection at ``index`` and its target word.

    The sign, the blanks after it and the word are replaced by
    ``replacement``; everything else is kept.
    """
    if not 0 <= index < len(text) or text[index] not in _REDIRECT_SIGNS:
        raise ValueError(f"no redirection sign at index {index}")
    _, end = _word_span(text, index)
    return text[:index] + replacement + text[end:]


def expand_redirect_wildcards(
    text: str, directory: str | os.PathLike[str] = "."
) -> str:
    """Expand wildcard redirection targets in a command line.

    Patterns are expanded from left to right; expansion stops at the first
    pattern that matches nothing, leaving it and everything after as is.
    """
    offset = 0
    while (found := find_redirect_pattern(text[offset:])) is not None:
        index, sign, pattern = found
        names = list_matches(pattern, directory)
        if not names:
            break
        replacement = format_redirect_files(names, sign)
        index += offset
        text = merge_redirect_files(text, replacement, index)
        offset = index + len(replacement)
    return text