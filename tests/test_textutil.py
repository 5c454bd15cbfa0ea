import pytest

from minishell.textutil import (
    atoi,
    itoa,
    remove_backslashes,
    split,
    strchr,
    strcmp,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 10**12])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n" + itoa(-42) + "abc") == atoi(itoa(-42))
    assert atoi("  +" + itoa(13) + " 9") == 13


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-3", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_split_drops_empty_fields():
    assert split("  a  bb c ", " ") == ["a", "bb", "c"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  abc  ", "") == "  abc  "
    assert strtrim("", "x") == ""


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 1) == ""
    assert substr("hello", 10, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_finds_within_bound():
    hay, needle = "lorem ipsum dolor", "ipsum"
    idx = strnstr(hay, needle, len(hay))
    assert hay[idx:idx + len(needle)] == needle
    assert needle not in hay[:idx + len(needle) - 1]


def test_strnstr_respects_length():
    hay = "lorem ipsum"
    assert strnstr(hay, "ipsum", len(hay) - 1) is None
    assert strnstr(hay, "zzz", len(hay)) is None
    assert strnstr(hay, "", 0) == 0


def test_strncmp():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abc", "ab", 3) == ord("c")
    assert strncmp("x", "y", 0) == 0


def test_strcmp():
    assert strcmp("echo", "echo") == 0
    assert strcmp("a", "b") == -strcmp("b", "a")
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("", "") == 0


def test_strchr_and_strrchr():
    text = "hello"
    first = strchr(text, "l")
    last = strrchr(text, "l")
    assert text[first] == "l" and "l" not in text[:first]
    assert text[last] == "l" and "l" not in text[last + 1:]
    assert first < last
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, "\0") == len(text)


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strmapi("", lambda i, c: c) == ""


def test_remove_backslashes():
    assert remove_backslashes("a\\b\\\\c", 100) == "ab\\c"
    assert remove_backslashes("abcdef", 4) == "abc"
    assert remove_backslashes("abc", 0) == ""
    assert remove_backslashes("ab\\", 100) == "ab"