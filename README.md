# minishell

Building blocks of a small shell, as a plain Python library. It needs
nothing beyond the standard library.

## Install

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Modules

### `minishell.textutil`

C-style string helpers.

- `atoi(text)`: skips leading blanks (`\t\n\v\f\r` and space), takes
  one optional sign, then reads digits until the first non-digit. No
  digits gives `0`.
- `itoa(n)`: decimal text of an integer.
- `split(text, sep)`: splits on a single-character separator and drops
  empty fields. A separator of any other length raises `ValueError`.
- `strtrim(text, chars)`: removes the given characters from both ends.
- `substr(text, start, length)`: at most `length` characters from
  `start`; a start past the end gives `""`. Negative values raise
  `ValueError`.
- `strnstr(haystack, needle, length)`: index of `needle` found wholly
  within the first `length` characters, `0` for an empty needle, or
  `None`.
- `strncmp(s1, s2, n)` and `strcmp(s1, s2)`: the difference of the first
  differing code points (a shorter string counts as having `0` there),
  or `0`.
- `strchr(text, char)` and `strrchr(text, char)`: index of the first or
  last occurrence, `None` if absent; `"\0"` matches the end of the text.
- `strmapi(text, func)`: joins `func(index, char)` over every character.
- `remove_backslashes(text, size)`: copies the text with each backslash
  making the next character literal, keeping at most `size - 1`
  characters. A trailing lone backslash ends the copy.

### `minishell.charclass`

ASCII tests and case mapping: `isalnum`, `isalpha`, `isascii`,
`isdigit`, `isprint`, `tolower`, `toupper`. Each accepts a
one-character string or an integer code point; `tolower` and `toupper`
return the same kind of value they were given. A string of another
length raises `ValueError`; any other type raises `TypeError`.

### `minishell.lines`

- `LineReader(fd, buffer_size=5)`: reads a raw file descriptor in chunks
  of `buffer_size` bytes and returns one line per `readline()` call, with
  its trailing newline (the last line may have none), and `None` at end
  of input. It is also iterable. Bytes are decoded as UTF-8 with
  `surrogateescape`. A read error discards what was buffered and is
  raised.
- `LineReaderPool(buffer_size=5)`: keeps a separate pending buffer per
  descriptor. `readline(fd)` returns the next line of that descriptor;
  `close(fd)` forgets its buffer without closing the descriptor.

A negative descriptor or a buffer size below 1 raises `ValueError`.

### `minishell.output`

- `format_basic(fmt, *args)`: expands `%d %i %u %c %s %p %x %X %%`.
  Integers are taken as 32-bit C `int`/`unsigned int`; `%s` of `None`
  gives `(null)`; `%p` of `None` or `0` gives `0x0`, and of a non-integer
  object gives the hex of its `id`. A `%` before any other character is
  copied as is. Too few arguments raise `TypeError`; extra ones are
  ignored.
- `printf(fmt, *args, stream=None)`: writes the formatted text and
  returns its length.
- `put_char(c, stream=None)`, `put_str(s, stream=None)`,
  `put_endl(s, stream=None)`, `put_nbr(n, stream=None)`.

Where `stream` is `None`, output goes to `sys.stdout`.

### `minishell.wildcards`

Patterns use `*` and `?`. Matching is greedy and does not backtrack:
after a `*`, the name is advanced to the next occurrence of the
following pattern character.

- `pattern_match(name, pattern)`
- `list_matches(pattern, directory=".")`: sorted matching entries,
  `.` and `..` included; an unreadable directory gives `[]`.
- `sort_names(names)`: code-point order, duplicates kept.
- `expand_wildcards(words, directory=".")`: every word with `*` that
  matches something is removed (except the first word) and its sorted
  matches are appended after the remaining words. A later word
  containing `/` cuts off the words after it and is moved to the end.
- `find_redirect_pattern(text)`: `(index, sign, pattern)` for the first
  `<` or `>` whose target word holds `*`, or `None`.
- `format_redirect_files(names, sign)`: `"<sign><name> "` for each name,
  joined.
- `merge_redirect_files(text, replacement, index)`: replaces the sign at
  `index`, the blanks after it and its target word. `ValueError` if
  there is no sign at `index`.
- `expand_redirect_wildcards(text, directory=".")`: expands redirection
  patterns left to right and stops at the first one that matches
  nothing.

## Examples

```python
from minishell.textutil import split, atoi
from minishell.output import format_basic
from minishell.wildcards import pattern_match, expand_wildcards

split("  ls  -l  ", " ")             # ['ls', '-l']
atoi("  -42abc")                     # -42
format_basic("%s=%x", "n", 255)      # 'n=ff'
pattern_match("notes.txt", "*.txt")  # True
expand_wildcards(["cat", "*.txt"], ".")
```

```python
import os
from minishell.lines import LineReader

fd = os.open("input.txt", os.O_RDONLY)
for line in LineReader(fd, 5):
    print(line, end="")
os.close(fd)
```

## What it does not do

This is a library of parts, not a shell. It has no command to run, no
prompt or history, no command-line parser, no environment variable
handling, no built-in commands, no heredocs, pipes or redirection
execution, and it never starts other programs.