import os

import pytest

from minishell.lines import LineReader, LineReaderPool


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def _open(data, name="input.txt"):
        path = tmp_path / name
        path.write_bytes(data.encode("utf-8") if isinstance(data, str) else data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def test_reads_lines_with_newlines(open_fd):
    reader = LineReader(open_fd("one\ntwo\nthree"), 5)
    assert reader.readline() == "one\n"
    assert reader.readline() == "two\n"
    assert reader.readline() == "three"
    assert reader.readline() is None


def test_end_of_input_stays_none(open_fd):
    reader = LineReader(open_fd("x\n"), 5)
    assert reader.readline() == "x\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_empty_file_gives_none(open_fd):
    assert LineReader(open_fd(""), 5).readline() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 64, 4096])
def test_join_of_lines_is_input(open_fd, size):
    data = "alpha\n\nbeta gamma\ndelta\n\nend"
    lines = list(LineReader(open_fd(data), size))
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_blank_lines_are_kept(open_fd):
    lines = list(LineReader(open_fd("\n\n\n"), 2))
    assert lines == ["\n", "\n", "\n"]


def test_multibyte_characters_across_reads(open_fd):
    data = "héllo wörld\nçà\n"
    assert list(LineReader(open_fd(data), 1)) == ["héllo wörld\n", "çà\n"]


def test_default_buffer_size(open_fd):
    reader = LineReader(open_fd("a\nb\n"))
    assert list(reader) == ["a\n", "b\n"]


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1, 5)


def test_non_positive_buffer_size_rejected(open_fd):
    fd = open_fd("data\n")
    with pytest.raises(ValueError):
        LineReader(fd, 0)
    with pytest.raises(ValueError):
        LineReaderPool(-3)


def test_closed_fd_raises(open_fd):
    fd = open_fd("data\n")
    reader = LineReader(fd, 5)
    os.close(fd)
    with pytest.raises(OSError):
        reader.readline()


def test_pool_keeps_separate_state(open_fd):
    first = open_fd("a1\na2\na3", "first.txt")
    second = open_fd("b1\nb2\n", "second.txt")
    pool = LineReaderPool(3)
    assert pool.readline(first) == "a1\n"
    assert pool.readline(second) == "b1\n"
    assert pool.readline(first) == "a2\n"
    assert pool.readline(second) == "b2\n"
    assert pool.readline(second) is None
    assert pool.readline(first) == "a3"
    assert pool.readline(first) is None


def test_pool_close_discards_buffered_text(open_fd):
    data = "first line\nsecond\n"
    fd = open_fd(data)
    pool = LineReaderPool(len(data))
    assert pool.readline(fd) == "first line\n"
    pool.close(fd)
    assert pool.readline(fd) is None


def test_pool_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReaderPool(5).readline(-2)


def test_pool_round_trip(open_fd):
    data = "one\ntwo\nthree\n"
    fd = open_fd(data)
    pool = LineReaderPool(4)
    collected = []
    while (line := pool.readline(fd)) is not None:
        collected.append(line)
    assert "".join(collected) == data


def test_pool_closed_fd_raises(open_fd):
    fd = open_fd("data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReaderPool(5).readline(fd)