import pytest

from obvtools.utils import (
    check_fileext,
    compare_string_insensitive,
    file_as_buffer,
    find_str_in_buf,
    lookup_file_insensitive,
    split_string,
)


def test_file_as_buffer_round_trip(tmp_path):
    data = b"\x00\x01board\r\ndata\xff"
    target = tmp_path / "board.brd"
    target.write_bytes(data)
    assert file_as_buffer(target) == data


def test_file_as_buffer_directory_is_rejected(tmp_path):
    with pytest.raises(OSError, match="Not a regular file"):
        file_as_buffer(tmp_path)


def test_file_as_buffer_missing_file_is_rejected(tmp_path):
    with pytest.raises(OSError, match="Not a regular file"):
        file_as_buffer(tmp_path / "missing.bin")


@pytest.mark.parametrize(
    "name, ext, expected",
    [
        ("board.BRD", ".brd", True),
        ("board.brd", ".brd", True),
        ("dir/board.fz", ".brd", False),
        ("board", ".brd", False),
        ("font.TTF", ".ttf", True),
    ],
)
def test_check_fileext(name, ext, expected):
    assert check_fileext(name, ext) is expected


def test_find_str_in_buf():
    buf = b"header str_length data"
    assert find_str_in_buf("str_length", buf) is True
    assert find_str_in_buf(b"data", buf) is True
    assert find_str_in_buf("missing", buf) is False
    assert find_str_in_buf("", buf) is True


def test_compare_string_insensitive():
    assert compare_string_insensitive("Board.PDF", "board.pdf") is True
    assert compare_string_insensitive("board", "boards") is False
    assert compare_string_insensitive("abc", "abd") is False


def test_lookup_file_insensitive_finds_entry(tmp_path):
    target = tmp_path / "Schematic.PDF"
    target.write_bytes(b"")
    assert lookup_file_insensitive(tmp_path, "schematic.pdf") == target


def test_lookup_file_insensitive_not_found(tmp_path):
    (tmp_path / "other.txt").write_bytes(b"")
    with pytest.raises(FileNotFoundError, match="file not found"):
        lookup_file_insensitive(tmp_path, "schematic.pdf")


def test_lookup_file_insensitive_bad_directory(tmp_path):
    with pytest.raises(OSError, match="Error looking up"):
        lookup_file_insensitive(tmp_path / "nowhere", "x")


def test_split_string_whitespace():
    assert split_string("  one two\tthree\n") == ["one", "two", "three"]
    assert split_string("   ") == []


def test_split_string_delimiter():
    assert split_string("A|B|C", "|") == ["A", "B", "C"]
    assert split_string("a||b", "|") == ["a", "", "b"]
    assert split_string("a|b|", "|") == ["a", "b"]
    assert split_string("", "|") == []


def test_split_string_delimiter_round_trip():
    fields = ["Ctrl", "Shift", "Q"]
    assert split_string("~".join(fields), "~") == fields