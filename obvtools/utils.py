"""Small file and string helpers shared across the package."""

from __future__ import annotations

import os
from pathlib import Path


def file_as_buffer(filepath: str | os.PathLike) -> bytes:
    """Return the whole content of a regular file.

    Raises OSError when the path is not a regular file or cannot be read.
    """
    path = Path(filepath)
    if not path.is_file():
        raise OSError(f"Error opening {path}: Not a regular file")
    return path.read_bytes()


def check_fileext(filepath: str | os.PathLike, fileext: str) -> bool:
    """Tell whether the file extension, lowercased, equals ``fileext``.

    ``fileext`` must be given in lower case and include the leading dot.
    """
    return Path(filepath).suffix.lower() == fileext


def find_str_in_buf(needle: str | bytes, buf: bytes) -> bool:
    """Tell whether ``needle`` occurs anywhere in ``buf``."""
    if isinstance(needle, str):
        needle = needle.encode("utf-8")
    return needle in bytes(buf)


def compare_string_insensitive(first: str, second: str) -> bool:
    """Compare two strings character by character, ignoring case."""
    return len(first) == len(second) and all(
        a.lower() == b.lower() for a, b in zip(first, second)
    )


def lookup_file_insensitive(path: str | os.PathLike, filename: str) -> Path:
    """Find ``filename`` in directory ``path`` regardless of case.

    Raises OSError when the directory cannot be listed and
    FileNotFoundError when no entry matches.
    """
    directory = Path(path)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise OSError(
            f"Error looking up '{filename}' in '{directory}': {exc.strerror or exc}"
        ) from exc
    for entry in entries:
        if compare_string_insensitive(entry.name, filename):
            return entry
    raise FileNotFoundError(f"{filename}: file not found in '{directory}'.")


def split_string(text: str, delimiter: str | None = None) -> list[str]:
    """Split ``text`` into fields.

    Without a delimiter, fields are separated by runs of whitespace.
    With one, fields are separated by that character; empty inner fields
    are kept but a trailing delimiter does not produce an empty last field.
    """
    if delimiter is None:
        return text.split()
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts