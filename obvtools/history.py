"""Recently opened files, kept one path per line in a small text file."""

from __future__ import annotations

import os
import re

MAX_ENTRIES = 20
MAX_FILENAME_LEN = 2048

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_LINE_END = re.compile(r"[\r\n]")


class FileHistory:
    """The list of recently opened files, most recent first."""

    def __init__(self, fname: str | os.PathLike = "") -> None:
        self.fname = os.fspath(fname) if fname else ""
        self.history: list[str] = []

    @property
    def count(self) -> int:
        """Number of entries currently held."""
        return len(self.history)

    def load(self) -> int:
        """Read up to MAX_ENTRIES entries from the history file.

        A missing file gives an empty history. Raises ValueError when no
        file name has been set. Returns the number of entries read.
        """
        if not self.fname:
            raise ValueError("no history file name set")
        self.history = []
        try:
            handle = open(self.fname, "rb")
        except OSError:
            return 0
        with handle:
            while len(self.history) < MAX_ENTRIES:
                raw = handle.readline(MAX_FILENAME_LEN - 1)
                if not raw:
                    break
                line = raw.decode(_ENCODING, _ERRORS)
                self.history.append(_LINE_END.split(line, maxsplit=1)[0])
        return len(self.history)

    def prepend_save(self, newfile: str | os.PathLike) -> None:
        """Put ``newfile`` first in the history file, dropping duplicates, and reload."""
        if not self.fname:
            return
        newfile = os.fspath(newfile)
        entries = [newfile] + [entry for entry in self.history if entry != newfile]
        content = "".join(entry + "\n" for entry in entries)
        with open(self.fname, "wb") as handle:
            handle.write(content.encode(_ENCODING, _ERRORS))
        self.load()


def trim_filename(path: str, stops: int) -> str:
    """Return the tail of ``path`` holding its last ``stops`` components.

    When the path has fewer separators than asked for, it is returned whole.
    """
    if not path:
        return path
    index = len(path) - 1
    while stops and index > 0:
        if path[index] in "/\\":
            stops -= 1
        index -= 1
    if not stops:
        index += 2
    return path[index:]