"""A writer that replaces a file's whole content on every write."""

from __future__ import annotations

from typing import IO


class Tape:
    """Wraps a file so that each write starts again from an empty file."""

    def __init__(self, file: IO) -> None:
        self.file = file

    def write(self, data):
        """Replace the file's content with ``data``; return the count written."""
        self.file.truncate(0)
        self.file.seek(0)
        written = self.file.write(data)
        self.file.flush()
        return written