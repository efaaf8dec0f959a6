"""Keeps registered source files and a read position in each."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class UnknownFileError(LookupError):
    """Raised when a file name was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown file: '{name}'")
        self.name = name


@dataclass
class _SourceFile:
    content: str
    line: int = 0
    col: int = 0


class SrcMngr:
    """Source manager: reads characters out of registered files."""

    def __init__(self) -> None:
        self._files: dict[str, _SourceFile] = {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SrcMngr):
            return NotImplemented
        return self._files == other._files

    def _get(self, name: str) -> _SourceFile:
        try:
            return self._files[name]
        except KeyError:
            raise UnknownFileError(name) from None

    def register(self, name: str, content: str) -> None:
        """Register (or replace) a file, with its position at the start."""
        self._files[name] = _SourceFile(content)

    def get_next_char(self, file: str) -> Optional[str]:
        """Return the character at the current position of ``file``.

        The current line advances when the character after it is a newline.
        Returns None when no character is at the current position.
        """
        src = self._get(file)
        line = 0
        found = None
        chars = iter(src.content)
        for ch in chars:
            if ch == "\n":
                line += 1
            # the column counter is reset after every character
            if line == src.line and src.col == 0:
                found = ch
                break

        if next(chars, None) == "\n":
            src.line += 1
            src.col = 0

        return found

    def get_cur_pos(self, file: str) -> tuple[int, int]:
        """Return the ``(line, col)`` position of ``file``."""
        src = self._get(file)
        return src.line, src.col