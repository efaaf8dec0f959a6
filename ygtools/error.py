"""Formatted compiler diagnostics with source lines and caret markers."""

from __future__ import annotations

import sys

from ygtools.color import blue, bold, gray, red
from ygtools.pad import pad_to_len


class Error:
    """A diagnostic message with an optional source excerpt."""

    def __init__(self, msg, file, line, col) -> None:
        self.line = str(line)
        self.loc = gray(f"{file}:{line}:{col}:")
        self.msg = str(msg)
        self.fmt_lines: list[str] = []
        self.display_location = True

    def _gutter(self) -> str:
        return f"  {self.line} | "

    def deactivate_location_display(self) -> None:
        """Leave the file location out of the rendered text."""
        self.display_location = False

    def set_code_line(self, line: str) -> None:
        """Add the offending source line."""
        self.fmt_lines.append(f"{blue(self._gutter())} {line}")

    def add_where(self, msg, col: int, size: int) -> None:
        """Add a caret marker of ``size`` characters at column ``col``."""
        offset = len(self._gutter())
        self.fmt_lines.append(
            f"{pad_to_len('', offset + col)}{red('^' * size)} {gray(str(msg))}"
        )

    @staticmethod
    def _head() -> str:
        return red(bold("error:"))

    def print(self) -> None:
        """Write the diagnostic, always with its location, to stderr."""
        print(f"{self.loc} {self._head()} {gray(self.msg)}", file=sys.stderr)
        for line in self.fmt_lines:
            print(line, file=sys.stderr)

    def __str__(self) -> str:
        if self.display_location:
            head = f"{self.loc} {self._head()} {gray(self.msg)}\n"
        else:
            head = f"{self._head()} {gray(self.msg)}\n"
        return head + "".join(f"{line}\n" for line in self.fmt_lines)