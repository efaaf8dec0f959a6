"""Diagnostics of the C front end with source locations."""

from __future__ import annotations

from dataclasses import dataclass

from ygtools.error import Error


@dataclass(frozen=True)
class ErrorLoc:
    """A zero-based line, a column and the length of the marked span."""

    line: int
    col: int
    length: int


@dataclass
class YccError:
    """An error with a headline and a message shown under the marked span."""

    loc: ErrorLoc
    head: str
    where_string: str

    def build(self, code: str, file_name: str) -> Error:
        """Build the formatted diagnostic for ``code`` read from ``file_name``."""
        err = Error(self.head, file_name, str(self.loc.line), str(self.loc.col))
        lines = code.split("\n")
        if 0 <= self.loc.line < len(lines):
            err.set_code_line(lines[self.loc.line])
        err.add_where(self.where_string, self.loc.col, self.loc.length)
        return err

    def print(self, code: str, file_name: str) -> None:
        """Write the diagnostic to stderr."""
        self.build(code, file_name).print()