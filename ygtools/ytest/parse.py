"""Parser for test-case files with ``# RUN:``, ``# STDOUT:`` and similar sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


@dataclass
class Parsed:
    """The contents of a test-case file."""

    cmd: list[str] = field(default_factory=list)
    input: Optional[str] = None
    input2: Optional[str] = None
    expected_out: Optional[str] = None
    expected_stderr: Optional[str] = None
    expected_code: Optional[int] = None
    ignore_fail: bool = False


class _Section(Enum):
    INPUT = auto()
    INPUT2 = auto()
    RUN = auto()
    EXPECTED_OUT = auto()


# Lines of a ``# STDERR:`` section are collected into the expected stdout.
_HEADERS = {
    "# RUN:": _Section.RUN,
    "# STDOUT:": _Section.EXPECTED_OUT,
    "# STDERR:": _Section.EXPECTED_OUT,
    "# IN2:": _Section.INPUT2,
    "# IN:": _Section.INPUT,
}


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _append(current: Optional[str], line: str) -> str:
    return (current or "") + line + "\n"


def parse(text: str) -> Parsed:
    """Parse a test-case file.

    Lines before any header belong to the input. Whitespace is removed
    from the expected output. Raises ValueError on a bad ``# EXIT_CODE=``.
    """
    out = Parsed()
    section = _Section.INPUT

    for raw in _lines(text):
        stripped = raw.strip()
        is_header = False

        for prefix, target in _HEADERS.items():
            if stripped.startswith(prefix):
                section = target
                is_header = True

        if stripped.startswith("# EXPECT_FAIL"):
            if section is not _Section.INPUT2:
                section = _Section.INPUT
            out.ignore_fail = True
            is_header = True

        if stripped.startswith("# EXIT_CODE="):
            out.expected_code = int(stripped.replace("# EXIT_CODE=", ""))
            is_header = True

        if is_header:
            continue

        line = raw.replace("    ", "\t")

        if section is _Section.RUN:
            if line:
                out.cmd.append(f"{line.strip()}\n")
        elif section is _Section.EXPECTED_OUT:
            out.expected_out = _append(out.expected_out, line)
        elif section is _Section.INPUT2:
            out.input2 = _append(out.input2, line)
        else:
            out.input = _append(out.input, line)

    if out.expected_out is not None:
        out.expected_out = "".join(ch for ch in out.expected_out if not ch.isspace())

    return out