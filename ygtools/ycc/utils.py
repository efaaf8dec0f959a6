"""File helpers for the C front end."""

from __future__ import annotations

from itertools import takewhile
from pathlib import Path
from typing import BinaryIO, Optional


def default_out_path(in_path: str) -> str:
    """The object-file name derived from an input path.

    The directory is dropped and the name is cut at the first dot-separated
    part equal to the last one.
    """
    file = in_path.split("/")[-1]
    slices = file.split(".")
    name = "".join(takewhile(lambda part: part != slices[-1], slices))
    return f"{name}.o"


def read_in_file(path: str) -> str:
    """Read a source file; on failure print the error and exit with -1."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        print(f"Error: {path} {err}")
        raise SystemExit(-1)


def out_file(in_path: str, out_path: Optional[str]) -> BinaryIO:
    """Open the output file for writing, truncating it.

    Without ``out_path`` the name comes from ``default_out_path``. On
    failure the error is printed and the process exits with -1.
    """
    path = out_path if out_path is not None else default_out_path(in_path)
    try:
        return open(path, "wb")
    except OSError as err:
        print(f"Error: {path} {err}")
        raise SystemExit(-1)