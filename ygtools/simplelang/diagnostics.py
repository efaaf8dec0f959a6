"""Error and warning messages written to stderr."""

from __future__ import annotations

import sys

from ygtools.color import bold, red, yellow


def report_error(message: str) -> None:
    """Write an error message to stderr."""
    print(f"{bold(red('Error'))}: {message}", file=sys.stderr)


def report_warning(message: str) -> None:
    """Write a warning message to stderr."""
    print(f"{bold(yellow('Warning'))}: {message}", file=sys.stderr)