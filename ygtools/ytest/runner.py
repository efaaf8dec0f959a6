"""Runs a test-case file: writes its inputs, runs its commands, checks results."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from ygtools.cli import Cli
from ygtools.color import bold, red
from ygtools.ytest.parse import parse

INPUT_PATH = "./tmp.yl"
INPUT2_PATH = "./tmp2.c"

_WINDOWS = os.name == "nt"

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "/": "/",
}

_ESCAPE_RE = re.compile(
    r"\\(?:u\{([0-9a-fA-F]{1,6})\}|u([0-9a-fA-F]{4})|(.?))", re.DOTALL
)


def _unescape(text: str) -> str:
    def replace(match: re.Match) -> str:
        code = match.group(1) or match.group(2)
        if code:
            return chr(int(code, 16))
        char = match.group(3)
        try:
            return _ESCAPES[char]
        except KeyError:
            raise ValueError(f"invalid escape sequence: '\\{char}'") from None

    return _ESCAPE_RE.sub(replace, text)


def _strip_ws(text: str) -> str:
    return "".join(ch for ch in text if not ch.isspace())


@dataclass(frozen=True)
class CommandResult:
    """Output of one command, with all whitespace removed from the streams."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def exit_code(self) -> Optional[int]:
        """The exit code, or None if the process was ended by a signal."""
        if not _WINDOWS and self.returncode < 0:
            return None
        return self.returncode

    @property
    def success(self) -> bool:
        return self.returncode == 0


def expand_command(cmd: str, input_path: str, input2_path: str) -> str:
    """Substitute ``%s``/``%c`` with the input paths, unescape and trim."""
    args = cmd.replace("%s", input_path).replace("%c", input2_path)
    if _WINDOWS:
        args = args.replace("./", "")
    return _unescape(args).strip()


def run_commands(
    commands: Iterable[str], input_path: str, input2_path: str
) -> Iterator[CommandResult]:
    """Run each command through the system shell, yielding its result."""
    shell = ["cmd", "/C"] if _WINDOWS else ["sh", "-c"]
    for cmd in commands:
        proc = subprocess.run(
            [*shell, expand_command(cmd, input_path, input2_path)],
            capture_output=True,
        )
        yield CommandResult(
            stdout=_strip_ws(proc.stdout.decode("utf-8")),
            stderr=_strip_ws(proc.stderr.decode("utf-8")),
            returncode=proc.returncode,
        )


def _error(message: str) -> None:
    print(f"{bold(red('Error'))}: {message}")


def _quoted(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _write_input(path: Path, content: Optional[str]) -> None:
    if path.exists():
        path.unlink(missing_ok=True)
    if content is None:
        return
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as err:
        _error(str(err))
        raise SystemExit(-1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the test case named by ``-t=<file>``; exits with -1 on failure."""
    cli = Cli("ytest", "The testing tool for the compiler toolchain", "1.0", "ygtools developers")
    cli.add_opt("h", "help", "Displays help")
    cli.add_opt("v", "version", "Displays the version")
    cli.add_opt("no-exit", "no-exit-on-error", "Ytest does not quite when an error occurs")
    cli.add_opt(
        "neg-exit",
        "exit-code-neg",
        "Ytest exits automaticly even with `no-exit` if the programm returned with code -1",
    )
    cli.add_arg("t", "test", "The file to the testcase", True)
    cli.scan(argv)

    keep_going = cli.opt("no-exit")

    def fail(message: str, *, always: bool = False) -> None:
        _error(message)
        if always or not keep_going:
            raise SystemExit(-1)

    test_file = cli.arg_val("t")
    try:
        text = Path(test_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        fail(str(err), always=True)

    parsed = parse(text)

    input_path = Path(INPUT_PATH)
    _write_input(input_path, parsed.input)
    _write_input(Path(INPUT2_PATH), parsed.input2)

    found = ""
    found_stderr = ""
    code = 0

    for result in run_commands(parsed.cmd, INPUT_PATH, INPUT2_PATH):
        found += result.stdout
        found_stderr += result.stderr
        exit_code = result.exit_code

        if parsed.ignore_fail:
            if exit_code is None:
                raise RuntimeError("expected exit code")
            code = exit_code & 0xFFFFFFFF
            continue

        if result.success:
            continue

        if exit_code is None:
            fail("the programm didn't exit sucessfull")
            continue

        code = exit_code & 0xFFFFFFFF
        message = f"the programm didn't exit sucessfull with code {exit_code}"
        if parsed.expected_code is None:
            fail(message, always=True)
        elif parsed.expected_code == 0:
            fail(message)

    input_path.unlink(missing_ok=True)

    if parsed.expected_out is not None and parsed.expected_out != found:
        _error("expected output didn't match actual output")
        print(f"found:    {_quoted(found)}")
        print(f"expected: {_quoted(parsed.expected_out)}")
        if not keep_going:
            raise SystemExit(-1)

    if parsed.expected_stderr is not None and parsed.expected_stderr != found_stderr:
        _error("expected stderr didn't match actual output")
        print(f"found:    {_quoted(found_stderr)}")
        print(f"expected: {_quoted(parsed.expected_stderr)}")
        if not keep_going:
            raise SystemExit(-1)

    if parsed.expected_code is not None:
        if parsed.expected_code & 0xFFFFFFFF != code:
            fail(f"expected exit code: {parsed.expected_code} found {code}")
        else:
            print(f"expected exit code {parsed.expected_code} matched with found one {code}")

    if parsed.ignore_fail and code == 0:
        fail("expect fail", always=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())