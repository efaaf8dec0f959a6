"""A small command-line parser for ``-opt`` flags and ``-arg=value`` pairs."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from ygtools.color import bold, red
from ygtools.pad import pad_to_len


@dataclass
class _CliOpt:
    short: str
    long: str
    desc: str
    seen: bool = False


@dataclass
class _CliArg:
    short: str
    long: str
    desc: str
    required: bool
    value: str = ""
    seen: bool = False


def _matches(token: str, short: str, long: str) -> bool:
    return token in (f"-{short}", f"--{long}")


class Cli:
    """Command-line parser with options and ``=``-separated arguments."""

    def __init__(self, name: str, desc: str, version: str, author: str) -> None:
        self.app_name = name
        self.app_desc = desc
        self.app_version = version
        self.app_author = author
        self._opts: list[_CliOpt] = []
        self._args: list[_CliArg] = []

    def add_opt(self, short: str, long: str, desc: str) -> None:
        """Register a flag such as ``-h`` / ``--help``."""
        self._opts.append(_CliOpt(short, long, desc))

    def add_arg(self, short: str, long: str, desc: str, required: bool) -> None:
        """Register an argument written as ``-name=value``."""
        self._args.append(_CliArg(short, long, desc, required))

    def version(self) -> str:
        """Print the name, version and author, and return that line."""
        line = f"{self.app_name} v{self.app_version} (c) {self.app_author}"
        print(line)
        return line

    def _program(self) -> str:
        if sys.argv and sys.argv[0]:
            return sys.argv[0]
        return self.app_name

    @staticmethod
    def _print_table(rows: list[tuple[str, str]]) -> None:
        longest = max((len(fmt) for fmt, _ in rows), default=0)
        for fmt, desc in rows:
            print(f"{bold(pad_to_len(fmt, longest))} {desc}")

    def help(self) -> None:
        """Print the version, description and a table of options and arguments."""
        self.version()
        print(self.app_desc)
        print()
        print(f"{bold('Usage:')} {self._program()} [OPTIONS] [ARGS]")
        print(bold("Options:"))
        self._print_table([(f"  -{o.short}, --{o.long}", o.desc) for o in self._opts])
        print()
        print(bold("Arguments:"))
        self._print_table(
            [(f"  -{a.short}=<val>, --{a.long}=<val>", a.desc) for a in self._args]
        )

    def _fail(self, message: str) -> None:
        print(f"{red(bold('ERROR:'))} {message}")
        self.help()
        raise SystemExit(-1)

    def scan(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse ``argv`` (default: the process arguments).

        Exits with code -1 on an unknown token or a missing required
        argument, and with 0 after printing help or the version.
        """
        if argv is None:
            argv = sys.argv[1:]

        for token in argv:
            handled = False
            if "=" in token:
                parts = token.split("=")
                key, value = parts[0], parts[1]
                for cliarg in self._args:
                    if _matches(key, cliarg.short, cliarg.long):
                        cliarg.seen = True
                        cliarg.value = value
                        handled = True
            else:
                for opt in self._opts:
                    if _matches(token, opt.short, opt.long):
                        opt.seen = True
                        handled = True

            if not handled:
                self._fail(f"unexpected arg/opt: '{token}'")

        for opt in self._opts:
            if opt.long == "help" and opt.seen:
                self.help()
                raise SystemExit(0)
            if opt.long == "version" and opt.seen:
                self.version()
                raise SystemExit(0)

        for cliarg in self._args:
            if cliarg.required and not cliarg.seen:
                self._fail(f"required argument: '-{cliarg.short}=<val>' wasn't given")

    def opt(self, name: str) -> bool:
        """Whether the option with this short or long name was given."""
        return any(name in (o.short, o.long) and o.seen for o in self._opts)

    def arg(self, name: str) -> bool:
        """Whether the argument with this short or long name was given."""
        return any(name in (a.short, a.long) and a.seen for a in self._args)

    def arg_val(self, name: str) -> Optional[str]:
        """The value of a given argument, or None if it was not given."""
        for cliarg in self._args:
            if name in (cliarg.short, cliarg.long) and cliarg.seen:
                return cliarg.value
        return None