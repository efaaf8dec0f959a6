"""Debug-information records: locations, variables and a per-file registry."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import PurePath
from typing import Union


class Lang(IntEnum):
    """DWARF source-language codes."""

    C89 = 0x0001
    C = 0x0002
    ADA83 = 0x0003
    CPP = 0x0004
    COBOL74 = 0x0005
    COBOL85 = 0x0006
    FORTRAN90 = 0x0008
    PASCAL83 = 0x0009
    MODULA2 = 0x000A
    JAVA = 0x000B
    C99 = 0x000C
    ADA95 = 0x000D
    FORTRAN95 = 0x000E
    PLI = 0x000F
    OBJC = 0x0010
    OBJ_CPP = 0x0011
    UPC = 0x0012
    D = 0x0013
    PYTHON = 0x0014
    OPENCL = 0x0015
    GO = 0x0016
    HASKELL = 0x0018
    CPP03 = 0x0019
    CPP11 = 0x001A
    OCAML = 0x001B
    RUST = 0x001C
    C11 = 0x001D
    SWIFT = 0x001E
    JULIA = 0x001F
    DYLAN = 0x0020
    CPP14 = 0x0021
    FORTRAN03 = 0x0022
    FORTRAN08 = 0x0023
    RENDER_SCRIPT = 0x0024
    BLISS = 0x0025
    KOTLIN = 0x0026
    ZIG = 0x0027
    CRYSTAL = 0x0028
    CPP20 = 0x002B
    C17 = 0x002C
    FORTRAN18 = 0x002D
    ADA2005 = 0x002E
    ADA2012 = 0x002F
    LO_USER = 0x8000
    MIPS_ASM = 0x8001
    GOOGLE_RENDER_SCRIPT = 0x8E57
    SUN_ASM = 0x9001
    ALTIUM_ASM = 0x9101
    BORLAND_DELPHI = 0xB000
    HI_USER = 0xFFFF


@dataclass(frozen=True)
class DebugLocation:
    """A source position tied to an address in the generated code."""

    line: int
    col: int
    epilog: bool
    prolog: bool
    adr: int


@dataclass(frozen=True)
class DebugVariable:
    """A variable to emit debug information for."""

    name: str


def _split_path(infile: Union[str, PathLike]) -> tuple[str, str]:
    path = PurePath(infile)
    parent = path.parent
    directory = "" if parent == path or str(parent) == "." else str(parent)
    name = "" if path.name in ("", "..") else path.name
    return directory, name


@dataclass
class DebugRegistry:
    """Per-file debug information: locations and variables by symbol."""

    producer: str
    lang: Lang
    infile: InitVar[Union[str, PathLike]]
    file: str = field(init=False)
    dir: str = field(init=False)
    locs: dict[str, list[DebugLocation]] = field(init=False, default_factory=dict)
    vars: dict[str, list[DebugVariable]] = field(init=False, default_factory=dict)
    _current_id: int = field(init=False, default=0, repr=False)

    def __post_init__(self, infile: Union[str, PathLike]) -> None:
        self.dir, self.file = _split_path(infile)

    def add_location(self, symbol: str, location: DebugLocation) -> None:
        """Append a debug location for ``symbol``."""
        self.locs.setdefault(symbol, []).append(location)