"""Syntax tree of the small example language."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union


class TypeMetadata(Enum):
    """Value types known to the language."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    PTR = "ptr"
    VOID = "Void"

    def __str__(self) -> str:
        return self.value


_TYPE_NAMES = {
    "u8": TypeMetadata.U8,
    "u16": TypeMetadata.U16,
    "u32": TypeMetadata.U32,
    "u64": TypeMetadata.U64,
    "i8": TypeMetadata.I8,
    "i16": TypeMetadata.I16,
    "i32": TypeMetadata.I32,
    "i64": TypeMetadata.I64,
    "f64": TypeMetadata.F64,
    "f32": TypeMetadata.F32,
    "string": TypeMetadata.PTR,
    "void": TypeMetadata.VOID,
}


def type_from_name(name: str) -> TypeMetadata:
    """Map a type name written in source to its type.

    Raises ValueError for an unknown name.
    """
    try:
        return _TYPE_NAMES[name]
    except KeyError:
        raise ValueError(f"unknown type: {name}") from None


class Operator(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    ASSIGN = auto()


@dataclass
class VarExpr:
    """A variable reference, optionally with a declared type."""

    name: str
    ty: Optional[TypeMetadata] = None


@dataclass
class BinaryExpr:
    """A binary operation; either side may be missing after a parse error."""

    op: Operator
    left: Optional["Expr"]
    right: Optional["Expr"]


@dataclass
class IntLiteral:
    value: int


@dataclass
class StringLiteral:
    value: str


@dataclass
class CallExpr:
    name: str
    args: list["Expr"] = field(default_factory=list)


Expr = Union[VarExpr, BinaryExpr, IntLiteral, StringLiteral, CallExpr]


@dataclass
class ExprStmt:
    expr: Expr


@dataclass
class RetStmt:
    var: Optional[Expr] = None


@dataclass
class FnStmt:
    """A function definition or an imported function declaration."""

    name: str
    body: list["Statement"] = field(default_factory=list)
    args: list[Expr] = field(default_factory=list)
    ret: TypeMetadata = TypeMetadata.VOID
    extrn: bool = False
    imported: bool = False
    dynamic_args: bool = False


Statement = Union[FnStmt, ExprStmt, RetStmt]