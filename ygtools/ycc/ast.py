"""Syntax tree of the C front end."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union


class Visibility(Enum):
    PRIVATE = auto()
    EXTERN = auto()
    STATIC = auto()


class AstTypeMeta(Enum):
    VOID = auto()
    BOOL = auto()
    CHAR = auto()
    SHORT = auto()
    INT = auto()
    LONG = auto()
    FLOAT = auto()
    DOUBLE = auto()
    STRUCT = auto()
    ENUM = auto()


@dataclass
class AstType:
    """A C type with its signedness qualifiers."""

    meta: AstTypeMeta
    signed: bool = False
    unsigned: bool = False


class AstOperand(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    XOR = auto()
    OR = auto()
    AND = auto()
    SHL = auto()
    SHR = auto()
    OR_OR = auto()
    AND_AND = auto()
    NOT = auto()
    BITWISE_NOT = auto()


# Literals compare by value; compound expressions and variables compare
# by identity only, so two separately built ones are never equal.


@dataclass(frozen=True)
class IntLiteral:
    value: int


@dataclass(frozen=True)
class FloatLiteral:
    value: float


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class CharLiteral:
    value: str


@dataclass(eq=False)
class BinaryExpr:
    ls: "Expr"
    op: AstOperand
    rs: "Expr"


@dataclass(eq=False)
class UnaryExpr:
    op: AstOperand
    expr: "Expr"


@dataclass(eq=False)
class VarExpr:
    name: str


Expr = Union[BinaryExpr, UnaryExpr, IntLiteral, FloatLiteral, StringLiteral, CharLiteral, VarExpr]


@dataclass
class ReturnStmt:
    value: Expr


@dataclass
class BlockStmt:
    body: list["Stmt"] = field(default_factory=list)


Stmt = Union[ReturnStmt, BlockStmt]


@dataclass
class FuncStmt:
    """A function definition, or only its declaration."""

    name: str
    visibility: Visibility
    return_type: AstType
    args: list[tuple[str, AstType]] = field(default_factory=list)
    body: list[Stmt] = field(default_factory=list)
    only_ty_indector: bool = False


@dataclass
class GlobalStmt:
    name: str
    visibility: Visibility
    ty: AstType
    initializer: Optional[Expr] = None


@dataclass
class ConstStmt:
    name: str
    visibility: Visibility
    ty: AstType
    initializer: Expr


@dataclass
class EnumStmt:
    name: str
    values: list[tuple[str, Optional[Expr]]] = field(default_factory=list)


@dataclass
class StructStmt:
    name: str
    fields: list[tuple[str, AstType]] = field(default_factory=list)


TopLevelStmt = Union[FuncStmt, GlobalStmt, ConstStmt, EnumStmt, StructStmt]