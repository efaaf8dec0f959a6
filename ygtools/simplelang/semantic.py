"""Semantic checks of parsed programs of the small example language."""

from __future__ import annotations

from typing import Optional, Sequence

from ygtools.simplelang.ast import (
    BinaryExpr,
    CallExpr,
    Expr,
    ExprStmt,
    FnStmt,
    IntLiteral,
    Operator,
    RetStmt,
    Statement,
    StringLiteral,
    TypeMetadata,
    VarExpr,
)
from ygtools.simplelang.diagnostics import report_error, report_warning

_Vars = dict[str, Optional[TypeMetadata]]


class Semantic:
    """Checks functions, variables and calls, reporting problems to stderr."""

    def __init__(self, stmts: Sequence[Statement]) -> None:
        self._stmts: list[Statement] = list(stmts)
        self.funcs: dict[str, tuple[list[Expr], bool]] = {}
        self._in_binary = False
        self._error = False

    def _err(self, message: str) -> None:
        self._error = True
        report_error(message)

    def analyze(self) -> None:
        """Register every function, then check each one."""
        for stmt in self._stmts:
            if isinstance(stmt, FnStmt):
                self._add_func(stmt)
            else:
                self._err(f"expected function statement found {stmt!r}")

        stmts, self._stmts = self._stmts, []
        for stmt in stmts:
            if isinstance(stmt, FnStmt):
                self._analyze_func(stmt)
            else:
                self._err(f"expected function statement found {stmt!r}")

    def had_errors(self) -> bool:
        """Whether any error was reported."""
        return self._error

    def _add_func(self, func: FnStmt) -> None:
        if func.name in self.funcs:
            self._err(f"func {func.name} defined twice")
            return
        if func.imported and func.body:
            self._err(
                f"imported functions aren't allowed to have a body but {func.name} has"
            )
            return
        if func.dynamic_args and not func.imported:
            self._err(
                "only imported functions are allowed to have a variable amount of "
                f"arguments. But func {func.name} has"
            )
            return

        args: list[Expr] = []
        for arg in func.args:
            if not isinstance(arg, VarExpr):
                self._err("expected variables as function args not terms/calls")
                return
            args.append(arg)

        self.funcs[func.name] = (args, func.dynamic_args if func.imported else False)

    def _analyze_func(self, func: FnStmt) -> None:
        variables: _Vars = {}
        for arg in func.args:
            if not isinstance(arg, VarExpr):
                self._err("expected variables as function args not terms/calls")
                return
            variables[arg.name] = arg.ty

        returned = func.imported
        for stmt in func.body:
            if returned:
                report_warning("unreachable code after return statemant")
            if isinstance(stmt, RetStmt):
                returned = True
            self._analyze_stmt(stmt, variables)

        if not returned and func.ret is not TypeMetadata.VOID:
            self._err(
                f'function "{func.name}" needs to return {func.ret} but found nothing'
            )

    def _analyze_stmt(self, stmt: Statement, variables: _Vars) -> None:
        if isinstance(stmt, ExprStmt):
            self._analyze_expr(stmt.expr, variables)
        elif isinstance(stmt, RetStmt):
            if stmt.var is not None:
                self._analyze_expr(stmt.var, variables)
        else:
            self._err("inner functions aren't allowed ")

    def _analyze_expr(self, expr: Expr, variables: _Vars) -> None:
        if isinstance(expr, VarExpr):
            if expr.name not in variables:
                self._err(f"unknown variable: {expr.name}")
        elif isinstance(expr, IntLiteral):
            pass
        elif isinstance(expr, BinaryExpr):
            self._analyze_bin(expr, variables)
        elif isinstance(expr, CallExpr):
            self._analyze_call(expr, variables)
        elif isinstance(expr, StringLiteral):
            if self._in_binary:
                self._err(f'unexpected string: "{expr.value}"')

    def _analyze_bin(self, bin_expr: BinaryExpr, variables: _Vars) -> None:
        self._in_binary = True

        left, right = bin_expr.left, bin_expr.right
        if left is None:
            self._err("expected lhs found nothing")
            return
        if right is None:
            self._err("expected rhs found nothing")
            return

        if bin_expr.op is Operator.ASSIGN:
            self._in_binary = False
            if not isinstance(left, VarExpr):
                raise TypeError("the target of an assignment must be a variable")
            if left.name not in variables and left.ty is None:
                self._err("you can't declare a variable without a type")
                return
            variables[left.name] = left.ty
            self._analyze_expr(right, variables)
            return

        self._analyze_expr(left, variables)
        self._analyze_expr(right, variables)
        self._in_binary = False

    def _analyze_call(self, call: CallExpr, variables: _Vars) -> None:
        if call.name not in self.funcs:
            self._err(f'unknown function "{call.name}"')
            return

        params, dynamic = self.funcs[call.name]
        expected, given = len(params), len(call.args)

        if expected != given and not dynamic:
            self._err(f"expected {expected} argument(s) found {given}")
            return
        if expected > given:
            self._err(
                f"too few arguments were supplyed (expected {expected} found {given})"
            )
            return

        for arg in call.args:
            self._analyze_expr(arg, variables)