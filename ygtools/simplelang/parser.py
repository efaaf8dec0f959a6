"""Recursive-descent parser of the small example language."""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from typing import Iterable, Optional

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
    type_from_name,
)
from ygtools.simplelang.diagnostics import report_error, report_warning
from ygtools.simplelang.lexer import Token, TokenKind

_ASSIGN_KINDS = frozenset(
    {
        TokenKind.ASSIGN,
        TokenKind.ADD_EQUAL,
        TokenKind.SUB_EQUAL,
        TokenKind.MUL_EQUAL,
        TokenKind.DIV_EQUAL,
    }
)

_COMPOUND_OPS = {
    TokenKind.ADD_EQUAL: Operator.ADD,
    TokenKind.SUB_EQUAL: Operator.SUB,
    TokenKind.MUL_EQUAL: Operator.MUL,
    TokenKind.DIV_EQUAL: Operator.DIV,
}

_ADD_OPS = {TokenKind.ADD: Operator.ADD, TokenKind.SUB: Operator.SUB}
_MUL_OPS = {TokenKind.MUL: Operator.MUL, TokenKind.DIV: Operator.DIV}


class Parser:
    """Turns a token list into statements, reporting problems to stderr.

    Parsing stops at the first statement that cannot be parsed; the
    statements parsed so far are kept in ``out``.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: deque[Token] = deque(tokens)
        self.out: list[Statement] = []
        self._error = False

    # -- token helpers -------------------------------------------------

    def _front(self) -> Optional[Token]:
        return self._tokens[0] if self._tokens else None

    def _at(self, kind: TokenKind) -> bool:
        return bool(self._tokens) and self._tokens[0].kind is kind

    def _pop(self) -> Optional[Token]:
        return self._tokens.popleft() if self._tokens else None

    def _err(self, message: str) -> None:
        self._error = True
        report_error(message)

    def _remove_maybe_semicolon(self) -> None:
        while self._at(TokenKind.SEMICOLON):
            self._pop()

    def _type(self, name: str) -> Optional[TypeMetadata]:
        try:
            return type_from_name(name)
        except ValueError:
            self._err(f"unknown type: {name}")
            return None

    # -- public API ----------------------------------------------------

    def parse(self) -> None:
        """Parse statements until the tokens run out or one fails."""
        while True:
            self._remove_maybe_semicolon()
            stmt = self._parse_stmt()
            if stmt is None:
                break
            self.out.append(stmt)

    def had_errors(self) -> bool:
        """Whether any error was reported."""
        return self._error

    # -- statements ----------------------------------------------------

    def _parse_stmt(self) -> Optional[Statement]:
        tok = self._front()
        if tok is None:
            return None
        if tok.kind is TokenKind.IDENT:
            return self._parse_ident()
        if tok.kind in (TokenKind.FUNC, TokenKind.EXTERN, TokenKind.IMPORT):
            return self._parse_func()
        if tok.kind is TokenKind.RETURN:
            return self._parse_return()
        if tok.kind is TokenKind.VAR:
            expr = self._parse_assign()
            return None if expr is None else ExprStmt(expr)
        self._err(f"unexpected token: {tok!r}")
        return None

    def _parse_func(self) -> Optional[Statement]:
        extrn = False
        if self._at(TokenKind.EXTERN):
            extrn = True
            self._pop()

        imported = False
        if self._at(TokenKind.IMPORT):
            imported = True
            self._pop()

        if not self._at(TokenKind.FUNC):
            self._err(f"expected 'func' found: {self._front()!r}")
            return None
        self._pop()

        tok = self._front()
        if tok is None or tok.kind is not TokenKind.IDENT:
            self._err(f"expected identifer as the function name found {tok!r}")
            return None
        name = str(tok.value)
        self._pop()

        if not self._at(TokenKind.LPARAM):
            self._err(f"expected '(' found: {self._front()!r}")
            return None
        self._pop()

        args: list[Expr] = []
        dynamic_args = False
        while True:
            tok = self._front()
            if tok is None:
                return None
            if tok.kind is TokenKind.IDENT:
                var = self._parse_var()
                if var is None:
                    return None
                args.append(var)
            elif tok.kind is TokenKind.TRIPLE_DOT:
                dynamic_args = True
                self._pop()
            elif tok.kind is TokenKind.RPARAM:
                break
            else:
                return None

            if self._at(TokenKind.COMMA):
                if dynamic_args:
                    self._err(
                        "after a any arg indicator (...) no arguments are allowed to be there"
                    )
                    return None
                self._pop()

        self._pop()  # the )

        ret = TypeMetadata.VOID
        if self._at(TokenKind.RIGHT_ARROW):
            self._pop()
            tok = self._front()
            if tok is None or tok.kind is not TokenKind.IDENT:
                self._err(f"expected an identifier as the type found: {tok!r}")
                return None
            self._pop()
            parsed = self._type(str(tok.value))
            if parsed is None:
                return None
            ret = parsed

        if imported:
            return FnStmt(
                name=name,
                body=[],
                args=args,
                ret=ret,
                extrn=False,
                imported=True,
                dynamic_args=dynamic_args,
            )

        if not self._at(TokenKind.LCURLY):
            self._err(f"expected '{{' found: {self._front()!r}")
            return None
        self._pop()

        body: list[Statement] = []
        while not self._at(TokenKind.RCURLY):
            stmt = self._parse_stmt()
            if stmt is None:
                return None
            body.append(stmt)
        self._pop()  # the }

        return FnStmt(
            name=name,
            body=body,
            args=args,
            ret=ret,
            extrn=extrn,
            imported=False,
            dynamic_args=dynamic_args,
        )

    def _parse_var(self) -> Optional[VarExpr]:
        tok = self._front()
        if tok is None or tok.kind is not TokenKind.IDENT:
            return None
        name = str(tok.value)
        self._pop()

        ty: Optional[TypeMetadata] = None
        if self._at(TokenKind.DOUBLE_DOT):
            self._pop()
            tok = self._front()
            if tok is None or tok.kind is not TokenKind.IDENT:
                return None
            self._pop()
            ty = self._type(str(tok.value))
            if ty is None:
                return None

        return VarExpr(name, ty)

    def _parse_ident(self) -> Optional[Statement]:
        expr = self._parse_expr()
        if expr is None:
            self._err(f"unexpected ident {self._front()!r}")
            return None
        return ExprStmt(expr)

    def _parse_return(self) -> Optional[Statement]:
        self._pop()  # the return

        value: Optional[Expr] = self._parse_expr()
        if value is None:
            value = self._parse_var()

        if not self._at(TokenKind.SEMICOLON):
            report_warning(f"expected ';' found: {self._front()!r}")
            return None
        self._pop()

        return RetStmt(value)

    # -- expressions ---------------------------------------------------

    def _parse_expr(self) -> Optional[Expr]:
        left = self._parse_term()
        while (tok := self._front()) is not None and tok.kind in _ADD_OPS:
            op = _ADD_OPS[tok.kind]
            self._pop()
            right = self._parse_term()
            if left is None:
                self._err(
                    "expected left side expression before +, -, * or / found nothing"
                )
                return None
            if right is None:
                self._err(
                    "expected right side expression after +, -, * or / found nothing"
                )
                return None
            left = BinaryExpr(op, left, right)
        return left

    def _parse_term(self) -> Optional[Expr]:
        left = self._parse_factor()
        while (tok := self._front()) is not None and tok.kind in _MUL_OPS:
            op = _MUL_OPS[tok.kind]
            self._pop()
            right = self._parse_factor()
            left = BinaryExpr(op, left, right)
        return left

    def _parse_factor(self) -> Optional[Expr]:
        tok = self._front()
        if tok is None:
            return None

        result: Optional[Expr] = None
        pop = True

        if tok.kind is TokenKind.IDENT:
            result = VarExpr(str(tok.value))
            following = self._tokens[1].kind if len(self._tokens) > 1 else None
            if following in _ASSIGN_KINDS:
                assign = self._parse_assign()
                if assign is not None:
                    result = assign
                    pop = False
            elif following is TokenKind.LPARAM:
                call = self._parse_call()
                if call is not None:
                    result = call
                    pop = False
        elif tok.kind is TokenKind.NUMBER:
            result = IntLiteral(int(tok.value))
        elif tok.kind is TokenKind.LPARAM:
            self._pop()
            inner = self._parse_expr()
            result = inner if self._at(TokenKind.RPARAM) else None
        elif tok.kind is TokenKind.STRING:
            result = StringLiteral(str(tok.value))

        if result is not None and pop:
            self._pop()

        return result

    def _parse_call(self) -> Optional[Expr]:
        tok = self._front()
        if tok is None or tok.kind is not TokenKind.IDENT:
            return None
        name = str(tok.value)
        self._pop()

        if not self._at(TokenKind.LPARAM):
            self._err(f"expected '(' found: {self._front()!r}")
            return None
        self._pop()  # the (

        args: list[Expr] = []
        while not self._at(TokenKind.RPARAM):
            if self._at(TokenKind.COMMA):
                self._pop()
            arg = self._parse_expr()
            if arg is None:
                return None
            args.append(arg)

        self._pop()  # the )
        self._remove_maybe_semicolon()
        return CallExpr(name, args)

    def _parse_assign(self) -> Optional[Expr]:
        if self._at(TokenKind.VAR):
            self._pop()

        var = self._parse_var()
        if var is None:
            self._err("expected variable after var keyword")
            return None

        op_tok = self._pop()
        if op_tok is None:
            return None

        rhs = self._parse_expr()
        if rhs is None:
            self._err("expected right expression after var")
            return None

        if op_tok.kind is TokenKind.ASSIGN:
            right: Expr = rhs
        elif op_tok.kind in _COMPOUND_OPS:
            right = BinaryExpr(_COMPOUND_OPS[op_tok.kind], replace(var), rhs)
        else:
            self._err(
                f"expected either =, +=, -=, *= or /= found {self._front()!r}"
            )
            return None

        self._remove_maybe_semicolon()
        return BinaryExpr(Operator.ASSIGN, var, right)