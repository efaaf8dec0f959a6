from ygtools.ycc.ast import (
    AstOperand,
    AstType,
    AstTypeMeta,
    BinaryExpr,
    BlockStmt,
    CharLiteral,
    ConstStmt,
    EnumStmt,
    FloatLiteral,
    FuncStmt,
    GlobalStmt,
    IntLiteral,
    ReturnStmt,
    StringLiteral,
    StructStmt,
    UnaryExpr,
    VarExpr,
    Visibility,
)


def test_literals_compare_by_value():
    assert IntLiteral(1) == IntLiteral(1)
    assert IntLiteral(1) != IntLiteral(2)
    assert FloatLiteral(1.5) == FloatLiteral(1.5)
    assert StringLiteral("a") == StringLiteral("a")
    assert CharLiteral("c") == CharLiteral("c")


def test_different_literal_kinds_differ():
    assert IntLiteral(1) != FloatLiteral(1.0)


def test_vars_never_equal_structurally():
    assert (VarExpr("a") == VarExpr("a")) is False


def test_binary_and_unary_not_structurally_equal():
    left = BinaryExpr(IntLiteral(1), AstOperand.ADD, IntLiteral(2))
    right = BinaryExpr(IntLiteral(1), AstOperand.ADD, IntLiteral(2))
    assert (left == right) is False
    assert (UnaryExpr(AstOperand.NOT, IntLiteral(0)) == UnaryExpr(AstOperand.NOT, IntLiteral(0))) is False


def test_return_statements_follow_expression_equality():
    assert ReturnStmt(IntLiteral(3)) == ReturnStmt(IntLiteral(3))
    assert (ReturnStmt(VarExpr("x")) == ReturnStmt(VarExpr("x"))) is False


def test_block_statement_equality():
    assert BlockStmt([ReturnStmt(IntLiteral(0))]) == BlockStmt([ReturnStmt(IntLiteral(0))])
    assert BlockStmt() == BlockStmt([])


def test_ast_type_defaults():
    ty = AstType(AstTypeMeta.INT)
    assert (ty.signed, ty.unsigned) == (False, False)
    assert ty == AstType(AstTypeMeta.INT, False, False)


def test_func_stmt_defaults_and_equality():
    ty = AstType(AstTypeMeta.INT, signed=True)
    func = FuncStmt("main", Visibility.PRIVATE, ty)
    assert func.args == []
    assert func.body == []
    assert func.only_ty_indector is False
    assert func == FuncStmt("main", Visibility.PRIVATE, AstType(AstTypeMeta.INT, True))


def test_top_level_statements_hold_fields():
    ty = AstType(AstTypeMeta.CHAR)
    assert GlobalStmt("g", Visibility.STATIC, ty).initializer is None
    const = ConstStmt("c", Visibility.EXTERN, ty, IntLiteral(4))
    assert const.initializer == IntLiteral(4)
    assert EnumStmt("E", [("A", None)]).values == [("A", None)]
    assert StructStmt("S", [("x", ty)]).fields[0] == ("x", ty)