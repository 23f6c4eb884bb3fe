"""Tests for the Sprig AST node model, visitor protocol and printer."""

import pytest

from sprig.ast import (
    Assign,
    AstPrinter,
    Binary,
    BlockStmt,
    BreakStmt,
    Call,
    ClassStmt,
    ContinueStmt,
    ExpressionStmt,
    ExpressionVisitor,
    ForStmt,
    FunctionStmt,
    Get,
    Grouping,
    IfStmt,
    Literal,
    Logical,
    NodeWalker,
    PrintStmt,
    Program,
    ReturnStmt,
    Set,
    StatementVisitor,
    Super,
    This,
    Unary,
    Var,
    VarStmt,
    WhileStmt,
)
from sprig.lexer import Token, TokenKind


def tok(kind: TokenKind, lexeme: str, line: int = 1, column: int = 1) -> Token:
    """Build a token for hand-made trees."""
    return Token(kind, lexeme, None, line, column)


def ident(name: str) -> Token:
    return tok(TokenKind.IDENTIFIER, name)


def var(name: str) -> Var:
    return Var(ident(name))


PLUS = tok(TokenKind.PLUS, "+")
STAR = tok(TokenKind.STAR, "*")
PAREN = tok(TokenKind.RIGHT_PAREN, ")")


ALL_EXPRESSIONS = [
    (Assign(ident("x"), Literal(1.0)), "assign"),
    (Binary(Literal(1.0), PLUS, Literal(2.0)), "binary"),
    (Call(var("f"), PAREN), "call"),
    (Get(var("p"), ident("x")), "get"),
    (Grouping(Literal(1.0)), "grouping"),
    (Literal(None), "literal"),
    (Logical(var("a"), tok(TokenKind.AND, "and"), var("b")), "logical"),
    (Set(var("p"), ident("x"), Literal(1.0)), "set"),
    (Super(tok(TokenKind.SUPER, "super"), ident("init")), "super"),
    (This(tok(TokenKind.THIS, "this")), "this"),
    (Unary(tok(TokenKind.MINUS, "-"), Literal(1.0)), "unary"),
    (var("x"), "var"),
]

ALL_STATEMENTS = [
    (ExpressionStmt(var("x")), "expression"),
    (PrintStmt(tok(TokenKind.PRINT, "print"), var("x")), "print"),
    (VarStmt(ident("x")), "var"),
    (BlockStmt(), "block"),
    (IfStmt(var("c"), BlockStmt()), "if"),
    (WhileStmt(var("c"), BlockStmt()), "while"),
    (ForStmt(None, None, None, BlockStmt()), "for"),
    (BreakStmt(tok(TokenKind.BREAK, "break")), "break"),
    (ContinueStmt(tok(TokenKind.CONTINUE, "continue")), "continue"),
    (ReturnStmt(tok(TokenKind.RETURN, "return")), "return"),
    (FunctionStmt(ident("f"), (), ()), "function"),
    (ClassStmt(ident("C"), None), "class"),
]


class RecordingVisitor(ExpressionVisitor[str], StatementVisitor[str]):
    """Visitor returning the name of the method that was called."""

    def visit_assign_expr(self, expr: Assign) -> str:
        return "assign"

    def visit_binary_expr(self, expr: Binary) -> str:
        return "binary"

    def visit_call_expr(self, expr: Call) -> str:
        return "call"

    def visit_get_expr(self, expr: Get) -> str:
        return "get"

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return "grouping"

    def visit_literal_expr(self, expr: Literal) -> str:
        return "literal"

    def visit_logical_expr(self, expr: Logical) -> str:
        return "logical"

    def visit_set_expr(self, expr: Set) -> str:
        return "set"

    def visit_super_expr(self, expr: Super) -> str:
        return "super"

    def visit_this_expr(self, expr: This) -> str:
        return "this"

    def visit_unary_expr(self, expr: Unary) -> str:
        return "unary"

    def visit_var_expr(self, expr: Var) -> str:
        return "var"

    def visit_program(self, program: Program) -> str:
        return "program"

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> str:
        return "expression"

    def visit_print_stmt(self, stmt: PrintStmt) -> str:
        return "print"

    def visit_var_stmt(self, stmt: VarStmt) -> str:
        return "var"

    def visit_block_stmt(self, stmt: BlockStmt) -> str:
        return "block"

    def visit_if_stmt(self, stmt: IfStmt) -> str:
        return "if"

    def visit_while_stmt(self, stmt: WhileStmt) -> str:
        return "while"

    def visit_for_stmt(self, stmt: ForStmt) -> str:
        return "for"

    def visit_break_stmt(self, stmt: BreakStmt) -> str:
        return "break"

    def visit_continue_stmt(self, stmt: ContinueStmt) -> str:
        return "continue"

    def visit_return_stmt(self, stmt: ReturnStmt) -> str:
        return "return"

    def visit_function_stmt(self, stmt: FunctionStmt) -> str:
        return "function"

    def visit_class_stmt(self, stmt: ClassStmt) -> str:
        return "class"


# =============================================================================
# Dispatch Tests
# =============================================================================


class TestDispatch:
    """Test that accept calls the visitor method for the node's own type."""

    @pytest.mark.parametrize(("node", "expected"), ALL_EXPRESSIONS)
    def test_expression_dispatch(self, node: object, expected: str) -> None:
        """Every expression variant reaches its own visit method."""
        assert node.accept(RecordingVisitor()) == expected  # type: ignore[attr-defined]

    @pytest.mark.parametrize(("node", "expected"), ALL_STATEMENTS)
    def test_statement_dispatch(self, node: object, expected: str) -> None:
        """Every statement variant reaches its own visit method."""
        assert node.accept(RecordingVisitor()) == expected  # type: ignore[attr-defined]

    def test_program_dispatch(self) -> None:
        """The root node dispatches to visit_program."""
        assert Program().accept(RecordingVisitor()) == "program"

    def test_incomplete_visitor_cannot_be_created(self) -> None:
        """A visitor missing a variant method is rejected at construction."""

        class PartialVisitor(ExpressionVisitor[None]):
            def visit_var_expr(self, expr: Var) -> None:
                pass

        with pytest.raises(TypeError):
            PartialVisitor()  # type: ignore[abstract]


# =============================================================================
# Node Tests
# =============================================================================


class TestNodes:
    """Test node construction."""

    def test_nodes_are_immutable(self) -> None:
        """Nodes cannot be changed after creation."""
        node = Literal(1.0)
        with pytest.raises(AttributeError):
            node.value = 2.0  # type: ignore[misc]

    def test_optional_fields_default(self) -> None:
        """Optional children default to absent."""
        stmt = VarStmt(ident("x"))
        assert stmt.type_name is None
        assert stmt.initializer is None
        assert IfStmt(var("c"), BlockStmt()).else_branch is None
        assert ReturnStmt(tok(TokenKind.RETURN, "return")).value is None
        assert Call(var("f"), PAREN).arguments == ()

    def test_structural_equality(self) -> None:
        """Nodes built from equal parts are equal."""
        assert Binary(Literal(1.0), PLUS, Literal(2.0)) == Binary(
            Literal(1.0),
            PLUS,
            Literal(2.0),
        )


# =============================================================================
# NodeWalker Tests
# =============================================================================


class VarCollector(NodeWalker):
    """Collect variable reference names in visit order."""

    def __init__(self) -> None:
        self.names: list[str] = []

    def visit_var_expr(self, expr: Var) -> None:
        self.names.append(expr.name.lexeme)


class TestNodeWalker:
    """Test the default structural traversal."""

    def test_walks_every_child_in_order(self) -> None:
        """References are reached through every kind of parent."""
        program = Program(
            (
                VarStmt(ident("x"), initializer=var("a")),
                IfStmt(var("b"), ExpressionStmt(var("c")), PrintStmt(
                    tok(TokenKind.PRINT, "print"),
                    var("d"),
                )),
                WhileStmt(var("e"), BlockStmt((ExpressionStmt(var("f")),))),
                ForStmt(
                    ExpressionStmt(var("g")),
                    var("h"),
                    var("i"),
                    ExpressionStmt(var("j")),
                ),
                ExpressionStmt(
                    Call(
                        Get(var("k"), ident("m")),
                        PAREN,
                        (Binary(var("l"), PLUS, Unary(STAR, var("n"))),),
                    ),
                ),
                ExpressionStmt(Set(var("o"), ident("p"), Grouping(var("q")))),
                ExpressionStmt(Logical(var("r"), tok(TokenKind.OR, "or"), var("s"))),
                FunctionStmt(
                    ident("fn"),
                    (),
                    (ReturnStmt(tok(TokenKind.RETURN, "return"), var("t")),),
                ),
                ClassStmt(
                    ident("C"),
                    var("u"),
                    (FunctionStmt(ident("m"), (), (ExpressionStmt(var("v")),)),),
                ),
                ExpressionStmt(Assign(ident("w"), var("y"))),
            ),
        )
        collector = VarCollector()
        collector.visit(program)
        assert collector.names == list("abcdefghijklnoqrstuvy")

    def test_absent_children_are_skipped(self) -> None:
        """None children are not visited."""
        collector = VarCollector()
        collector.visit(ForStmt(None, None, None, BlockStmt()))
        collector.visit(None)
        assert collector.names == []


# =============================================================================
# Printer Tests
# =============================================================================


class TestAstPrinter:
    """Test the parenthesised prefix printer."""

    def test_binary(self) -> None:
        """Operators print before their operands."""
        expr = Binary(Literal(1.0), PLUS, Binary(Literal(2.0), STAR, var("x")))
        assert AstPrinter().print(expr) == "(+ 1.0 (* 2.0 x))"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, "null"), (True, "true"), (False, "false"), ("hi", '"hi"'), (2.5, "2.5")],
    )
    def test_literals(self, value: object, expected: str) -> None:
        """Literals print in source spelling."""
        assert AstPrinter().print(Literal(value)) == expected  # type: ignore[arg-type]

    def test_typed_var(self) -> None:
        """Type annotations print after the name."""
        stmt = VarStmt(ident("count"), tok(TokenKind.IDENTIFIER, "INTEGER"), Literal(0.0))
        assert AstPrinter().print(stmt) == "(var count: INTEGER 0.0)"

    def test_empty_for_clauses(self) -> None:
        """Missing for clauses print as underscores."""
        stmt = ForStmt(None, None, None, BlockStmt())
        assert AstPrinter().print(stmt) == "(for _ _ _ (block))"

    def test_class_with_superclass(self) -> None:
        """The superclass follows a '<'."""
        stmt = ClassStmt(
            ident("Point"),
            var("Base"),
            (FunctionStmt(ident("init"), (ident("x"),), ()),),
        )
        assert AstPrinter().print(stmt) == "(class Point < Base (def init (x)))"

    def test_program(self) -> None:
        """Programs wrap their statements."""
        program = Program((
            ExpressionStmt(Set(var("p"), ident("x"), Literal(1.0))),
            BreakStmt(tok(TokenKind.BREAK, "break")),
        ))
        assert AstPrinter().print(program) == "(program (; (=. p x 1.0)) (break))"
