"""AST node dataclasses for Sprig.

Define the closed set of expression and statement nodes. Each node is a
frozen dataclass that owns its children outright and exposes ``accept``,
which dispatches to the visitor method for its own type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from sprig.lexer.tokens import LiteralValue, Token

if TYPE_CHECKING:
    from sprig.ast.visitor import ExpressionVisitor, StatementVisitor

R = TypeVar("R")


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass(frozen=True)
class Assign:
    """Assignment to a variable (e.g., x = 1)."""

    name: Token
    value: Expr

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_assign_expr(self)


@dataclass(frozen=True)
class Binary:
    """Binary arithmetic or comparison (e.g., a + b, a <= b)."""

    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Call:
    """Call expression (e.g., f(1, 2), new Point(0, 0))."""

    callee: Expr
    paren: Token  # closing parenthesis, for runtime error positions
    arguments: tuple[Expr, ...] = ()

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_call_expr(self)


@dataclass(frozen=True)
class Get:
    """Property access (e.g., point.x)."""

    object: Expr
    name: Token

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_get_expr(self)


@dataclass(frozen=True)
class Grouping:
    """Parenthesised expression."""

    expression: Expr

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal:
    """Literal value (string, number, boolean, null)."""

    value: LiteralValue

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Logical:
    """Short-circuit logical operation (and, or)."""

    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_logical_expr(self)


@dataclass(frozen=True)
class Set:
    """Property assignment (e.g., point.x = 1)."""

    object: Expr
    name: Token
    value: Expr

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_set_expr(self)


@dataclass(frozen=True)
class Super:
    """Superclass method access (e.g., super.init)."""

    keyword: Token
    method: Token

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_super_expr(self)


@dataclass(frozen=True)
class This:
    """Reference to the current instance."""

    keyword: Token

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_this_expr(self)


@dataclass(frozen=True)
class Unary:
    """Prefix operation (e.g., !done, -x, ++i)."""

    operator: Token
    right: Expr

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Var:
    """Variable reference."""

    name: Token

    def accept(self, visitor: ExpressionVisitor[R]) -> R:
        return visitor.visit_var_expr(self)


Expr = (
    Assign
    | Binary
    | Call
    | Get
    | Grouping
    | Literal
    | Logical
    | Set
    | Super
    | This
    | Unary
    | Var
)
"""Any expression node."""


# =============================================================================
# Statement Nodes
# =============================================================================


@dataclass(frozen=True)
class ExpressionStmt:
    """Expression evaluated for its side effects."""

    expression: Expr

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class PrintStmt:
    """Print statement."""

    keyword: Token
    expression: Expr

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_print_stmt(self)


@dataclass(frozen=True)
class VarStmt:
    """Variable declaration (e.g., var total: REAL = 0;)."""

    name: Token
    type_name: Token | None = None
    initializer: Expr | None = None

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_var_stmt(self)


@dataclass(frozen=True)
class BlockStmt:
    """Braced list of statements."""

    statements: tuple[Stmt, ...] = ()

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_block_stmt(self)


@dataclass(frozen=True)
class IfStmt:
    """Conditional with optional else branch."""

    condition: Expr
    then_branch: Stmt
    else_branch: Stmt | None = None

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_if_stmt(self)


@dataclass(frozen=True)
class WhileStmt:
    """While loop."""

    condition: Expr
    body: Stmt

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_while_stmt(self)


@dataclass(frozen=True)
class ForStmt:
    """C-style for loop; every clause is optional."""

    initializer: VarStmt | ExpressionStmt | None
    condition: Expr | None
    increment: Expr | None
    body: Stmt

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_for_stmt(self)


@dataclass(frozen=True)
class BreakStmt:
    """Break out of the innermost loop."""

    keyword: Token

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_break_stmt(self)


@dataclass(frozen=True)
class ContinueStmt:
    """Skip to the next iteration of the innermost loop."""

    keyword: Token

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_continue_stmt(self)


@dataclass(frozen=True)
class ReturnStmt:
    """Return from a function, optionally with a value."""

    keyword: Token
    value: Expr | None = None

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_return_stmt(self)


@dataclass(frozen=True)
class FunctionStmt:
    """Function or method declaration (e.g., def area(w, h) { ... })."""

    name: Token
    params: tuple[Token, ...]
    body: tuple[Stmt, ...]

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_function_stmt(self)


@dataclass(frozen=True)
class ClassStmt:
    """Class declaration with optional superclass."""

    name: Token
    superclass: Var | None
    methods: tuple[FunctionStmt, ...] = ()

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_class_stmt(self)


@dataclass(frozen=True)
class Program:
    """Root node: the whole analyzed unit."""

    statements: tuple[Stmt, ...] = ()

    def accept(self, visitor: StatementVisitor[R]) -> R:
        return visitor.visit_program(self)


Stmt = (
    ExpressionStmt
    | PrintStmt
    | VarStmt
    | BlockStmt
    | IfStmt
    | WhileStmt
    | ForStmt
    | BreakStmt
    | ContinueStmt
    | ReturnStmt
    | FunctionStmt
    | ClassStmt
)
"""Any statement node."""

AstNode = Expr | Stmt | Program
"""Any node of the tree."""
