"""Visitor protocol for the Sprig AST.

Nodes call back into a visitor through ``accept`` (double dispatch), so new
passes over the tree can be added without touching the node classes. Both
visitor bases are abstract: a concrete pass has to implement a method for
every node variant before it can be instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from sprig.ast.nodes import (
        Assign,
        AstNode,
        Binary,
        BlockStmt,
        BreakStmt,
        Call,
        ClassStmt,
        ContinueStmt,
        ExpressionStmt,
        ForStmt,
        FunctionStmt,
        Get,
        Grouping,
        IfStmt,
        Literal,
        Logical,
        PrintStmt,
        Program,
        ReturnStmt,
        Set,
        Super,
        This,
        Unary,
        Var,
        VarStmt,
        WhileStmt,
    )

R = TypeVar("R")


class ExpressionVisitor(ABC, Generic[R]):
    """One method per expression variant."""

    @abstractmethod
    def visit_assign_expr(self, expr: Assign) -> R: ...

    @abstractmethod
    def visit_binary_expr(self, expr: Binary) -> R: ...

    @abstractmethod
    def visit_call_expr(self, expr: Call) -> R: ...

    @abstractmethod
    def visit_get_expr(self, expr: Get) -> R: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: Grouping) -> R: ...

    @abstractmethod
    def visit_literal_expr(self, expr: Literal) -> R: ...

    @abstractmethod
    def visit_logical_expr(self, expr: Logical) -> R: ...

    @abstractmethod
    def visit_set_expr(self, expr: Set) -> R: ...

    @abstractmethod
    def visit_super_expr(self, expr: Super) -> R: ...

    @abstractmethod
    def visit_this_expr(self, expr: This) -> R: ...

    @abstractmethod
    def visit_unary_expr(self, expr: Unary) -> R: ...

    @abstractmethod
    def visit_var_expr(self, expr: Var) -> R: ...


class StatementVisitor(ABC, Generic[R]):
    """One method per statement variant, plus the program root."""

    @abstractmethod
    def visit_program(self, program: Program) -> R: ...

    @abstractmethod
    def visit_expression_stmt(self, stmt: ExpressionStmt) -> R: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: PrintStmt) -> R: ...

    @abstractmethod
    def visit_var_stmt(self, stmt: VarStmt) -> R: ...

    @abstractmethod
    def visit_block_stmt(self, stmt: BlockStmt) -> R: ...

    @abstractmethod
    def visit_if_stmt(self, stmt: IfStmt) -> R: ...

    @abstractmethod
    def visit_while_stmt(self, stmt: WhileStmt) -> R: ...

    @abstractmethod
    def visit_for_stmt(self, stmt: ForStmt) -> R: ...

    @abstractmethod
    def visit_break_stmt(self, stmt: BreakStmt) -> R: ...

    @abstractmethod
    def visit_continue_stmt(self, stmt: ContinueStmt) -> R: ...

    @abstractmethod
    def visit_return_stmt(self, stmt: ReturnStmt) -> R: ...

    @abstractmethod
    def visit_function_stmt(self, stmt: FunctionStmt) -> R: ...

    @abstractmethod
    def visit_class_stmt(self, stmt: ClassStmt) -> R: ...


class NodeWalker(ExpressionVisitor[None], StatementVisitor[None]):
    """Visitor that walks every child node in source order.

    Passes interested in only a few node variants subclass this and
    override the corresponding methods, calling ``visit`` on the children
    they still want walked.
    """

    def visit(self, node: AstNode | None) -> None:
        """Dispatch to the method for ``node``; ``None`` is skipped."""
        if node is not None:
            node.accept(self)

    def visit_all(self, nodes: tuple[AstNode, ...]) -> None:
        """Visit each node in order."""
        for node in nodes:
            self.visit(node)

    # Expressions

    def visit_assign_expr(self, expr: Assign) -> None:
        self.visit(expr.value)

    def visit_binary_expr(self, expr: Binary) -> None:
        self.visit(expr.left)
        self.visit(expr.right)

    def visit_call_expr(self, expr: Call) -> None:
        self.visit(expr.callee)
        self.visit_all(expr.arguments)

    def visit_get_expr(self, expr: Get) -> None:
        self.visit(expr.object)

    def visit_grouping_expr(self, expr: Grouping) -> None:
        self.visit(expr.expression)

    def visit_literal_expr(self, expr: Literal) -> None:
        pass

    def visit_logical_expr(self, expr: Logical) -> None:
        self.visit(expr.left)
        self.visit(expr.right)

    def visit_set_expr(self, expr: Set) -> None:
        self.visit(expr.object)
        self.visit(expr.value)

    def visit_super_expr(self, expr: Super) -> None:
        pass

    def visit_this_expr(self, expr: This) -> None:
        pass

    def visit_unary_expr(self, expr: Unary) -> None:
        self.visit(expr.right)

    def visit_var_expr(self, expr: Var) -> None:
        pass

    # Statements

    def visit_program(self, program: Program) -> None:
        self.visit_all(program.statements)

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> None:
        self.visit(stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> None:
        self.visit(stmt.expression)

    def visit_var_stmt(self, stmt: VarStmt) -> None:
        self.visit(stmt.initializer)

    def visit_block_stmt(self, stmt: BlockStmt) -> None:
        self.visit_all(stmt.statements)

    def visit_if_stmt(self, stmt: IfStmt) -> None:
        self.visit(stmt.condition)
        self.visit(stmt.then_branch)
        self.visit(stmt.else_branch)

    def visit_while_stmt(self, stmt: WhileStmt) -> None:
        self.visit(stmt.condition)
        self.visit(stmt.body)

    def visit_for_stmt(self, stmt: ForStmt) -> None:
        self.visit(stmt.initializer)
        self.visit(stmt.condition)
        self.visit(stmt.increment)
        self.visit(stmt.body)

    def visit_break_stmt(self, stmt: BreakStmt) -> None:
        pass

    def visit_continue_stmt(self, stmt: ContinueStmt) -> None:
        pass

    def visit_return_stmt(self, stmt: ReturnStmt) -> None:
        self.visit(stmt.value)

    def visit_function_stmt(self, stmt: FunctionStmt) -> None:
        self.visit_all(stmt.body)

    def visit_class_stmt(self, stmt: ClassStmt) -> None:
        self.visit(stmt.superclass)
        self.visit_all(stmt.methods)
