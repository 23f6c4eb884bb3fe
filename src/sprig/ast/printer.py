"""Parenthesised prefix printer for the Sprig AST.

Render any node as a compact string, mostly for debugging and tests:
``(+ 1.0 (* 2.0 x))``, ``(var count: INTEGER 0.0)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprig.ast.visitor import ExpressionVisitor, StatementVisitor

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


def _format_literal(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


class AstPrinter(ExpressionVisitor[str], StatementVisitor[str]):
    """Render nodes as parenthesised prefix strings."""

    def print(self, node: AstNode) -> str:
        """Render a node and all of its children."""
        return node.accept(self)

    def _parenthesize(self, name: str, *parts: AstNode | str | None) -> str:
        rendered = [name]
        for part in parts:
            if part is None:
                continue
            rendered.append(part if isinstance(part, str) else part.accept(self))
        return f"({' '.join(rendered)})"

    def visit_assign_expr(self, expr: Assign) -> str:
        return self._parenthesize("=", expr.name.lexeme, expr.value)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_call_expr(self, expr: Call) -> str:
        return self._parenthesize("call", expr.callee, *expr.arguments)

    def visit_get_expr(self, expr: Get) -> str:
        return self._parenthesize(".", expr.object, expr.name.lexeme)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        return _format_literal(expr.value)

    def visit_logical_expr(self, expr: Logical) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_set_expr(self, expr: Set) -> str:
        return self._parenthesize("=.", expr.object, expr.name.lexeme, expr.value)

    def visit_super_expr(self, expr: Super) -> str:
        return self._parenthesize("super", expr.method.lexeme)

    def visit_this_expr(self, expr: This) -> str:
        return "this"

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_var_expr(self, expr: Var) -> str:
        return expr.name.lexeme

    def visit_program(self, program: Program) -> str:
        return self._parenthesize("program", *program.statements)

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> str:
        return self._parenthesize(";", stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> str:
        return self._parenthesize("print", stmt.expression)

    def visit_var_stmt(self, stmt: VarStmt) -> str:
        name = stmt.name.lexeme
        if stmt.type_name is not None:
            name = f"{name}: {stmt.type_name.lexeme}"
        return self._parenthesize("var", name, stmt.initializer)

    def visit_block_stmt(self, stmt: BlockStmt) -> str:
        return self._parenthesize("block", *stmt.statements)

    def visit_if_stmt(self, stmt: IfStmt) -> str:
        return self._parenthesize(
            "if",
            stmt.condition,
            stmt.then_branch,
            stmt.else_branch,
        )

    def visit_while_stmt(self, stmt: WhileStmt) -> str:
        return self._parenthesize("while", stmt.condition, stmt.body)

    def visit_for_stmt(self, stmt: ForStmt) -> str:
        clauses = [
            "_" if clause is None else clause.accept(self)
            for clause in (stmt.initializer, stmt.condition, stmt.increment)
        ]
        return self._parenthesize("for", *clauses, stmt.body)

    def visit_break_stmt(self, stmt: BreakStmt) -> str:
        return "(break)"

    def visit_continue_stmt(self, stmt: ContinueStmt) -> str:
        return "(continue)"

    def visit_return_stmt(self, stmt: ReturnStmt) -> str:
        return self._parenthesize("return", stmt.value)

    def visit_function_stmt(self, stmt: FunctionStmt) -> str:
        params = f"({' '.join(param.lexeme for param in stmt.params)})"
        return self._parenthesize("def", stmt.name.lexeme, params, *stmt.body)

    def visit_class_stmt(self, stmt: ClassStmt) -> str:
        name = stmt.name.lexeme
        if stmt.superclass is not None:
            name = f"{name} < {stmt.superclass.name.lexeme}"
        return self._parenthesize("class", name, *stmt.methods)
