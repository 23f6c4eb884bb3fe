"""AST package for Sprig.

Provide the node model, the visitor protocol, a debugging printer and the
transformer that builds nodes from Lark parse trees.
"""

from sprig.ast.nodes import (
    Assign,
    AstNode,
    Binary,
    BlockStmt,
    BreakStmt,
    Call,
    ClassStmt,
    ContinueStmt,
    Expr,
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
    Stmt,
    Super,
    This,
    Unary,
    Var,
    VarStmt,
    WhileStmt,
)
from sprig.ast.printer import AstPrinter
from sprig.ast.transformer import AstTransformer, transform
from sprig.ast.visitor import ExpressionVisitor, NodeWalker, StatementVisitor

__all__ = [
    "Assign",
    "AstNode",
    "AstPrinter",
    "AstTransformer",
    "Binary",
    "BlockStmt",
    "BreakStmt",
    "Call",
    "ClassStmt",
    "ContinueStmt",
    "Expr",
    "ExpressionStmt",
    "ExpressionVisitor",
    "ForStmt",
    "FunctionStmt",
    "Get",
    "Grouping",
    "IfStmt",
    "Literal",
    "Logical",
    "NodeWalker",
    "PrintStmt",
    "Program",
    "ReturnStmt",
    "Set",
    "StatementVisitor",
    "Stmt",
    "Super",
    "This",
    "Unary",
    "Var",
    "VarStmt",
    "WhileStmt",
    "transform",
]
