"""AST transformer for Sprig.

Transform Lark parse trees into the typed AST node model.
"""

# mypy: disable-error-code="type-arg"
# Note: Lark transformers receive heterogeneous children, so callbacks are
# typed loosely and narrowed by position.

from typing import Any

from lark import Token as LarkToken
from lark import Transformer, Tree, v_args

from sprig.ast.nodes import (
    Assign,
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
from sprig.errors.codes import ErrorCode, format_error_message
from sprig.errors.exceptions import ParseError
from sprig.lexer.tokens import Token
from sprig.log import get_logger

logger = get_logger(__name__)


def _token(item: LarkToken | None) -> Token | None:
    """Return the scanner token carried by a Lark token."""
    if item is None:
        return None
    return item.value


def _nodes(items: tuple[Any, ...]) -> tuple[Any, ...]:
    """Drop punctuation tokens, keeping the transformed child nodes."""
    return tuple(item for item in items if not isinstance(item, LarkToken))


@v_args(inline=True)
class AstTransformer(Transformer):
    """Transform Lark parse tree to AST nodes."""

    # =========================================================================
    # Declarations
    # =========================================================================

    def start(self, *declarations: Stmt) -> Program:
        return Program(statements=tuple(declarations))

    def class_decl(
        self,
        _class: LarkToken,
        name: LarkToken,
        _extends: LarkToken | None,
        superclass: LarkToken | None,
        *body: Any,
    ) -> ClassStmt:
        # body is LEFT_BRACE, methods..., RIGHT_BRACE
        superclass_token = _token(superclass)
        return ClassStmt(
            name=_token(name),
            superclass=Var(superclass_token) if superclass_token else None,
            methods=_nodes(body),
        )

    def fun_decl(
        self,
        _def: LarkToken,
        name: LarkToken,
        _lparen: LarkToken,
        params: tuple[Token, ...] | None,
        _rparen: LarkToken,
        body: BlockStmt,
    ) -> FunctionStmt:
        return FunctionStmt(
            name=_token(name),
            params=params or (),
            body=body.statements,
        )

    def parameters(self, *items: LarkToken) -> tuple[Token, ...]:
        return tuple(item.value for item in items if item.type == "IDENTIFIER")

    def var_decl(
        self,
        _var: LarkToken,
        name: LarkToken,
        _colon: LarkToken | None,
        type_name: LarkToken | None,
        _equal: LarkToken | None,
        initializer: Expr | None,
        _semicolon: LarkToken,
    ) -> VarStmt:
        return VarStmt(
            name=_token(name),
            type_name=_token(type_name),
            initializer=initializer,
        )

    # =========================================================================
    # Statements
    # =========================================================================

    def expr_stmt(self, expression: Expr, _semicolon: LarkToken) -> ExpressionStmt:
        return ExpressionStmt(expression)

    def print_stmt(
        self,
        keyword: LarkToken,
        expression: Expr,
        _semicolon: LarkToken,
    ) -> PrintStmt:
        return PrintStmt(keyword=_token(keyword), expression=expression)

    def if_stmt(  # noqa: PLR0913
        self,
        _if: LarkToken,
        _lparen: LarkToken,
        condition: Expr,
        _rparen: LarkToken,
        then_branch: Stmt,
        _else: LarkToken | None,
        else_branch: Stmt | None,
    ) -> IfStmt:
        return IfStmt(
            condition=condition,
            then_branch=then_branch,
            else_branch=else_branch,
        )

    def while_stmt(
        self,
        _while: LarkToken,
        _lparen: LarkToken,
        condition: Expr,
        _rparen: LarkToken,
        body: Stmt,
    ) -> WhileStmt:
        return WhileStmt(condition=condition, body=body)

    def for_stmt(  # noqa: PLR0913
        self,
        _for: LarkToken,
        _lparen: LarkToken,
        initializer: VarStmt | ExpressionStmt | None,
        condition: Expr | None,
        _semicolon: LarkToken,
        increment: Expr | None,
        _rparen: LarkToken,
        body: Stmt,
    ) -> ForStmt:
        return ForStmt(
            initializer=initializer,
            condition=condition,
            increment=increment,
            body=body,
        )

    def empty_init(self, _semicolon: LarkToken) -> None:
        return None

    def break_stmt(self, keyword: LarkToken, _semicolon: LarkToken) -> BreakStmt:
        return BreakStmt(_token(keyword))

    def continue_stmt(
        self,
        keyword: LarkToken,
        _semicolon: LarkToken,
    ) -> ContinueStmt:
        return ContinueStmt(_token(keyword))

    def return_stmt(
        self,
        keyword: LarkToken,
        value: Expr | None,
        _semicolon: LarkToken,
    ) -> ReturnStmt:
        return ReturnStmt(keyword=_token(keyword), value=value)

    def block(self, *items: Any) -> BlockStmt:
        return BlockStmt(statements=_nodes(items))

    # =========================================================================
    # Expressions
    # =========================================================================

    def assign(self, target: Expr, equal: LarkToken, value: Expr) -> Assign | Set:
        if isinstance(target, Var):
            return Assign(name=target.name, value=value)
        if isinstance(target, Get):
            return Set(object=target.object, name=target.name, value=value)

        token = _token(equal)
        raise ParseError(
            format_error_message(ErrorCode.E0102),
            line=token.line,
            column=token.column,
            help_text="only variables and properties can be assigned to",
            code=ErrorCode.E0102,
        )

    def logical(self, left: Expr, operator: LarkToken, right: Expr) -> Logical:
        return Logical(left=left, operator=_token(operator), right=right)

    def binary(self, left: Expr, operator: LarkToken, right: Expr) -> Binary:
        return Binary(left=left, operator=_token(operator), right=right)

    def unary_op(self, operator: LarkToken, right: Expr) -> Unary:
        return Unary(operator=_token(operator), right=right)

    def call_expr(
        self,
        callee: Expr,
        _lparen: LarkToken,
        arguments: tuple[Expr, ...] | None,
        rparen: LarkToken,
    ) -> Call:
        return Call(callee=callee, paren=_token(rparen), arguments=arguments or ())

    def get_expr(self, obj: Expr, _dot: LarkToken, name: LarkToken) -> Get:
        return Get(object=obj, name=_token(name))

    def arguments(self, *items: Any) -> tuple[Expr, ...]:
        return _nodes(items)

    def literal(self, token: LarkToken) -> Literal:
        return Literal(_token(token).literal)

    def this_expr(self, keyword: LarkToken) -> This:
        return This(_token(keyword))

    def variable(self, name: LarkToken) -> Var:
        return Var(_token(name))

    def grouping(
        self,
        _lparen: LarkToken,
        expression: Expr,
        _rparen: LarkToken,
    ) -> Grouping:
        return Grouping(expression)

    def super_expr(
        self,
        keyword: LarkToken,
        _dot: LarkToken,
        method: LarkToken,
    ) -> Super:
        return Super(keyword=_token(keyword), method=_token(method))

    def new_expr(
        self,
        _new: LarkToken,
        name: LarkToken,
        _lparen: LarkToken,
        arguments: tuple[Expr, ...] | None,
        rparen: LarkToken,
    ) -> Call:
        return Call(
            callee=Var(_token(name)),
            paren=_token(rparen),
            arguments=arguments or (),
        )


def transform(tree: Tree) -> Program:
    """Transform a Lark parse tree into a Program node.

    Args:
        tree: Parse tree produced by the Sprig grammar.

    Returns:
        The Program root node.

    """
    program = AstTransformer().transform(tree)
    logger.debug("Built program with %d top-level statements", len(program.statements))
    return program
