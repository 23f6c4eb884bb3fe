"""Semantic analyzer for Sprig.

Walk a program in source order, binding declarations in a flat symbol
table and checking every variable use against it. The first violation
is raised; nothing is collected.
"""

from sprig.ast.nodes import (
    Assign,
    ClassStmt,
    FunctionStmt,
    Program,
    Var,
    VarStmt,
)
from sprig.ast.visitor import NodeWalker
from sprig.config import DEFAULT_OPTIONS, FrontendOptions
from sprig.errors.exceptions import (
    DuplicateDeclarationError,
    UndefinedVariableError,
    UnknownTypeError,
)
from sprig.lexer.tokens import Token
from sprig.log import get_logger
from sprig.semantic.symbols import BuiltinSymbol, SymbolKind, SymbolTable

logger = get_logger(__name__)


class SemanticAnalyzer(NodeWalker):
    """Check declarations and variable uses of a program.

    Rules:
    - a name (variable, function or class) may be declared once;
    - method names are not bound, only their parameters and bodies are walked;
    - a variable must be declared before it is read or assigned;
    - a declared type must name a builtin type (INTEGER or REAL).
    """

    def __init__(
        self,
        program: Program,
        *,
        options: FrontendOptions | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            program: Root of the tree to analyze.
            options: Front-end options; defaults are used when omitted.

        """
        self._program = program
        self._options = options or DEFAULT_OPTIONS
        self.symbol_table = SymbolTable()
        self.unresolved_types: list[VarStmt] = []
        """Declarations whose type named no builtin type, in source order."""

    def execute(self) -> SymbolTable:
        """Run the analysis.

        Returns:
            The populated symbol table.

        Raises:
            DuplicateDeclarationError: If a variable is declared twice.
            UndefinedVariableError: If a variable is used before declaration.
            UnknownTypeError: If strict types are enabled and a declared
                type is not a builtin.

        """
        logger.debug("Analyzing %d statements", len(self._program.statements))
        self.visit(self._program)
        logger.debug("Analysis complete, %d symbols", len(self.symbol_table))
        return self.symbol_table

    # Declarations

    def visit_var_stmt(self, stmt: VarStmt) -> None:
        name = stmt.name
        self._check_not_declared(name)

        # The initializer is checked before the name is bound: var x = x; fails.
        self.visit(stmt.initializer)

        type_ = self._resolve_type(stmt)
        self.symbol_table.define(name.lexeme, type_)

    def visit_function_stmt(self, stmt: FunctionStmt) -> None:
        # Bound before the body so the function can call itself.
        self._check_not_declared(stmt.name)
        self.symbol_table.define(stmt.name.lexeme, kind=SymbolKind.FUNCTION)
        self._visit_function_body(stmt)

    def visit_class_stmt(self, stmt: ClassStmt) -> None:
        self.visit(stmt.superclass)
        self._check_not_declared(stmt.name)
        self.symbol_table.define(stmt.name.lexeme, kind=SymbolKind.CLASS)
        # Methods are reached through their object only, so their names
        # are never bound.
        for method in stmt.methods:
            self._visit_function_body(method)

    def _visit_function_body(self, stmt: FunctionStmt) -> None:
        """Bind the parameters of a function or method and walk its body.

        A parameter name may be reused by another function, but it may not
        repeat within one parameter list or take over a variable, function
        or class name.

        Args:
            stmt: The function or method declaration.

        Raises:
            DuplicateDeclarationError: If a parameter clashes with a name.

        """
        seen: set[str] = set()
        for param in stmt.params:
            existing = self.symbol_table.lookup(param.lexeme)
            if param.lexeme in seen or (
                existing is not None and existing.kind != SymbolKind.PARAMETER
            ):
                raise DuplicateDeclarationError(
                    param.lexeme,
                    line=param.line,
                    column=param.column,
                )
            seen.add(param.lexeme)
            self.symbol_table.define(param.lexeme, kind=SymbolKind.PARAMETER)
        self.visit_all(stmt.body)

    # Uses

    def visit_assign_expr(self, expr: Assign) -> None:
        self._check_defined(expr.name)
        self.visit(expr.value)

    def visit_var_expr(self, expr: Var) -> None:
        self._check_defined(expr.name)

    def _check_not_declared(self, name: Token) -> None:
        if name.lexeme in self.symbol_table:
            raise DuplicateDeclarationError(
                name.lexeme,
                line=name.line,
                column=name.column,
            )

    def _check_defined(self, name: Token) -> None:
        if self.symbol_table.lookup(name.lexeme) is None:
            raise UndefinedVariableError(
                name.lexeme,
                line=name.line,
                column=name.column,
            )

    def _resolve_type(self, stmt: VarStmt) -> BuiltinSymbol | None:
        """Resolve a declared type against the builtin registry.

        Args:
            stmt: The declaration whose annotation is resolved.

        Returns:
            The builtin type, or None when untyped or unknown.

        Raises:
            UnknownTypeError: If the type is unknown and strict types are on.

        """
        type_name = stmt.type_name
        if type_name is None:
            return None

        builtin = self.symbol_table.lookup_builtin(type_name.lexeme)
        if builtin is not None:
            return builtin

        if self._options.strict_types:
            raise UnknownTypeError(
                type_name.lexeme,
                line=type_name.line,
                column=type_name.column,
            )

        logger.debug("Unknown type %s left unresolved", type_name.lexeme)
        self.unresolved_types.append(stmt)
        return None
