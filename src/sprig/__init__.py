"""Sprig language front end.

Provide scanning, parsing, AST construction and semantic analysis for the
Sprig scripting language, with compiler-style diagnostics.
"""

from sprig.ast import AstPrinter, NodeWalker, Program
from sprig.compiler import (
    FrontendResult,
    compile_source,
    get_source_stats,
    validate_source,
)
from sprig.config import FrontendOptions
from sprig.errors import (
    Diagnostic,
    DiagnosticReporter,
    DuplicateDeclarationError,
    ErrorCode,
    ParseError,
    ScanError,
    SemanticError,
    Severity,
    SprigError,
    UndefinedVariableError,
    UnexpectedCharacterError,
    UnknownTypeError,
    UnterminatedStringError,
)
from sprig.grammar import Parser, parse
from sprig.lexer import Scanner, Token, TokenKind, scan
from sprig.semantic import SemanticAnalyzer, SymbolTable

__all__ = [
    "AstPrinter",
    "Diagnostic",
    "DiagnosticReporter",
    "DuplicateDeclarationError",
    "ErrorCode",
    "FrontendOptions",
    "FrontendResult",
    "NodeWalker",
    "ParseError",
    "Parser",
    "Program",
    "ScanError",
    "Scanner",
    "SemanticAnalyzer",
    "SemanticError",
    "Severity",
    "SprigError",
    "SymbolTable",
    "Token",
    "TokenKind",
    "UndefinedVariableError",
    "UnexpectedCharacterError",
    "UnknownTypeError",
    "UnterminatedStringError",
    "compile_source",
    "get_source_stats",
    "parse",
    "scan",
    "validate_source",
]
