"""Semantic analysis for Sprig.

Provide the flat symbol table with its builtin type registry and the
analyzer that checks declarations and variable uses.
"""

from sprig.semantic.analyzer import SemanticAnalyzer
from sprig.semantic.symbols import (
    BuiltinSymbol,
    SymbolKind,
    SymbolTable,
    VarSymbol,
    builtin_symbols,
)

__all__ = [
    "BuiltinSymbol",
    "SemanticAnalyzer",
    "SymbolKind",
    "SymbolTable",
    "VarSymbol",
    "builtin_symbols",
]
