"""Error handling and diagnostics for the Sprig front end.

Provide error codes, the exceptions raised by each pass, and diagnostics
with compiler-style formatting for reporting them.
"""

from sprig.errors.codes import ErrorCode, format_error_message
from sprig.errors.diagnostics import Diagnostic, Severity
from sprig.errors.exceptions import (
    DuplicateDeclarationError,
    ParseError,
    ScanError,
    SemanticError,
    SprigError,
    UndefinedVariableError,
    UnexpectedCharacterError,
    UnknownTypeError,
    UnterminatedStringError,
)
from sprig.errors.reporter import DiagnosticReporter, format_success_message

__all__ = [
    "Diagnostic",
    "DiagnosticReporter",
    "DuplicateDeclarationError",
    "ErrorCode",
    "ParseError",
    "ScanError",
    "SemanticError",
    "Severity",
    "SprigError",
    "UndefinedVariableError",
    "UnexpectedCharacterError",
    "UnknownTypeError",
    "UnterminatedStringError",
    "format_error_message",
    "format_success_message",
]
