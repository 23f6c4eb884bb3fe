"""Error code definitions for the Sprig front end.

Provide standardized error codes following compiler conventions for
categorizing and identifying specific error conditions.
"""

from enum import Enum

from sprig.log import get_logger

logger = get_logger(__name__)

_LEXICAL_MAX = 99
"""Maximum error code number for lexical errors."""

_SYNTAX_MAX = 199
"""Maximum error code number for syntax errors."""


class ErrorCode(str, Enum):
    """Front-end error codes.

    Error codes follow the convention E0001-E9999 where the hundreds digit
    indicates the pass that detected the problem:
    - E00xx: Lexical errors (scanner)
    - E01xx: Syntax errors (parser)
    - E02xx: Semantic errors (analyzer)
    Warnings use the W prefix.
    """

    # Lexical errors (E00xx)
    E0001 = "E0001"
    """Character outside the language's alphabet."""

    E0002 = "E0002"
    """String literal not closed before end of input."""

    # Syntax errors (E01xx)
    E0101 = "E0101"
    """Unexpected token or unexpected end of input."""

    E0102 = "E0102"
    """Left-hand side of an assignment is not assignable."""

    # Semantic errors (E02xx)
    E0201 = "E0201"
    """Variable declared twice."""

    E0202 = "E0202"
    """Variable referenced or assigned before declaration."""

    E0203 = "E0203"
    """Declared type is not a builtin type (strict mode only)."""

    # Warning codes (W0xxx)
    W0001 = "W0001"
    """Declared type is not a builtin type; the variable is left untyped."""

    @property
    def category(self) -> str:
        """Get the error category for this code.

        Returns:
            Human-readable category name.

        """
        if self.value.startswith("W"):
            return "warning"
        code_num = int(self.value[1:])
        if code_num <= _LEXICAL_MAX:
            return "lexical"
        if code_num <= _SYNTAX_MAX:
            return "syntax"
        return "semantic"


# Error message templates for each code
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.E0001: "unexpected character '{char}'",
    ErrorCode.E0002: "unterminated string",
    ErrorCode.E0101: "unexpected token '{token}'",
    ErrorCode.E0102: "invalid assignment target",
    ErrorCode.E0201: "variable '{name}' is already declared",
    ErrorCode.E0202: "variable '{name}' is not defined",
    ErrorCode.E0203: "unknown type '{name}'",
    ErrorCode.W0001: "unknown type '{name}', variable '{variable}' is left untyped",
}


def format_error_message(code: ErrorCode, **kwargs: str) -> str:
    """Format an error message with the given parameters.

    Args:
        code: The error code.
        **kwargs: Parameters to substitute in the message template.

    Returns:
        Formatted error message string.

    """
    template = ERROR_MESSAGES.get(code, "unknown error")
    try:
        return template.format(**kwargs)
    except KeyError as e:
        logger.warning("Missing parameter for error message: %s", e)
        return template
