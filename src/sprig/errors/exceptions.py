"""Exceptions raised by the Sprig front end.

Every pass fails fast: the first problem found is raised as one of these
exceptions and aborts the run. Callers match on the exception class and
present ``line`` and ``message`` to the user.
"""

from sprig.errors.codes import ErrorCode, format_error_message


class SprigError(Exception):
    """Base exception for front-end errors."""

    code: ErrorCode | None = None
    """Error code for categorization."""

    def __init__(
        self,
        message: str,
        *,
        line: int,
        column: int | None = None,
        help_text: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human-readable message (no leading capital, no trailing period).
            line: Source line of the problem (1-indexed).
            column: Source column of the problem (1-indexed), if known.
            help_text: Optional suggestion for fixing the problem.

        """
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.help_text = help_text

    def __str__(self) -> str:
        """Format the error with its line number."""
        return f"line {self.line}: {self.message}"


class ScanError(SprigError):
    """Exception for lexical errors found by the scanner."""


class UnexpectedCharacterError(ScanError):
    """A character that cannot start any token."""

    code = ErrorCode.E0001

    def __init__(self, char: str, *, line: int, column: int | None = None) -> None:
        """Initialize with the offending character and its position."""
        super().__init__(
            format_error_message(ErrorCode.E0001, char=char),
            line=line,
            column=column,
        )
        self.char = char


class UnterminatedStringError(ScanError):
    """End of input reached inside a string literal."""

    code = ErrorCode.E0002

    def __init__(self, *, line: int, column: int | None = None) -> None:
        """Initialize with the position of the opening quote."""
        super().__init__(
            format_error_message(ErrorCode.E0002),
            line=line,
            column=column,
            help_text='add a closing \'"\'',
        )


class ParseError(SprigError):
    """Exception for syntax errors found by the parser."""

    code = ErrorCode.E0101

    def __init__(
        self,
        message: str,
        *,
        line: int,
        column: int | None = None,
        help_text: str | None = None,
        code: ErrorCode = ErrorCode.E0101,
    ) -> None:
        """Initialize syntax error.

        Args:
            message: Error message.
            line: Source line of the offending token.
            column: Source column of the offending token.
            help_text: Optional list of what was expected instead.
            code: E0101 for unexpected input, E0102 for bad assignment targets.

        """
        super().__init__(message, line=line, column=column, help_text=help_text)
        self.code = code


class SemanticError(SprigError):
    """Exception for errors found by the semantic analyzer."""

    def __init__(self, name: str, *, line: int, column: int | None = None) -> None:
        """Initialize with the offending name and its position."""
        super().__init__(
            format_error_message(self.code, name=name) if self.code else name,
            line=line,
            column=column,
        )
        self.name = name


class DuplicateDeclarationError(SemanticError):
    """A variable declared twice in the flat namespace."""

    code = ErrorCode.E0201


class UndefinedVariableError(SemanticError):
    """A variable referenced or assigned without a prior declaration."""

    code = ErrorCode.E0202


class UnknownTypeError(SemanticError):
    """A declared type that is not in the builtin registry."""

    code = ErrorCode.E0203
