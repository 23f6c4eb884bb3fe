"""Diagnostics for the Sprig front end.

A diagnostic is the presentable form of a problem: a severity, a message,
a source location and an optional hint. Exceptions raised by the passes
are converted into diagnostics for reporting.
"""

from dataclasses import dataclass, field
from enum import Enum

from sprig.errors.codes import ErrorCode
from sprig.errors.exceptions import SprigError
from sprig.log import get_logger

logger = get_logger(__name__)


class Severity(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    """A problem that stops the front end."""

    WARNING = "warning"
    """A potential issue that does not stop the front end."""

    NOTE = "note"
    """Additional context attached to another diagnostic."""


@dataclass
class Diagnostic:
    """A message tied to a source location.

    Lines and columns are 1-indexed, matching token positions.
    """

    severity: Severity
    message: str
    """Message text (no leading capital, no trailing period)."""

    file: str
    line: int
    column: int
    code: ErrorCode | None = None
    length: int = 1
    """Number of characters to underline, starting at ``column``."""

    help_text: str | None = None
    related: list["Diagnostic"] = field(default_factory=list)

    @classmethod
    def error(  # noqa: PLR0913
        cls,
        message: str,
        file: str,
        line: int,
        column: int,
        *,
        code: ErrorCode | None = None,
        length: int = 1,
        help_text: str | None = None,
    ) -> "Diagnostic":
        """Create an error diagnostic.

        Args:
            message: The error message.
            file: Source file path or label.
            line: Line number (1-indexed).
            column: Column number (1-indexed).
            code: Optional error code.
            length: Width of the underlined span.
            help_text: Optional help text.

        Returns:
            A new Diagnostic with ERROR severity.

        """
        return cls(
            severity=Severity.ERROR,
            message=message,
            file=file,
            line=line,
            column=column,
            code=code,
            length=length,
            help_text=help_text,
        )

    @classmethod
    def warning(  # noqa: PLR0913
        cls,
        message: str,
        file: str,
        line: int,
        column: int,
        *,
        code: ErrorCode | None = None,
        length: int = 1,
        help_text: str | None = None,
    ) -> "Diagnostic":
        """Create a warning diagnostic.

        Args:
            message: The warning message.
            file: Source file path or label.
            line: Line number (1-indexed).
            column: Column number (1-indexed).
            code: Optional error code.
            length: Width of the underlined span.
            help_text: Optional help text.

        Returns:
            A new Diagnostic with WARNING severity.

        """
        return cls(
            severity=Severity.WARNING,
            message=message,
            file=file,
            line=line,
            column=column,
            code=code,
            length=length,
            help_text=help_text,
        )

    @classmethod
    def note(cls, message: str, file: str, line: int, column: int) -> "Diagnostic":
        """Create a note diagnostic."""
        return cls(
            severity=Severity.NOTE,
            message=message,
            file=file,
            line=line,
            column=column,
        )

    @classmethod
    def from_exception(
        cls,
        error: SprigError,
        file: str,
        *,
        length: int = 1,
    ) -> "Diagnostic":
        """Convert a front-end exception into an error diagnostic.

        Args:
            error: The exception raised by the scanner, parser or analyzer.
            file: Source file path or label.
            length: Width of the underlined span, when the caller knows it.

        Returns:
            A new Diagnostic with ERROR severity.

        """
        logger.debug("Converting %s to diagnostic", type(error).__name__)
        return cls.error(
            error.message,
            file,
            error.line,
            error.column or 1,
            code=error.code,
            length=length,
            help_text=error.help_text,
        )

    def with_help(self, help_text: str) -> "Diagnostic":
        """Set help text and return self for chaining."""
        self.help_text = help_text
        return self

    def with_note(self, message: str, line: int, column: int) -> "Diagnostic":
        """Attach a note in the same file and return self for chaining.

        Args:
            message: The note message.
            line: Line number (1-indexed).
            column: Column number (1-indexed).

        Returns:
            Self for chaining.

        """
        self.related.append(Diagnostic.note(message, self.file, line, column))
        return self

    @property
    def is_error(self) -> bool:
        """Whether this diagnostic stops the front end."""
        return self.severity == Severity.ERROR

    def to_dict(self) -> dict[str, object]:
        """Convert this diagnostic to a dictionary for JSON serialization.

        Returns:
            Dictionary representation suitable for JSON output.

        """
        result: dict[str, object] = {
            "severity": self.severity.value,
            "message": self.message,
            "location": {
                "file": self.file,
                "line": self.line,
                "column": self.column,
                "length": self.length,
            },
        }

        if self.code is not None:
            result["code"] = self.code.value

        if self.help_text is not None:
            result["help"] = self.help_text

        if self.related:
            result["related"] = [d.to_dict() for d in self.related]

        return result
