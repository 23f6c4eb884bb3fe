"""Diagnostic reporter for the Sprig front end.

Render diagnostics in the familiar compiler layout: a header with the
code, the location, the offending source line with an underline, and any
help text.
"""

import json
from collections.abc import Mapping, Sequence
from io import StringIO

from sprig.errors.diagnostics import Diagnostic, Severity
from sprig.log import get_logger

logger = get_logger(__name__)

GUTTER_WIDTH = 5
"""Width of the line number gutter."""

CONTEXT_LINES = 1
"""Number of source lines shown around the reported line."""


class DiagnosticReporter:
    """Format diagnostics as text or JSON.

    Sources are registered per file label; a diagnostic whose file has no
    registered source is rendered without the source excerpt.
    """

    def __init__(self, sources: dict[str, str] | None = None) -> None:
        """Initialize the reporter.

        Args:
            sources: Optional mapping of file label to source text.

        """
        self._sources: dict[str, str] = dict(sources or {})

    def add_source(self, file: str, source: str) -> None:
        """Register the source text for a file label."""
        self._sources[file] = source

    def format_diagnostic(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: The diagnostic to format.

        Returns:
            Formatted diagnostic string.

        Example output:
            error[E0202]: variable 'y' is not defined
              --> script.sp:2:9
                 |
               1 | var x = 1;
               2 | var z = y;
                 |         ^
                 |

        """
        output = StringIO()
        self._write_header(output, diagnostic)
        output.write(f"  --> {self._location(diagnostic)}\n")
        self._write_excerpt(output, diagnostic)

        if diagnostic.help_text:
            output.write(f"{' ' * GUTTER_WIDTH}= help: {diagnostic.help_text}\n")

        for note in diagnostic.related:
            output.write(f"\nnote: {note.message}\n  --> {self._location(note)}\n")

        return output.getvalue()

    def format_diagnostics(
        self,
        diagnostics: Sequence[Diagnostic],
        *,
        include_summary: bool = True,
    ) -> str:
        """Format several diagnostics, separated by blank lines.

        Args:
            diagnostics: Diagnostics to format.
            include_summary: Whether to end with a count of errors and warnings.

        Returns:
            Formatted string, empty when there is nothing to report.

        """
        if not diagnostics:
            return ""

        text = "\n".join(self.format_diagnostic(d) for d in diagnostics)
        if include_summary:
            text += "\n" + summarize(diagnostics)
        return text

    def format_json(
        self,
        diagnostics: Sequence[Diagnostic],
        file: str,
        *,
        stats: Mapping[str, int | str] | None = None,
    ) -> str:
        """Format diagnostics as a JSON document.

        Args:
            diagnostics: Diagnostics to include.
            file: Label of the checked source.
            stats: Optional statistics about the source.

        Returns:
            JSON string representation.

        """
        errors = [d.to_dict() for d in diagnostics if d.severity == Severity.ERROR]
        warnings = [d.to_dict() for d in diagnostics if d.severity == Severity.WARNING]

        result: dict[str, object] = {
            "version": "1.0",
            "file": file,
            "valid": not errors,
            "errors": errors,
            "warnings": warnings,
        }
        if stats:
            result["stats"] = dict(stats)

        return json.dumps(result, indent=2)

    def _write_header(self, output: StringIO, diagnostic: Diagnostic) -> None:
        severity = diagnostic.severity.value
        if diagnostic.code:
            output.write(f"{severity}[{diagnostic.code.value}]: {diagnostic.message}\n")
        else:
            output.write(f"{severity}: {diagnostic.message}\n")

    @staticmethod
    def _location(diagnostic: Diagnostic) -> str:
        return f"{diagnostic.file}:{diagnostic.line}:{diagnostic.column}"

    def _write_excerpt(self, output: StringIO, diagnostic: Diagnostic) -> None:
        """Write the reported line and its neighbours with an underline.

        Args:
            output: Output buffer.
            diagnostic: The diagnostic.

        """
        empty_gutter = f"{' ' * GUTTER_WIDTH}|\n"
        source = self._sources.get(diagnostic.file)
        lines = source.split("\n") if source is not None else []
        index = diagnostic.line - 1

        output.write(empty_gutter)
        if not 0 <= index < len(lines):
            return

        first = max(0, index - CONTEXT_LINES)
        last = min(len(lines), index + CONTEXT_LINES + 1)
        for number, text in enumerate(lines[first:last], start=first + 1):
            output.write(f"{number:>{GUTTER_WIDTH - 1}} | {text}\n")
            if number == diagnostic.line:
                output.write(underline(text, diagnostic.column, diagnostic.length))

        output.write(empty_gutter)


def underline(text: str, column: int, length: int) -> str:
    """Build the caret line for a span on a source line.

    Tabs in the prefix are kept so carets line up with the source.

    Args:
        text: The source line.
        column: First column of the span (1-indexed).
        length: Width of the span.

    Returns:
        The caret line, including the gutter and a trailing newline.

    """
    prefix = text[: max(0, column - 1)]
    spacing = "".join("\t" if char == "\t" else " " for char in prefix)
    return f"{' ' * GUTTER_WIDTH}| {spacing}{'^' * max(1, length)}\n"


def _plural(count: int, noun: str, plural: str | None = None) -> str:
    if count == 1:
        return f"{count} {noun}"
    return f"{count} {plural or noun + 's'}"


def summarize(diagnostics: Sequence[Diagnostic]) -> str:
    """Summarize error and warning counts.

    Args:
        diagnostics: Diagnostics to count.

    Returns:
        A line such as ``Found 1 error and 2 warnings in script.sp``,
        or an empty string when there are neither.

    """
    errors = sum(1 for d in diagnostics if d.severity == Severity.ERROR)
    warnings = sum(1 for d in diagnostics if d.severity == Severity.WARNING)
    if errors == 0 and warnings == 0:
        return ""

    parts = []
    if errors:
        parts.append(_plural(errors, "error"))
    if warnings:
        parts.append(_plural(warnings, "warning"))

    files = {d.file for d in diagnostics}
    where = next(iter(files)) if len(files) == 1 else f"{len(files)} files"
    return f"Found {' and '.join(parts)} in {where}\n"


def format_success_message(
    *,
    functions: int = 0,
    classes: int = 0,
    variables: int = 0,
) -> str:
    """Format a success message for a valid source.

    Args:
        functions: Number of function declarations.
        classes: Number of class declarations.
        variables: Number of variable declarations.

    Returns:
        Formatted success message, e.g. ``valid (2 functions, 1 variable)``.

    """
    parts = [
        _plural(count, noun, plural)
        for count, noun, plural in (
            (functions, "function", "functions"),
            (classes, "class", "classes"),
            (variables, "variable", "variables"),
        )
        if count > 0
    ]
    if parts:
        return f"valid ({', '.join(parts)})"
    return "valid"
