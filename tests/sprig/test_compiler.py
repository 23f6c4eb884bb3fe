"""Tests for the Sprig front-end pipeline."""

import pytest

from sprig import (
    DuplicateDeclarationError,
    ErrorCode,
    FrontendOptions,
    ParseError,
    Severity,
    UnexpectedCharacterError,
    UnknownTypeError,
    compile_source,
    get_source_stats,
    validate_source,
)
from sprig.lexer import TokenKind
from sprig.semantic import SymbolKind

PROGRAM = """\
// Shapes
class Shape {
  def area() { return 0; }
}

class Square extends Shape {
  def init(side) { this.side = side; }
  def area() { return this.side ** 2; }
}

def total(a, b) {
  return a.area() + b.area();
}

var count: INTEGER = 2;
var sum: REAL = total(new Square(2), new Square(3));
for (var i = 0; i < count; i = i + 1) {
  if (sum > 10 and !false) print "big"; else print "small";
}
"""


class TestCompileSource:
    """Test the full scan, parse and analyze pipeline."""

    def test_compiles_a_complete_program(self) -> None:
        """All passes run and their results are returned."""
        result = compile_source(PROGRAM, "shapes.sp")
        assert result.tokens[0].kind == TokenKind.COMMENT
        assert result.tokens[-1].kind == TokenKind.EOF
        assert len(result.program.statements) == 6
        assert result.symbols.lookup("Square") is not None
        assert result.symbols.lookup("Square").kind == SymbolKind.CLASS  # type: ignore[union-attr]
        assert result.symbols.lookup("count").type.name == "INTEGER"  # type: ignore[union-attr]
        assert result.unresolved_types == []

    def test_scan_errors_propagate(self) -> None:
        """Lexical errors reach the caller unchanged."""
        with pytest.raises(UnexpectedCharacterError):
            compile_source("var x = #;")

    def test_parse_errors_propagate(self) -> None:
        """Syntax errors reach the caller unchanged."""
        with pytest.raises(ParseError):
            compile_source("var x = ;")

    def test_semantic_errors_propagate(self) -> None:
        """Semantic errors reach the caller unchanged."""
        with pytest.raises(DuplicateDeclarationError):
            compile_source("var x; var x;")

    def test_unresolved_types_are_collected(self) -> None:
        """Declarations with unknown types are reported back."""
        result = compile_source("var s: STRING; var t: TEXT = 1;")
        assert [stmt.name.lexeme for stmt in result.unresolved_types] == ["s", "t"]

    def test_options_are_passed_through(self) -> None:
        """Strict types reach the analyzer."""
        with pytest.raises(UnknownTypeError):
            compile_source(
                "var s: STRING;",
                options=FrontendOptions(strict_types=True),
            )


class TestValidateSource:
    """Test diagnostics produced by validation."""

    def test_clean_source(self) -> None:
        """A valid program has no diagnostics."""
        assert validate_source(PROGRAM) == []

    def test_semantic_error(self) -> None:
        """The first error becomes one error diagnostic."""
        diagnostics = validate_source("var total = 1;\nprint totl;", "main.sp")
        assert len(diagnostics) == 1
        diagnostic = diagnostics[0]
        assert diagnostic.severity == Severity.ERROR
        assert diagnostic.code == ErrorCode.E0202
        assert diagnostic.file == "main.sp"
        assert (diagnostic.line, diagnostic.column) == (2, 7)
        assert diagnostic.length == 4

    def test_scan_error(self) -> None:
        """Lexical errors are reported with their code."""
        diagnostics = validate_source('print "open;')
        assert [d.code for d in diagnostics] == [ErrorCode.E0002]
        assert diagnostics[0].file == "<input>"

    def test_parse_error(self) -> None:
        """Syntax errors carry the expected tokens as help."""
        diagnostics = validate_source("print ;")
        assert diagnostics[0].code == ErrorCode.E0101
        assert diagnostics[0].help_text is not None

    def test_unknown_type_warnings(self) -> None:
        """Each unresolved type becomes a warning."""
        diagnostics = validate_source("var s: STRING;\nvar n: REAL;\nvar t: TEXT;")
        assert [d.severity for d in diagnostics] == [Severity.WARNING, Severity.WARNING]
        assert [d.code for d in diagnostics] == [ErrorCode.W0001, ErrorCode.W0001]
        first = diagnostics[0]
        assert first.message == "unknown type 'STRING', variable 's' is left untyped"
        assert (first.line, first.column) == (1, 8)
        assert first.length == len("STRING")
        assert diagnostics[1].line == 3

    def test_strict_unknown_type_is_an_error(self) -> None:
        """Strict mode turns the warning into an error."""
        diagnostics = validate_source(
            "var s: STRING;",
            options=FrontendOptions(strict_types=True),
        )
        assert [(d.severity, d.code) for d in diagnostics] == [
            (Severity.ERROR, ErrorCode.E0203),
        ]


class TestSourceStats:
    """Test declaration counts."""

    def test_counts_top_level_declarations(self) -> None:
        """Functions, classes and variables are counted."""
        assert get_source_stats(PROGRAM) == {
            "functions": 1,
            "classes": 2,
            "variables": 2,
        }

    def test_invalid_source_counts_nothing(self) -> None:
        """A source that does not compile has zero counts."""
        assert get_source_stats("var x = ;") == {
            "functions": 0,
            "classes": 0,
            "variables": 0,
        }
