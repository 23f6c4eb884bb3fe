"""Front-end pipeline for Sprig.

Run source text through the scanner, the parser and the semantic
analyzer, either raising the first error or reporting it as a diagnostic.
"""

from dataclasses import dataclass, field

from sprig.ast.nodes import ClassStmt, FunctionStmt, Program, VarStmt
from sprig.config import DEFAULT_OPTIONS, FrontendOptions
from sprig.errors.codes import ErrorCode, format_error_message
from sprig.errors.diagnostics import Diagnostic
from sprig.errors.exceptions import SemanticError, SprigError
from sprig.grammar.parser import Parser
from sprig.lexer.scanner import Scanner
from sprig.lexer.tokens import Token
from sprig.log import get_logger
from sprig.semantic.analyzer import SemanticAnalyzer
from sprig.semantic.symbols import BUILTIN_TYPE_NAMES, SymbolTable

logger = get_logger(__name__)

DEFAULT_FILENAME = "<input>"
"""Label used in diagnostics when the source has no file name."""


@dataclass
class FrontendResult:
    """Everything the front end produced for one source."""

    tokens: list[Token]
    program: Program
    symbols: SymbolTable
    unresolved_types: list[VarStmt] = field(default_factory=list)
    """Declarations whose type was not a builtin (non-strict mode only)."""


def compile_source(
    source: str,
    filename: str = DEFAULT_FILENAME,
    *,
    options: FrontendOptions | None = None,
) -> FrontendResult:
    """Scan, parse and analyze a source.

    Args:
        source: The program text.
        filename: Name of the source, for logging.
        options: Front-end options; defaults are used when omitted.

    Returns:
        The tokens, the AST and the populated symbol table.

    Raises:
        ScanError: If the text contains an invalid token.
        ParseError: If the tokens do not form a valid program.
        SemanticError: If a declaration or variable use is invalid.

    """
    options = options or DEFAULT_OPTIONS
    logger.debug("Compiling %s", filename)

    tokens = Scanner(source).scan()
    program = Parser(tokens, options=options).parse()
    analyzer = SemanticAnalyzer(program, options=options)
    symbols = analyzer.execute()

    logger.debug(
        "Compiled %s: %d tokens, %d symbols",
        filename,
        len(tokens),
        len(symbols),
    )
    return FrontendResult(
        tokens=tokens,
        program=program,
        symbols=symbols,
        unresolved_types=list(analyzer.unresolved_types),
    )


def validate_source(
    source: str,
    filename: str = DEFAULT_FILENAME,
    *,
    options: FrontendOptions | None = None,
) -> list[Diagnostic]:
    """Check a source and report problems as diagnostics.

    Args:
        source: The program text.
        filename: Name of the source, used as the diagnostic file label.
        options: Front-end options; defaults are used when omitted.

    Returns:
        An error diagnostic for the first failure, or one warning per
        declaration whose type could not be resolved. Empty when clean.

    """
    logger.debug("Validating %s", filename)
    try:
        result = compile_source(source, filename, options=options)
    except SprigError as e:
        logger.debug("Validation of %s failed: %s", filename, e)
        return [_error_to_diagnostic(e, filename)]

    return [
        _unresolved_type_warning(stmt.name, stmt.type_name, filename)
        for stmt in result.unresolved_types
        if stmt.type_name is not None
    ]


def get_source_stats(source: str) -> dict[str, int]:
    """Count top-level declarations of a source.

    Args:
        source: The program text.

    Returns:
        Counts of functions, classes and variables; all zero if the source
        does not compile.

    """
    try:
        program = compile_source(source).program
    except SprigError:
        return {"functions": 0, "classes": 0, "variables": 0}

    return _count_declarations(program)


def _count_declarations(program: Program) -> dict[str, int]:
    counts = {"functions": 0, "classes": 0, "variables": 0}

    for stmt in program.statements:
        match stmt:
            case FunctionStmt():
                counts["functions"] += 1
            case ClassStmt():
                counts["classes"] += 1
            case VarStmt():
                counts["variables"] += 1

    return counts


def _error_to_diagnostic(error: SprigError, filename: str) -> Diagnostic:
    """Convert a front-end exception to a Diagnostic.

    Semantic errors underline the whole offending name.
    """
    length = len(error.name) if isinstance(error, SemanticError) else 1
    return Diagnostic.from_exception(error, filename, length=length)


def _unresolved_type_warning(
    name: Token,
    type_name: Token,
    filename: str,
) -> Diagnostic:
    return Diagnostic.warning(
        format_error_message(
            ErrorCode.W0001,
            name=type_name.lexeme,
            variable=name.lexeme,
        ),
        filename,
        type_name.line,
        type_name.column,
        code=ErrorCode.W0001,
        length=len(type_name.lexeme),
        help_text=f"builtin types are: {', '.join(BUILTIN_TYPE_NAMES)}",
    )
