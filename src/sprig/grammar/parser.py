"""Parser for Sprig.

Build the LALR parser from the Lark grammar and drive it with the tokens
produced by the scanner. Lark never sees source text: each scanner token
is wrapped in a Lark token and fed to the interactive parser, then the
resulting tree is transformed into the AST.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from lark import Lark, Tree
from lark import Token as LarkToken
from lark.exceptions import UnexpectedInput, UnexpectedToken, VisitError

from sprig.ast.nodes import Program
from sprig.ast.transformer import transform
from sprig.config import DEFAULT_OPTIONS, FrontendOptions
from sprig.errors.codes import ErrorCode, format_error_message
from sprig.errors.exceptions import ParseError, SprigError
from sprig.lexer.tokens import Token, TokenKind
from sprig.log import get_logger

logger = get_logger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "sprig.lark"
"""Path to the Sprig grammar file."""

SKIPPED_KINDS = frozenset({TokenKind.COMMENT, TokenKind.EOF})
"""Token kinds the grammar never sees."""

END_OF_INPUT = "$END"
"""Lark's name for the end-of-input terminal."""


class ParserFactory:
    """Factory for creating Sprig parser instances.

    The grammar is read once and the production parser is cached, since
    building the LALR tables is the expensive part.
    """

    _grammar_cache: str | None = None
    """Cached grammar content to avoid repeated file reads."""

    _parser_cache: Lark | None = None
    """Cached production parser instance (non-debug mode)."""

    @classmethod
    def _load_grammar(cls) -> str:
        """Load the grammar file contents.

        Returns:
            The grammar string.

        """
        if cls._grammar_cache is None:
            logger.debug("Loading grammar from %s", GRAMMAR_PATH)
            cls._grammar_cache = GRAMMAR_PATH.read_text()
        return cls._grammar_cache

    @classmethod
    def create(cls, *, debug: bool = False) -> Lark:
        """Create a Sprig parser.

        Args:
            debug: If True, Lark reports grammar conflicts while building
                   the tables and a fresh (uncached) parser is returned.

        Returns:
            Configured Lark parser instance.

        """
        if not debug and cls._parser_cache is not None:
            return cls._parser_cache

        logger.debug("Creating lalr parser (debug=%s)", debug)

        # Shift/reduce conflicts (the dangling else) resolve to shift.
        parser = Lark(
            cls._load_grammar(),
            parser="lalr",
            lexer="basic",
            maybe_placeholders=True,
            debug=debug,
        )

        if not debug:
            cls._parser_cache = parser

        return parser

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached parser state.

        Use for testing or when grammar may have changed.
        """
        cls._grammar_cache = None
        cls._parser_cache = None


def to_lark_tokens(tokens: Iterable[Token]) -> list[LarkToken]:
    """Wrap scanner tokens for the Lark parser.

    The Lark token's type is the kind name and its value is the scanner
    token itself, so the transformer gets the scanner token back.

    Args:
        tokens: Scanner output, including comments and EOF.

    Returns:
        Lark tokens for every token the grammar consumes.

    """
    return [
        LarkToken(
            token.kind.name,
            token,
            line=token.line,
            column=token.column,
        )
        for token in tokens
        if token.kind not in SKIPPED_KINDS
    ]


def _end_token(tokens: Sequence[Token]) -> LarkToken:
    """Build the end-of-input token at the scanner's EOF position."""
    if tokens:
        last = tokens[-1]
        return LarkToken(END_OF_INPUT, "", line=last.line, column=last.column)
    return LarkToken(END_OF_INPUT, "", line=1, column=1)


def _unexpected_token_error(error: UnexpectedToken) -> ParseError:
    """Convert a Lark parse failure into a ParseError.

    Args:
        error: The failure raised by the LALR parser.

    Returns:
        ParseError positioned at the offending token.

    """
    expected = sorted(error.expected) if error.expected else []
    help_text = f"expected one of: {', '.join(expected)}" if expected else None

    if error.token.type == END_OF_INPUT:
        message = "unexpected end of input"
    else:
        message = format_error_message(ErrorCode.E0101, token=str(error.token))

    return ParseError(
        message,
        line=error.token.line,
        column=error.token.column,
        help_text=help_text,
    )


class Parser:
    """Turn a token sequence into a Program.

    Example:
        >>> tokens = Scanner("var x = 1;").scan()
        >>> program = Parser(tokens).parse()

    """

    def __init__(
        self,
        tokens: Sequence[Token],
        *,
        options: FrontendOptions | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            tokens: Scanner output, ending with EOF.
            options: Front-end options; defaults are used when omitted.

        """
        self._tokens = tokens
        self._options = options or DEFAULT_OPTIONS

    def parse(self) -> Program:
        """Parse the tokens into an AST.

        Returns:
            The Program root node.

        Raises:
            ParseError: If the tokens do not form a valid program.

        """
        tree = self._parse_tree()
        try:
            return transform(tree)
        except VisitError as e:
            if isinstance(e.orig_exc, SprigError):
                raise e.orig_exc from e
            raise

    def _parse_tree(self) -> Tree:
        lark_parser = ParserFactory.create(debug=self._options.debug_parser)

        # The interactive parser is started on empty text and fed tokens
        # directly, so Lark's own lexer never runs.
        interactive = lark_parser.parse_interactive("")
        try:
            for token in to_lark_tokens(self._tokens):
                interactive.feed_token(token)
            tree = interactive.feed_eof(_end_token(self._tokens))
        except UnexpectedToken as e:
            raise _unexpected_token_error(e) from e
        except UnexpectedInput as e:
            raise ParseError(
                str(e),
                line=getattr(e, "line", 1),
                column=getattr(e, "column", None),
            ) from e

        logger.debug("Parsed %d tokens", len(self._tokens))
        return tree


def parse(
    tokens: Sequence[Token],
    *,
    options: FrontendOptions | None = None,
) -> Program:
    """Parse scanner tokens into a Program.

    Args:
        tokens: Scanner output, ending with EOF.
        options: Front-end options; defaults are used when omitted.

    Returns:
        The Program root node.

    Raises:
        ParseError: If the tokens do not form a valid program.

    """
    return Parser(tokens, options=options).parse()
