"""Hand-written lexical scanner for Sprig source text.

Turn characters into tokens while tracking the source position of every
token. The scanner is single-pass and fails fast: the first lexical error
aborts the scan.
"""

from sprig.errors.exceptions import UnexpectedCharacterError, UnterminatedStringError
from sprig.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenKind
from sprig.log import get_logger

logger = get_logger(__name__)

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ".": TokenKind.DOT,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}
"""Punctuation emitted as soon as it is read."""

OPERATOR_TOKENS: dict[str, tuple[TokenKind, dict[str, TokenKind]]] = {
    "*": (TokenKind.STAR, {"*": TokenKind.STAR_STAR}),
    "+": (TokenKind.PLUS, {"+": TokenKind.PLUS_PLUS}),
    "-": (TokenKind.MINUS, {"-": TokenKind.MINUS_MINUS}),
    "=": (TokenKind.EQUAL, {"=": TokenKind.EQUAL_EQUAL, ">": TokenKind.ARROW}),
    "!": (TokenKind.BANG, {"=": TokenKind.BANG_EQUAL}),
    ">": (TokenKind.GREATER, {"=": TokenKind.GREATER_EQUAL}),
    "<": (TokenKind.LESS, {"=": TokenKind.LESS_EQUAL}),
}
"""Operators: single-character kind plus the two-character forms by second char."""


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_word(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """Scanner over one source string.

    Owns all character-level state: the start offset of the current token,
    the running offset, and the 1-indexed line and column of the next
    unread character.
    """

    def __init__(self, source: str) -> None:
        """Initialize the scanner.

        Args:
            source: The complete source text.

        """
        self._source = source
        self._start = 0
        self._current = 0
        self._line = 1
        self._column = 1
        self._start_line = 1
        self._start_column = 1

    def scan(self) -> list[Token]:
        """Scan the whole source.

        Returns:
            Tokens in source order, terminated by exactly one EOF token.

        Raises:
            UnterminatedStringError: If a string is still open at end of input.
            UnexpectedCharacterError: If a character cannot start a token.

        """
        self._start = 0
        self._current = 0
        self._line = 1
        self._column = 1

        tokens: list[Token] = []
        while not self._at_end():
            self._start = self._current
            self._start_line = self._line
            self._start_column = self._column
            token = self._scan_token()
            if token is not None:
                tokens.append(token)

        tokens.append(Token(TokenKind.EOF, "", None, self._line, self._column))
        logger.debug("Scanned %d tokens over %d lines", len(tokens), self._line)
        return tokens

    def _scan_token(self) -> Token | None:
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[char])

        if char in OPERATOR_TOKENS:
            single, doubles = OPERATOR_TOKENS[char]
            for second, kind in doubles.items():
                if self._match(second):
                    return self._make_token(kind)
            return self._make_token(single)

        match char:
            case "/":
                if self._match("/"):
                    return self._comment()
                return self._make_token(TokenKind.SLASH)
            case "\n":
                self._newline()
                return None
            case '"':
                return self._string()

        if _is_digit(char):
            return self._number()
        if _is_alpha(char):
            return self._identifier()
        if char.isspace():
            return None

        raise UnexpectedCharacterError(
            char,
            line=self._start_line,
            column=self._start_column,
        )

    def _comment(self) -> Token:
        # The terminating newline is left for _scan_token.
        while self._peek() != "\n" and not self._at_end():
            self._advance()
        return self._make_token(TokenKind.COMMENT)

    def _string(self) -> Token:
        while self._peek() != '"' and not self._at_end():
            if self._advance() == "\n":
                self._newline()

        if self._at_end():
            raise UnterminatedStringError(
                line=self._start_line,
                column=self._start_column,
            )

        # Closing quote
        self._advance()
        value = self._source[self._start + 1 : self._current - 1]
        return self._make_token(TokenKind.STRING, value)

    def _number(self) -> Token:
        while _is_digit(self._peek()):
            self._advance()

        # A dot only belongs to the number when a digit follows it.
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        return self._make_token(TokenKind.NUMBER, float(self._lexeme()))

    def _identifier(self) -> Token:
        while _is_word(self._peek()):
            self._advance()

        lexeme = self._lexeme()
        kind = KEYWORDS.get(lexeme)
        if kind is None:
            return self._make_token(TokenKind.IDENTIFIER)
        if kind is TokenKind.BOOLEAN:
            return self._make_token(kind, lexeme == "true")
        return self._make_token(kind)

    def _make_token(self, kind: TokenKind, literal: LiteralValue = None) -> Token:
        return Token(
            kind,
            self._lexeme(),
            literal,
            self._start_line,
            self._start_column,
        )

    def _lexeme(self) -> str:
        return self._source[self._start : self._current]

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._advance()
        return True

    def _newline(self) -> None:
        self._line += 1
        self._column = 1

    def _peek(self) -> str:
        """Return the next unread character, or '' at end of input."""
        if self._at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _advance(self) -> str:
        char = self._source[self._current]
        self._current += 1
        self._column += 1
        return char

    def _at_end(self) -> bool:
        return self._current >= len(self._source)


def scan(source: str) -> list[Token]:
    """Scan source text into tokens.

    Args:
        source: The complete source text.

    Returns:
        Tokens in source order, terminated by exactly one EOF token.

    """
    return Scanner(source).scan()
