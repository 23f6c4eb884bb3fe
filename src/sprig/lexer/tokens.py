"""Token model for the Sprig scanner.

Define the closed set of token kinds, the reserved word table and the
immutable token value produced by the scanner.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Kind of a lexical token."""

    # Punctuation
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    DOT = auto()
    SEMICOLON = auto()
    COMMA = auto()
    COLON = auto()

    # Operators
    SLASH = auto()
    STAR = auto()
    STAR_STAR = auto()
    PLUS = auto()
    PLUS_PLUS = auto()
    MINUS = auto()
    MINUS_MINUS = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    ARROW = auto()
    BANG = auto()
    BANG_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()

    # Keywords
    DEF = auto()
    CLASS = auto()
    VAR = auto()
    EXTENDS = auto()
    PRINT = auto()
    NEW = auto()
    IF = auto()
    ELSE = auto()
    FOR = auto()
    WHILE = auto()
    BREAK = auto()
    CONTINUE = auto()
    RETURN = auto()
    AND = auto()
    OR = auto()
    NULL = auto()
    THIS = auto()
    SUPER = auto()

    IDENTIFIER = auto()
    COMMENT = auto()
    EOF = auto()


KEYWORDS: dict[str, TokenKind] = {
    "def": TokenKind.DEF,
    "class": TokenKind.CLASS,
    "var": TokenKind.VAR,
    "extends": TokenKind.EXTENDS,
    "print": TokenKind.PRINT,
    "new": TokenKind.NEW,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "for": TokenKind.FOR,
    "while": TokenKind.WHILE,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "return": TokenKind.RETURN,
    "and": TokenKind.AND,
    "or": TokenKind.OR,
    "null": TokenKind.NULL,
    "this": TokenKind.THIS,
    "super": TokenKind.SUPER,
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
}
"""Reserved words, matched case-sensitively against whole identifiers."""


LiteralValue = str | float | bool | None
"""Typed value carried by literal tokens and literal expressions."""


@dataclass(frozen=True)
class Token:
    """A lexical token with its source position.

    Tokens are created by the scanner only and never change afterwards.
    """

    kind: TokenKind
    """Kind of the token."""

    lexeme: str
    """Source text the token was scanned from."""

    literal: LiteralValue = None
    """Typed value for STRING, NUMBER and BOOLEAN tokens."""

    line: int = 1
    """Line of the first character (1-indexed)."""

    column: int = 1
    """Column of the first character (1-indexed)."""

    def __str__(self) -> str:
        """Return the lexeme."""
        return self.lexeme

    @property
    def position(self) -> tuple[int, int]:
        """Return the (line, column) pair for ordering and reporting."""
        return (self.line, self.column)
