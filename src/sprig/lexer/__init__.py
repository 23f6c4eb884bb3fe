"""Lexical analysis for Sprig.

Provide the token model and the hand-written scanner that turns source
text into tokens.
"""

from sprig.lexer.scanner import Scanner, scan
from sprig.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "LiteralValue",
    "Scanner",
    "Token",
    "TokenKind",
    "scan",
]
