"""Grammar package for Sprig.

Provide the Lark grammar, the parser factory and the token-fed parser
that turns scanner output into an AST.
"""

from sprig.grammar.parser import Parser, ParserFactory, parse

__all__ = ["Parser", "ParserFactory", "parse"]
