"""
R Scanner - lossless tokenizer for R scripts

Used by the style linter to inspect identifiers, operators and the
whitespace around them.
"""

from .lexer import Lexer, ScanError, TokenStream, tokenize
from .tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "ScanError",
    "Token",
    "TokenKind",
    "TokenStream",
    "tokenize",
]
