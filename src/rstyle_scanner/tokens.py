from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Lexical categories produced by the scanner"""

    IDENTIFIER = "identifier"
    NUMBER = "number"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    STRING = "string"
    COMMENT = "comment"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"


TRIVIA_KINDS = frozenset({TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT})


@dataclass(frozen=True)
class Token:
    """A single token from the scanner.

    ``line`` and ``column`` are 1-based and point at the first character.
    Columns count characters, not bytes.
    """

    kind: TokenKind
    text: str
    line: int
    column: int

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA_KINDS

    @property
    def end_line(self) -> int:
        return self._last_char()[0]

    @property
    def end_column(self) -> int:
        """Column of the last character of the token"""
        return self._last_char()[1]

    def is_op(self, *texts: str) -> bool:
        return self.kind is TokenKind.OPERATOR and self.text in texts

    def is_punct(self, *texts: str) -> bool:
        return self.kind is TokenKind.PUNCTUATION and self.text in texts

    def _last_char(self) -> tuple[int, int]:
        head = self.text[:-1]
        breaks = head.count("\n")
        if not breaks:
            return self.line, self.column + len(head)
        return self.line + breaks, len(head) - head.rfind("\n")

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r}, L{self.line}:{self.column})"
