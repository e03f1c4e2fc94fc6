"""
R source scanner

Turns R script text into a lossless stream of tokens. Whitespace, newlines
and comments are kept as tokens so that spacing checks can inspect them, and
joining every token text gives back the original input.
"""

import re
from collections.abc import Iterator

from .tokens import Token, TokenKind


class ScanError(Exception):
    """Malformed source, e.g. an unterminated string"""

    def __init__(self, reason: str, line: int, column: int, filename: str = "<string>"):
        self.reason = reason
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(f"{filename}:{line}:{column}: {reason}")


# Longest first so that `<<-` wins over `<-` and `<`
OPERATORS = (
    "<<-", "->>", ":::",
    "<-", "->", "<=", ">=", "==", "!=", "&&", "||", "::", "|>",
    "=", "+", "-", "*", "/", "^", "<", ">", "!", "&", "|", "~", "?", ":", "$", "@", "\\",
)

PUNCTUATION = frozenset("()[]{},;")

INLINE_SPACE = frozenset(" \t\f\v")

NUMBER_PATTERN = re.compile(
    r"0[xX][0-9a-fA-F]+[Li]?"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[Li]?"
)

# r"(...)", R'[...]', r"---{...}---"
RAW_STRING_PATTERN = re.compile(r"""[rR](["'])(-*)([(\[{])""")
RAW_CLOSERS = {"(": ")", "[": "]", "{": "}"}


class Lexer:
    """
    Tokenizer for R scripts.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())
    """

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.length = len(source)

    def _peek(self, offset: int = 1) -> str | None:
        pos = self.pos + offset
        if pos >= self.length:
            return None
        return self.source[pos]

    def _error(self, reason: str) -> ScanError:
        # The cursor still sits at the start of the offending span
        return ScanError(reason, self.line, self.column, self.filename)

    def _emit(self, kind: TokenKind, end: int) -> Token:
        """Build a token for source[pos:end] and move the cursor past it."""
        text = self.source[self.pos : end]
        token = Token(kind, text, self.line, self.column)
        breaks = text.count("\n")
        if breaks:
            self.line += breaks
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)
        self.pos = end
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens lazily; raises ScanError when a bad span is reached."""
        while self.pos < self.length:
            yield self._next_token()

    def _next_token(self) -> Token:
        ch = self.source[self.pos]
        nxt = self._peek()

        if ch == "\n":
            return self._emit(TokenKind.NEWLINE, self.pos + 1)
        if ch == "\r" and nxt == "\n":
            return self._emit(TokenKind.NEWLINE, self.pos + 2)
        if ch in INLINE_SPACE or ch == "\r":
            return self._emit(TokenKind.WHITESPACE, self._scan_whitespace())
        if ch == "#":
            return self._emit(TokenKind.COMMENT, self._scan_to_line_end())

        raw = RAW_STRING_PATTERN.match(self.source, self.pos)
        if raw:
            return self._emit(TokenKind.STRING, self._scan_raw_string(raw))
        if ch in "\"'`":
            return self._emit(TokenKind.STRING, self._scan_quoted(ch))

        number = NUMBER_PATTERN.match(self.source, self.pos)
        if number and (ch.isdigit() or ch == "."):
            return self._emit(TokenKind.NUMBER, number.end())

        if self._is_ident_start(ch, nxt):
            return self._emit(TokenKind.IDENTIFIER, self._scan_identifier())

        if ch in PUNCTUATION:
            return self._emit(TokenKind.PUNCTUATION, self.pos + 1)

        if ch == "%":
            return self._emit(TokenKind.OPERATOR, self._scan_percent_operator())

        for op in OPERATORS:
            if self.source.startswith(op, self.pos):
                return self._emit(TokenKind.OPERATOR, self.pos + len(op))

        raise self._error(f"unexpected character {ch!r}")

    @staticmethod
    def _is_ident_start(ch: str, nxt: str | None) -> bool:
        if ch == ".":
            return nxt is None or not nxt.isdigit()
        return ch.isalpha()

    def _scan_whitespace(self) -> int:
        end = self.pos
        while end < self.length:
            ch = self.source[end]
            if ch in INLINE_SPACE:
                end += 1
            elif ch == "\r" and not self.source.startswith("\r\n", end):
                end += 1
            else:
                break
        return end

    def _scan_to_line_end(self) -> int:
        end = self.source.find("\n", self.pos)
        if end == -1:
            return self.length
        if end > self.pos and self.source[end - 1] == "\r":
            end -= 1
        return end

    def _scan_identifier(self) -> int:
        end = self.pos + 1
        while end < self.length:
            ch = self.source[end]
            if ch.isalnum() or ch in "._":
                end += 1
            else:
                break
        return end

    def _scan_quoted(self, quote: str) -> int:
        end = self.pos + 1
        while end < self.length:
            ch = self.source[end]
            if ch == "\\":
                end += 2
                continue
            if ch == quote:
                return end + 1
            end += 1
        what = "backtick name" if quote == "`" else "string"
        raise self._error(f"unterminated {what} starting with {quote}")

    def _scan_raw_string(self, match: re.Match) -> int:
        quote, dashes, opener = match.groups()
        closing = RAW_CLOSERS[opener] + dashes + quote
        end = self.source.find(closing, match.end())
        if end == -1:
            raise self._error("unterminated raw string")
        return end + len(closing)

    def _scan_percent_operator(self) -> int:
        end = self.pos + 1
        while end < self.length:
            ch = self.source[end]
            if ch == "%":
                return end + 1
            if ch in "\r\n":
                break
            end += 1
        raise self._error("unterminated %operator%")


class TokenStream:
    """Restartable token sequence: every iteration scans the source afresh."""

    def __init__(self, source: str, filename: str = "<string>"):
        self.source = source
        self.filename = filename

    def __iter__(self) -> Iterator[Token]:
        return Lexer(self.source, self.filename).tokenize()


def tokenize(source: str, filename: str = "<string>") -> Iterator[Token]:
    """Scan R source text into tokens"""
    return Lexer(source, filename).tokenize()
