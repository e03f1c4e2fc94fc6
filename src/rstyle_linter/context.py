import bisect
from dataclasses import dataclass
from functools import cached_property

from rstyle_scanner import Token, TokenKind


@dataclass(frozen=True)
class LintContext:
    """Read-only view of one scanned file, shared by every rule"""

    file_path: str
    source: str
    tokens: tuple[Token, ...]

    @cached_property
    def lines(self) -> list[str]:
        """Source lines without their terminators"""
        lines = [line.removesuffix("\r") for line in self.source.split("\n")]
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    @cached_property
    def _starts(self) -> list[tuple[int, int]]:
        return [(t.line, t.column) for t in self.tokens]

    def token_at(self, line: int, column: int) -> Token | None:
        """Token covering the given position"""
        idx = bisect.bisect_right(self._starts, (line, column)) - 1
        if idx < 0:
            return None
        token = self.tokens[idx]
        if (token.end_line, token.end_column) < (line, column):
            return None
        return token

    def prev_significant(self, index: int) -> int | None:
        """Index of the closest non-trivia token before `index`"""
        for i in range(index - 1, -1, -1):
            if not self.tokens[i].is_trivia:
                return i
        return None

    def next_significant(self, index: int) -> int | None:
        for i in range(index + 1, len(self.tokens)):
            if not self.tokens[i].is_trivia:
                return i
        return None

    def neighbour(self, index: int, offset: int) -> Token | None:
        i = index + offset
        if 0 <= i < len(self.tokens):
            return self.tokens[i]
        return None

    def matching_close(self, index: int) -> int | None:
        """Index of the bracket closing the one at `index`"""
        opener = self.tokens[index].text
        closer = {"(": ")", "[": "]", "{": "}"}[opener]
        depth = 0
        for i in range(index, len(self.tokens)):
            token = self.tokens[i]
            if token.kind is not TokenKind.PUNCTUATION:
                continue
            if token.text == opener:
                depth += 1
            elif token.text == closer:
                depth -= 1
                if depth == 0:
                    return i
        return None

    def matching_open(self, index: int) -> int | None:
        """Index of the bracket opening the one at `index`"""
        closer = self.tokens[index].text
        opener = {")": "(", "]": "[", "}": "{"}[closer]
        depth = 0
        for i in range(index, -1, -1):
            token = self.tokens[i]
            if token.kind is not TokenKind.PUNCTUATION:
                continue
            if token.text == closer:
                depth += 1
            elif token.text == opener:
                depth -= 1
                if depth == 0:
                    return i
        return None
