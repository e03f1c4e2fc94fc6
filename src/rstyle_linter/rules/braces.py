from rstyle_scanner import TokenKind

from ..context import LintContext
from ..models import Severity, Violation
from .base import BaseRule

# Constructs followed by a parenthesised header before their body
HEADER_KEYWORDS = ("if", "for", "while", "function")

# Constructs whose body follows the keyword directly
BARE_KEYWORDS = ("else", "repeat")


class BracePlacementRule(BaseRule):
    """Opening braces stay with their construct; one statement per line."""

    @property
    def rule_id(self) -> str:
        return "brace-placement"

    @property
    def name(self) -> str:
        return "Brace placement"

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        where = "end of the line" if self.config.brace_same_line else "start of its own line"
        return (
            f"'{{' goes at the {where} after if/for/while/function/else/repeat, "
            "'}' goes on its own line, 'else' follows '}' on the same line, "
            "and statements are not packed onto one line"
        )

    def evaluate(self, context: LintContext) -> list[Violation]:
        violations: list[Violation] = []

        for i, token in enumerate(context.tokens):
            if token.kind is TokenKind.IDENTIFIER:
                if token.text in HEADER_KEYWORDS or token.text in BARE_KEYWORDS:
                    violations.extend(self._check_opening_brace(context, i))
                if token.text == "else":
                    violations.extend(self._check_else(context, i))
            elif token.is_punct("{"):
                violations.extend(self._check_after_open(context, i))
            elif token.is_punct("}"):
                violations.extend(self._check_before_close(context, i))
            elif token.is_punct(";"):
                violations.extend(self._check_semicolon(context, i))

        return violations

    def _header_end(self, context: LintContext, index: int) -> int | None:
        """Index of the last token of the construct's header"""
        keyword = context.tokens[index]
        if keyword.text in BARE_KEYWORDS:
            return index
        paren = context.next_significant(index)
        if paren is None or not context.tokens[paren].is_punct("("):
            return None
        return context.matching_close(paren)

    def _check_opening_brace(self, context: LintContext, index: int) -> list[Violation]:
        end = self._header_end(context, index)
        if end is None:
            return []
        body = context.next_significant(end)
        if body is None or not context.tokens[body].is_punct("{"):
            return []

        keyword = context.tokens[index].text
        brace = context.tokens[body]
        header_line = context.tokens[end].end_line
        if self.config.brace_same_line and brace.line != header_line:
            return [
                self._create_violation(
                    context, brace, f"opening '{{' should be on the same line as '{keyword}'"
                )
            ]
        if not self.config.brace_same_line and brace.line == header_line:
            return [
                self._create_violation(
                    context, brace, f"opening '{{' should start its own line after '{keyword}'"
                )
            ]
        return []

    def _check_else(self, context: LintContext, index: int) -> list[Violation]:
        prev = context.prev_significant(index)
        if prev is None:
            return []
        closing = context.tokens[prev]
        token = context.tokens[index]
        if closing.is_punct("}") and closing.line != token.line:
            return [
                self._create_violation(
                    context, token, "'else' should be on the same line as the preceding '}'"
                )
            ]
        return []

    def _check_after_open(self, context: LintContext, index: int) -> list[Violation]:
        for j in range(index + 1, len(context.tokens)):
            token = context.tokens[j]
            if token.kind is TokenKind.WHITESPACE:
                continue
            if token.kind in (TokenKind.NEWLINE, TokenKind.COMMENT) or token.is_punct("}"):
                return []
            return [
                self._create_violation(
                    context, token, "statement should start on a new line after '{'"
                )
            ]
        return []

    def _check_before_close(self, context: LintContext, index: int) -> list[Violation]:
        for j in range(index - 1, -1, -1):
            token = context.tokens[j]
            if token.kind is TokenKind.WHITESPACE:
                continue
            if token.kind is TokenKind.NEWLINE or token.is_punct("{"):
                return []
            return [
                self._create_violation(
                    context, context.tokens[index], "closing '}' should be on its own line"
                )
            ]
        return []

    def _check_semicolon(self, context: LintContext, index: int) -> list[Violation]:
        for j in range(index + 1, len(context.tokens)):
            token = context.tokens[j]
            if token.kind is TokenKind.WHITESPACE:
                continue
            if token.kind in (TokenKind.NEWLINE, TokenKind.COMMENT):
                return []
            return [
                self._create_violation(
                    context, context.tokens[index], "multiple statements on one line"
                )
            ]
        return []
