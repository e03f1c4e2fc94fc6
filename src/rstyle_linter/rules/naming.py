import re

from rstyle_scanner import TokenKind

from ..context import LintContext
from ..models import Severity, Violation
from .base import BaseRule

NAMESPACE_OPERATORS = ("::", ":::")
MEMBER_OPERATORS = ("$", "@")

# `.` in formulas, `...`, `..1`, `..2`
DOTS_PATTERN = re.compile(r"\.|\.\.(?:\.|\d+)")


class CaseRule(BaseRule):
    """Identifiers must only use the allowed charset (lowercase, digits, '_')."""

    @property
    def rule_id(self) -> str:
        return "identifier-case"

    @property
    def name(self) -> str:
        return "Identifier case"

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        return (
            "Names use lowercase letters, digits and underscores; "
            "no uppercase letters, '.' or '-'"
        )

    def evaluate(self, context: LintContext) -> list[Violation]:
        pattern = self.config.identifier_pattern
        tokens = context.tokens
        violations = []

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.kind is not TokenKind.IDENTIFIER:
                i += 1
                continue

            end = self._hyphen_chain_end(context, i)
            if end > i:
                name = "".join(t.text for t in tokens[i : end + 1])
                if not pattern.fullmatch(name):
                    violations.append(
                        self._create_violation(
                            context, token, f"name '{name}' joins words with '-', use '_'"
                        )
                    )
                i = end + 1
                continue

            if not self._is_exempt(context, i) and not pattern.fullmatch(token.text):
                reason = self._describe(token.text)
                violations.append(
                    self._create_violation(context, token, f"identifier '{token.text}' {reason}")
                )
            i += 1

        return violations

    @staticmethod
    def _hyphen_chain_end(context: LintContext, index: int) -> int:
        """Last index of an `a-b-c` run written without spaces"""
        tokens = context.tokens
        end = index
        while (
            end + 2 < len(tokens)
            and tokens[end + 1].is_op("-")
            and tokens[end + 2].kind is TokenKind.IDENTIFIER
        ):
            end += 2
        return end

    def _is_exempt(self, context: LintContext, index: int) -> bool:
        text = context.tokens[index].text
        if text in self.config.exempt_identifiers or DOTS_PATTERN.fullmatch(text):
            return True

        # pkg::name, obj$field and obj@slot are named by someone else
        nxt = context.next_significant(index)
        if nxt is not None and context.tokens[nxt].is_op(*NAMESPACE_OPERATORS):
            return True
        prev = context.prev_significant(index)
        if prev is not None and context.tokens[prev].is_op(
            *NAMESPACE_OPERATORS, *MEMBER_OPERATORS
        ):
            return True
        return False

    def _describe(self, text: str) -> str:
        charset = self.config.charset_pattern
        for ch in text:
            if charset.fullmatch(ch):
                continue
            if ch.isupper():
                return f"contains uppercase letter '{ch}'"
            if ch == ".":
                return "contains '.', use '_' to separate words"
            return f"contains disallowed character '{ch}'"
        return f"does not match {self.config.allowed_identifier_charset}+"
