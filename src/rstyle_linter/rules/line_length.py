from ..context import LintContext
from ..models import Severity, Violation
from .base import BaseRule


class LineLengthRule(BaseRule):
    """Lines must not exceed max_line_length characters."""

    @property
    def rule_id(self) -> str:
        return "line-length"

    @property
    def name(self) -> str:
        return "Line length"

    @property
    def default_severity(self) -> Severity:
        return Severity.WARNING

    @property
    def description(self) -> str:
        return f"Lines are at most {self.config.max_line_length} characters long"

    def evaluate(self, context: LintContext) -> list[Violation]:
        limit = self.config.max_line_length
        violations = []

        for lineno, line in enumerate(context.lines, start=1):
            if len(line) <= limit:
                continue
            # Anchor inside the token that crosses the limit
            token = context.token_at(lineno, limit + 1)
            if token is None:
                continue
            violations.append(
                self._create_violation(
                    context,
                    token,
                    f"line is {len(line)} characters long (limit {limit})",
                    line=lineno,
                    column=limit + 1,
                )
            )

        return violations
