from abc import ABC, abstractmethod

from rstyle_scanner import Token

from ..config import LintConfig
from ..context import LintContext
from ..models import Severity, Violation


class BaseRule(ABC):
    """Abstract base class for all style rules."""

    def __init__(self, config: LintConfig):
        self.config = config

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'identifier-case')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g., 'Identifier case')."""
        pass

    @property
    @abstractmethod
    def default_severity(self) -> Severity:
        pass

    @property
    def severity(self) -> Severity:
        """Severity after applying configured overrides."""
        return self.config.severity_for(self.rule_id, self.default_severity)

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def evaluate(self, context: LintContext) -> list[Violation]:
        """Run the check and return found violations."""
        pass

    # Helper method for consistent violation creation
    def _create_violation(
        self,
        context: LintContext,
        token: Token,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> Violation:
        """Anchor a violation at `token`, or at a position inside it."""
        return Violation(
            file_path=context.file_path,
            line=token.line if line is None else line,
            column=token.column if column is None else column,
            rule_id=self.rule_id,
            message=message,
            severity=self.severity,
        )
