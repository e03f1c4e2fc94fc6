from collections.abc import Callable
from typing import Protocol

from .config import LintConfig
from .context import LintContext
from .errors import ConfigError
from .models import Severity, Violation


class LintRule(Protocol):
    """Protocol for a style rule"""

    rule_id: str
    name: str
    severity: Severity
    description: str

    def evaluate(self, context: LintContext) -> list[Violation]: ...


RuleFactory = Callable[[LintConfig], LintRule]


class RuleRegistry:
    """Registry for managing and loading style rules"""

    def __init__(self):
        self._factories: list[RuleFactory] = []
        self._load_builtin_rules()

    def register(self, factory: RuleFactory):
        self._factories.append(factory)

    def create_rules(self, config: LintConfig) -> list[LintRule]:
        return [factory(config) for factory in self._factories]

    def get_enabled_rules(self, config: LintConfig) -> list[LintRule]:
        """Return the rules left after applying config.select and config.ignore"""
        rules = self.create_rules(config)
        known = {rule.rule_id for rule in rules}
        requested = set(config.ignore) | set(config.select or ()) | set(config.severity)
        unknown = requested - known
        if unknown:
            raise ConfigError(
                f"unknown rule id(s): {', '.join(sorted(unknown))} "
                f"(known: {', '.join(sorted(known))})"
            )

        return [
            rule
            for rule in rules
            if (config.select is None or rule.rule_id in config.select)
            and rule.rule_id not in config.ignore
        ]

    def _load_builtin_rules(self):
        from .rules.braces import BracePlacementRule
        from .rules.line_length import LineLengthRule
        from .rules.naming import CaseRule
        from .rules.spacing import SpacingRule

        self.register(CaseRule)
        self.register(SpacingRule)
        self.register(BracePlacementRule)
        self.register(LineLengthRule)


registry = RuleRegistry()
