import pytest
from rstyle_linter.config import LintConfig
from rstyle_linter.context import LintContext
from rstyle_linter.models import Violation
from rstyle_scanner import tokenize

# The guide's example, written the wrong way and the right way
BAD_IF = 'if(x==1){print("x is equal to 1")}\n'
GOOD_IF = 'if (x == 1) {\n  print("x is equal to 1")\n}\n'


def make_context(source: str, file_path: str = "test.R") -> LintContext:
    return LintContext(file_path=file_path, source=source, tokens=tuple(tokenize(source)))


@pytest.fixture
def check():
    """Run a single rule class over a source string"""

    def _check(rule_cls, source: str, **options) -> list[Violation]:
        rule = rule_cls(LintConfig(**options))
        return sorted(rule.evaluate(make_context(source)), key=Violation.sort_key)

    return _check


def messages(violations: list[Violation]) -> list[str]:
    return [v.message for v in violations]
