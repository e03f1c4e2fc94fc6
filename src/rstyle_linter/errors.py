class LintError(Exception):
    """Base class for linter errors"""


class ConfigError(LintError):
    """Configuration file or option could not be used"""


class NoInputError(LintError):
    """Nothing to lint: the given paths contain no R files"""


class EngineError(LintError):
    """A rule raised while evaluating a file"""

    def __init__(self, rule_id: str, cause: BaseException):
        self.rule_id = rule_id
        self.cause = cause
        super().__init__(f"rule '{rule_id}' failed: {type(cause).__name__}: {cause}")
