from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """Violation severity levels"""

    ERROR = "error"
    WARNING = "warning"


class FailureKind(str, Enum):
    SCAN = "scan"  # malformed source
    ENGINE = "engine"  # a rule raised
    IO = "io"  # file unreadable


@dataclass(frozen=True)
class Violation:
    """Internal representation of a style violation"""

    file_path: str
    line: int
    column: int
    rule_id: str
    message: str
    severity: Severity

    def sort_key(self) -> tuple:
        return (self.line, self.column, self.rule_id, self.message)


@dataclass(frozen=True)
class LintFailure:
    """A file (or one rule on a file) that could not be checked"""

    kind: FailureKind
    file_path: str
    message: str
    line: int = 0
    column: int = 0
    rule_id: str | None = None

    @property
    def report_id(self) -> str:
        if self.kind is FailureKind.ENGINE:
            return f"engine-error({self.rule_id})"
        return f"{self.kind.value}-error"

    @property
    def is_fatal(self) -> bool:
        """Scan and IO failures mean the whole file went unchecked"""
        return self.kind is not FailureKind.ENGINE


@dataclass
class FileReport:
    """All violations and failures for one source file"""

    file_path: str
    violations: list[Violation] = field(default_factory=list)
    failures: list[LintFailure] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0 or any(
            f.kind is FailureKind.ENGINE for f in self.failures
        )

    @property
    def has_fatal_failure(self) -> bool:
        return any(f.is_fatal for f in self.failures)
