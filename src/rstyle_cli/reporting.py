import threading
from enum import Enum
from typing import TextIO

import typer
from pydantic import TypeAdapter
from rstyle_linter.models import FileReport, LintFailure, Severity, Violation

from .converters import report_to_record
from .models import FileReportRecord

SEVERITY_RANK = {Severity.WARNING: 1, Severity.ERROR: 2}

SEVERITY_COLORS = {Severity.WARNING: typer.colors.YELLOW, Severity.ERROR: typer.colors.RED}

_records_adapter = TypeAdapter(list[FileReportRecord])


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


class Reporter:
    """Collects file reports and renders them to a single output sink.

    Text output is streamed file by file; JSON is written once by finish().
    All writes go through one lock, so concurrent producers never interleave.
    """

    def __init__(
        self,
        output_format: OutputFormat = OutputFormat.TEXT,
        sink: TextIO | None = None,
        min_severity: Severity = Severity.WARNING,
    ):
        self.output_format = output_format
        self.sink = sink
        self.min_severity = min_severity
        self.reports: list[FileReport] = []
        self._lock = threading.Lock()

    def add(self, report: FileReport) -> None:
        with self._lock:
            self.reports.append(report)
            if self.output_format is OutputFormat.TEXT:
                for line in self._render_text(report):
                    typer.echo(line, file=self.sink)

    def finish(self) -> None:
        with self._lock:
            if self.output_format is OutputFormat.JSON:
                records = [report_to_record(r) for r in self.reports]
                typer.echo(_records_adapter.dump_json(records, indent=2).decode(), file=self.sink)
            else:
                typer.echo(self.summary(), file=self.sink)

    @property
    def exit_code(self) -> int:
        """0 clean, 1 error-severity findings, 2 files that could not be checked"""
        if any(r.has_fatal_failure for r in self.reports):
            return 2
        if any(r.has_errors for r in self.reports):
            return 1
        return 0

    def summary(self) -> str:
        total = sum(len(r.violations) for r in self.reports)
        errors = sum(r.error_count for r in self.reports)
        warnings = sum(r.warning_count for r in self.reports)
        text = (
            f"Found {_plural(total, 'violation')} ({_plural(errors, 'error')}, "
            f"{_plural(warnings, 'warning')}) in {_plural(len(self.reports), 'file')}"
        )
        unchecked = sum(1 for r in self.reports if r.has_fatal_failure)
        if unchecked:
            text += f"; {_plural(unchecked, 'file')} could not be checked"
        return text

    def _render_text(self, report: FileReport) -> list[str]:
        entries: list[tuple[tuple, str]] = []
        min_rank = SEVERITY_RANK[self.min_severity]
        for failure in report.failures:
            entries.append(((failure.line, failure.column), self._format_failure(failure)))
        for violation in report.violations:
            if SEVERITY_RANK[violation.severity] >= min_rank:
                entries.append(((violation.line, violation.column), self._format_violation(violation)))
        entries.sort(key=lambda entry: entry[0])
        return [line for _, line in entries]

    @staticmethod
    def _severity_tag(severity: Severity) -> str:
        return typer.style(f"[{severity.value}]", fg=SEVERITY_COLORS[severity])

    def _format_violation(self, violation: Violation) -> str:
        return (
            f"{violation.file_path}:{violation.line}:{violation.column}: "
            f"{self._severity_tag(violation.severity)} {violation.rule_id}: {violation.message}"
        )

    def _format_failure(self, failure: LintFailure) -> str:
        return (
            f"{failure.file_path}:{failure.line}:{failure.column}: "
            f"{self._severity_tag(Severity.ERROR)} {failure.report_id}: {failure.message}"
        )
