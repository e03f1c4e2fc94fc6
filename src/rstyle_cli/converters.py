from rstyle_linter.models import FileReport, LintFailure, Violation

from .models import FailureRecord, FileReportRecord, ReportSummary, ViolationRecord


def violation_to_record(violation: Violation) -> ViolationRecord:
    """Convert an internal dataclass violation to an external Pydantic record"""
    return ViolationRecord(
        severity=violation.severity,
        file_path=violation.file_path,
        line=violation.line,
        column=violation.column,
        rule_id=violation.rule_id,
        message=violation.message,
    )


def failure_to_record(failure: LintFailure) -> FailureRecord:
    return FailureRecord(
        kind=failure.kind.value,
        file_path=failure.file_path,
        line=failure.line,
        column=failure.column,
        rule_id=failure.report_id,
        message=failure.message,
    )


def report_to_record(report: FileReport) -> FileReportRecord:
    return FileReportRecord(
        file_path=report.file_path,
        violations=[violation_to_record(v) for v in report.violations],
        failures=[failure_to_record(f) for f in report.failures],
        summary=ReportSummary(
            errors=report.error_count,
            warnings=report.warning_count,
            failures=len(report.failures),
        ),
    )
