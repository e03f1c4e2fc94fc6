from pydantic import BaseModel
from rstyle_linter.models import Severity


class ViolationRecord(BaseModel):
    severity: Severity
    file_path: str
    line: int
    column: int
    rule_id: str
    message: str


class FailureRecord(BaseModel):
    kind: str
    file_path: str
    line: int
    column: int
    rule_id: str
    message: str


class ReportSummary(BaseModel):
    errors: int
    warnings: int
    failures: int


class FileReportRecord(BaseModel):
    file_path: str
    violations: list[ViolationRecord]
    failures: list[FailureRecord]
    summary: ReportSummary
