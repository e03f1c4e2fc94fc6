import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from rstyle_scanner import ScanError, TokenStream

from .config import LintConfig
from .context import LintContext
from .errors import EngineError
from .models import FailureKind, FileReport, LintFailure, Violation
from .registry import LintRule, RuleRegistry

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for R style linting"""

    def __init__(self, config: LintConfig | None = None, registry: RuleRegistry | None = None):
        self.config = config or LintConfig()
        self.registry = registry or RuleRegistry()
        self.rules: list[LintRule] = self.registry.get_enabled_rules(self.config)

    def lint_source(self, source: str, file_path: str = "<string>") -> FileReport:
        """Run every enabled rule on one source text"""
        report = FileReport(file_path=file_path)

        try:
            tokens = tuple(TokenStream(source, file_path))
        except ScanError as exc:
            logger.debug("Scan failed for %s: %s", file_path, exc)
            report.failures.append(
                LintFailure(
                    kind=FailureKind.SCAN,
                    file_path=file_path,
                    message=exc.reason,
                    line=exc.line,
                    column=exc.column,
                )
            )
            return report

        context = LintContext(file_path=file_path, source=source, tokens=tokens)
        violations: set[Violation] = set()

        for rule in self.rules:
            try:
                found = rule.evaluate(context)
            except Exception as exc:
                # One broken rule must not hide the others' findings
                error = EngineError(rule.rule_id, exc)
                logger.warning("%s: %s", file_path, error)
                logger.debug("Traceback for rule %s", rule.rule_id, exc_info=True)
                report.failures.append(
                    LintFailure(
                        kind=FailureKind.ENGINE,
                        file_path=file_path,
                        message=str(error),
                        rule_id=rule.rule_id,
                    )
                )
                continue
            violations.update(found)

        report.violations = sorted(violations, key=Violation.sort_key)
        return report

    def lint_file(self, file_path: Path) -> FileReport:
        """Read and lint one file; unreadable files become an io failure"""
        display = str(file_path)
        try:
            # Decode by hand so that \r\n survives; utf-8-sig drops a leading BOM
            source = file_path.read_bytes().decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s: %s", display, exc)
            message = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            return FileReport(
                file_path=display,
                failures=[LintFailure(kind=FailureKind.IO, file_path=display, message=message)],
            )
        logger.debug("Linting %s", display)
        return self.lint_source(source, display)

    def lint_files(
        self,
        files: Sequence[Path],
        jobs: int | None = None,
        on_report: Callable[[FileReport], None] | None = None,
    ) -> list[FileReport]:
        """Lint files concurrently, delivering reports in input order.

        On KeyboardInterrupt pending files are cancelled; reports already
        handed to `on_report` stay delivered.
        """
        reports: list[FileReport] = []
        executor = ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="rstyle-lint")
        futures = [executor.submit(self.lint_file, path) for path in files]
        interrupted = False
        try:
            for future in futures:
                report = future.result()
                reports.append(report)
                if on_report is not None:
                    on_report(report)
        except KeyboardInterrupt:
            interrupted = True
            logger.warning("Interrupted after %d of %d file(s)", len(reports), len(files))
            raise
        finally:
            executor.shutdown(wait=not interrupted, cancel_futures=True)
        return reports
