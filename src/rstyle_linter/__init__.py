"""
R Style Linter - mechanical checks for the lab's R style guide

This package provides:
- Naming checks (lowercase identifiers, '_' as word separator)
- Operator, comma, keyword and bracket spacing checks
- Brace placement and statement packing checks
- Line length checks
"""

__version__ = "0.1.0"

from .config import LintConfig
from .context import LintContext
from .discovery import collect_files
from .engine import LinterEngine
from .errors import ConfigError, EngineError, LintError, NoInputError
from .models import FailureKind, FileReport, LintFailure, Severity, Violation
from .registry import RuleRegistry, registry

__all__ = [
    "ConfigError",
    "EngineError",
    "FailureKind",
    "FileReport",
    "LintConfig",
    "LintContext",
    "LintError",
    "LintFailure",
    "LinterEngine",
    "NoInputError",
    "RuleRegistry",
    "Severity",
    "Violation",
    "collect_files",
    "registry",
]
