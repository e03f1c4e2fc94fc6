import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .models import Severity

# Matches every user-defined %...% infix operator (%in%, %>%, %%, ...)
ANY_PERCENT_OPERATOR = "%any%"

DEFAULT_SPACED_OPERATORS = frozenset(
    {
        "<-", "<<-", "->", "->>", "=",
        "==", "!=", "<", ">", "<=", ">=",
        "+", "-", "*", "/",
        "&", "&&", "|", "||",
        "~", "|>", ANY_PERCENT_OPERATOR,
    }
)

DEFAULT_NO_SPACE_OPERATORS = frozenset({"^", ":", "::"})

# Built-in constants that cannot follow the lowercase naming policy
DEFAULT_EXEMPT_IDENTIFIERS = frozenset(
    {
        "TRUE", "FALSE", "T", "F", "NULL", "NA", "Inf", "NaN",
        "NA_integer_", "NA_real_", "NA_character_", "NA_complex_",
    }
)


class LintConfig(BaseModel):
    """Immutable linter options, loaded once per run"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_line_length: int = Field(80, gt=0)
    allowed_identifier_charset: str = "[a-z0-9_]"
    no_space_operators: frozenset[str] = DEFAULT_NO_SPACE_OPERATORS
    spaced_operators: frozenset[str] = DEFAULT_SPACED_OPERATORS
    brace_same_line: bool = True
    exempt_identifiers: frozenset[str] = DEFAULT_EXEMPT_IDENTIFIERS
    select: tuple[str, ...] | None = None
    ignore: tuple[str, ...] = ()
    severity: dict[str, Severity] = Field(default_factory=dict)
    extensions: tuple[str, ...] = (".R", ".r")
    exclude: tuple[str, ...] = (".git", "renv", "packrat")

    @field_validator("allowed_identifier_charset")
    @classmethod
    def _charset_compiles(cls, value: str) -> str:
        try:
            re.compile(f"(?:{value})+")
        except re.error as exc:
            raise ValueError(f"invalid identifier charset {value!r}: {exc}") from exc
        return value

    @model_validator(mode="after")
    def _operator_sets_disjoint(self) -> "LintConfig":
        both = self.spaced_operators & self.no_space_operators
        if both:
            raise ValueError(
                f"operators listed as both spaced and no-space: {', '.join(sorted(both))}"
            )
        return self

    @property
    def identifier_pattern(self) -> re.Pattern:
        return re.compile(f"(?:{self.allowed_identifier_charset})+")

    @property
    def charset_pattern(self) -> re.Pattern:
        """Single-character form of the allowed charset"""
        return re.compile(self.allowed_identifier_charset)

    def severity_for(self, rule_id: str, default: Severity) -> Severity:
        return self.severity.get(rule_id, default)

    def wants_spaces(self, operator: str) -> bool:
        if operator in self.spaced_operators:
            return True
        return (
            ANY_PERCENT_OPERATOR in self.spaced_operators
            and len(operator) >= 2
            and operator.startswith("%")
            and operator.endswith("%")
        )

    def forbids_spaces(self, operator: str) -> bool:
        return operator in self.no_space_operators
