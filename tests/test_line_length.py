from rstyle_linter.rules.line_length import LineLengthRule

from conftest import make_context


def test_boundary_80_passes(check):
    assert check(LineLengthRule, "a" * 80 + "\n") == []


def test_boundary_81_flagged(check):
    violations = check(LineLengthRule, "a" * 81 + "\n")
    assert len(violations) == 1
    assert (violations[0].line, violations[0].column) == (1, 81)
    assert violations[0].message == "line is 81 characters long (limit 80)"


def test_crlf_terminator_not_counted(check):
    assert check(LineLengthRule, "a" * 80 + "\r\n" + "b\r\n") == []


def test_last_line_without_newline(check):
    violations = check(LineLengthRule, "x <- 1\n" + "b" * 90)
    assert [(v.line, v.column) for v in violations] == [(2, 81)]


def test_threshold_is_configurable(check):
    source = "short <- 1\nlonger_name <- 2\n"
    violations = check(LineLengthRule, source, max_line_length=12)
    assert [v.line for v in violations] == [2]


def test_violation_points_into_a_token(check):
    source = 'x <- "' + "a" * 90 + '\nb"\n'
    violations = check(LineLengthRule, source)
    assert [(v.line, v.column) for v in violations] == [(1, 81)]

    token = make_context(source).token_at(1, 81)
    assert token is not None
    assert token.text.startswith('"aaa')


def test_default_severity_is_warning(check):
    violations = check(LineLengthRule, "a" * 81 + "\n")
    assert violations[0].severity.value == "warning"
