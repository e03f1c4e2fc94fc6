import pytest
from rstyle_linter.rules.naming import CaseRule

from conftest import messages


@pytest.mark.parametrize("name", ["x", "mean_score", "df2", "a_1_b", "n_obs_2024", "x_"])
def test_valid_identifiers_pass(check, name):
    assert check(CaseRule, f"{name} <- {name} + 1\n") == []


@pytest.mark.parametrize(
    "source, expected",
    [
        ("myVar <- 1\n", "identifier 'myVar' contains uppercase letter 'V'"),
        ("X <- 2\n", "identifier 'X' contains uppercase letter 'X'"),
        ("my.var <- 1\n", "identifier 'my.var' contains '.', use '_' to separate words"),
        ("my-var <- 1\n", "name 'my-var' joins words with '-', use '_'"),
        ("my-Var.two-x <- 1\n", "name 'my-Var.two-x' joins words with '-', use '_'"),
        ("café <- 1\n", "identifier 'café' contains disallowed character 'é'"),
    ],
)
def test_offending_identifier_reported_once(check, source, expected):
    violations = check(CaseRule, source)
    assert messages(violations) == [expected]
    assert (violations[0].line, violations[0].column) == (1, 1)


def test_each_occurrence_is_reported(check):
    violations = check(CaseRule, "totalCount <- 0\ntotalCount <- totalCount + 1\n")
    assert [(v.line, v.column) for v in violations] == [(1, 1), (2, 1), (2, 15)]


def test_strings_and_comments_are_ignored(check):
    source = 'label <- "MyString" # CamelCase in a comment\n`My Column` <- 1\n'
    assert check(CaseRule, source) == []


def test_constants_and_dots_are_exempt(check):
    source = "f <- function(x, ...) {\n  if (is_na(x)) NA_real_ else TRUE\n  ..1\n}\n"
    assert check(CaseRule, source) == []


def test_formula_dot_is_exempt(check):
    assert check(CaseRule, "fit <- lm(y ~ ., data = d)\n") == []


def test_namespace_and_member_names_are_exempt(check):
    source = "m <- stats::median(df$Value)\ndt <- data.table::fread(path)\nobj@Slot\n"
    assert check(CaseRule, source) == []


def test_custom_charset(check):
    source = "myVar <- 1\nmy.var <- 2\n"
    violations = check(CaseRule, source, allowed_identifier_charset="[a-zA-Z0-9_]")
    assert messages(violations) == ["identifier 'my.var' contains '.', use '_' to separate words"]


def test_subtraction_with_spaces_is_not_a_name(check):
    assert check(CaseRule, "diff <- end - start\n") == []
