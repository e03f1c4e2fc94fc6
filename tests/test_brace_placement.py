from rstyle_linter.rules.braces import BracePlacementRule

from conftest import BAD_IF, GOOD_IF, messages


def test_guide_example_bad_form(check):
    violations = check(BracePlacementRule, BAD_IF)
    assert [(v.column, v.message) for v in violations] == [
        (10, "statement should start on a new line after '{'"),
        (34, "closing '}' should be on its own line"),
    ]


def test_guide_example_good_form(check):
    assert check(BracePlacementRule, GOOD_IF) == []


def test_brace_on_next_line(check):
    violations = check(BracePlacementRule, "if (x)\n{\n  y\n}\n")
    assert messages(violations) == ["opening '{' should be on the same line as 'if'"]
    assert (violations[0].line, violations[0].column) == (2, 1)


def test_function_and_loops(check):
    source = "f <- function(a)\n{\n  for (i in a)\n  {\n    print(i)\n  }\n}\n"
    assert messages(check(BracePlacementRule, source)) == [
        "opening '{' should be on the same line as 'function'",
        "opening '{' should be on the same line as 'for'",
    ]


def test_multiline_header(check):
    assert check(BracePlacementRule, "if (a &&\n    b) {\n  c\n}\n") == []


def test_brace_on_own_line_when_configured(check):
    assert check(BracePlacementRule, "if (x)\n{\n  y\n}\n", brace_same_line=False) == []
    assert messages(check(BracePlacementRule, GOOD_IF, brace_same_line=False)) == [
        "opening '{' should start its own line after 'if'"
    ]


def test_else_must_follow_closing_brace(check):
    source = "if (a) {\n  b\n}\nelse {\n  c\n}\n"
    violations = check(BracePlacementRule, source)
    assert messages(violations) == ["'else' should be on the same line as the preceding '}'"]
    assert (violations[0].line, violations[0].column) == (4, 1)
    assert check(BracePlacementRule, "if (a) {\n  b\n} else if (c) {\n  d\n}\n") == []


def test_one_line_block(check):
    violations = check(BracePlacementRule, "f <- function(x) { x }\n")
    assert [(v.column, v.message) for v in violations] == [
        (20, "statement should start on a new line after '{'"),
        (22, "closing '}' should be on its own line"),
    ]


def test_empty_block_and_trailing_comment(check):
    assert check(BracePlacementRule, "noop <- function() {}\n") == []
    assert check(BracePlacementRule, "g <- function() { # why\n  1\n}\n") == []


def test_callback_closing_brace(check):
    assert check(BracePlacementRule, "lapply(x, function(i) {\n  i\n})\n") == []


def test_semicolon_packing(check):
    violations = check(BracePlacementRule, "x <- 1; y <- 2\nz <- 3;\n")
    assert [(v.line, v.column, v.message) for v in violations] == [
        (1, 7, "multiple statements on one line"),
    ]
