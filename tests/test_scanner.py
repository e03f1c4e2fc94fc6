import pytest
from rstyle_scanner import ScanError, TokenKind, TokenStream, tokenize


def kinds(source):
    return [(t.kind, t.text) for t in tokenize(source)]


def test_tokenize_assignment():
    assert kinds("x <- 1") == [
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.OPERATOR, "<-"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.NUMBER, "1"),
    ]


def test_positions_are_one_based():
    tokens = list(tokenize("a\n  bb"))
    assert [(t.text, t.line, t.column) for t in tokens] == [
        ("a", 1, 1),
        ("\n", 1, 2),
        ("  ", 2, 1),
        ("bb", 2, 3),
    ]


@pytest.mark.parametrize(
    "source",
    [
        'if(x==1){print("x is equal to 1")}',
        "x <- c(1, 2)\r\ny<-x^2 # square\n",
        "f <- function(a, ...) {\n  a %in% c('a', \"b\\\"\")\n}\n",
        's <- r"(a "quoted" \\ path)"\n',
        "\tz <- .5e-3L;  w = 0x1F\n\n",
        "`odd name` <- x$Value@slot[[1]] |> stats::sd()\n",
        "",
    ],
)
def test_round_trip(source):
    assert "".join(t.text for t in tokenize(source)) == source


def test_tokens_strictly_ascending():
    tokens = list(tokenize("a <- 'x\ny'\nb <- 2\n"))
    positions = [(t.line, t.column) for t in tokens]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)


def test_operators_longest_match():
    source = "a<<-b; c->>d; e:::f; g::h; x %>% y; i|>j; k<=l"
    ops = [t.text for t in tokenize(source) if t.kind is TokenKind.OPERATOR]
    assert ops == ["<<-", "->>", ":::", "::", "%>%", "|>", "<="]


def test_number_forms():
    nums = [t.text for t in tokenize("1 2L .5 1e-3 0x1F 3i 1.5") if t.kind is TokenKind.NUMBER]
    assert nums == ["1", "2L", ".5", "1e-3", "0x1F", "3i", "1.5"]


def test_dotted_names_are_single_identifiers():
    idents = [t.text for t in tokenize("is.na(x); f(...); ..1") if t.kind is TokenKind.IDENTIFIER]
    assert idents == ["is.na", "x", "f", "...", "..1"]


def test_comment_stops_before_crlf():
    tokens = list(tokenize("x # note\r\ny"))
    assert [t.kind for t in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.WHITESPACE,
        TokenKind.COMMENT,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
    ]
    assert tokens[2].text == "# note"
    assert tokens[3].text == "\r\n"
    assert (tokens[4].line, tokens[4].column) == (2, 1)


def test_multiline_string_positions():
    tokens = list(tokenize('s <- "a\nb"\nt'))
    string = tokens[4]
    assert string.kind is TokenKind.STRING
    assert (string.line, string.column) == (1, 6)
    assert (string.end_line, string.end_column) == (2, 2)
    assert (tokens[-1].line, tokens[-1].column) == (3, 1)


def test_raw_string_is_one_token():
    tokens = list(tokenize('s <- r"(a "quoted" \\ path)"\n'))
    assert tokens[4].kind is TokenKind.STRING
    assert tokens[4].text == 'r"(a "quoted" \\ path)"'


def test_backtick_name_is_quoted():
    tokens = list(tokenize("`My Var` <- 1"))
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].text == "`My Var`"


def test_unterminated_string_reports_start():
    with pytest.raises(ScanError) as exc_info:
        list(tokenize('x <- 1\ny <- "oops\n'))
    assert exc_info.value.line == 2
    assert exc_info.value.column == 6
    assert "unterminated string" in exc_info.value.reason


@pytest.mark.parametrize("source", ["`name", "a %in b", "a %in\nb", "r'(never closed'", "x <- £"])
def test_scan_errors(source):
    with pytest.raises(ScanError):
        list(tokenize(source))


def test_leading_underscore_is_rejected():
    with pytest.raises(ScanError) as exc_info:
        list(tokenize("x <- _tmp\n"))
    assert (exc_info.value.line, exc_info.value.column) == (1, 6)
    assert exc_info.value.reason == "unexpected character '_'"


def test_tokenize_is_lazy():
    stream = tokenize('x <- 1\n"unterminated')
    first = next(stream)
    assert first.text == "x"


def test_token_stream_restartable():
    stream = TokenStream("a <- b\n")
    first = list(stream)
    second = list(stream)
    assert first == second
    assert len(first) == 6
