from enum import Enum

from rstyle_scanner import Token, TokenKind

from ..context import LintContext
from ..models import Severity, Violation
from .base import BaseRule

# Keywords written with one space before their parenthesised header
SPACED_KEYWORDS = ("if", "for", "while", "switch")

# Identifiers that may be followed by a space and then `(`
NON_CALL_KEYWORDS = (
    "if", "for", "while", "switch", "function", "in", "else", "repeat", "return",
)

UNARY_OPERATORS = ("-", "+", "~", "!")

# A unary operator follows one of these (or starts the file)
OPERAND_OPENERS = ("(", "[", "{", ",", ";")
OPERAND_KEYWORDS = ("in", "else", "repeat")

# `if (cond) -1` and `function(x) -x`: the header's `)` is followed by an operand
HEADER_KEYWORDS = ("if", "for", "while", "function")


class Gap(Enum):
    """What separates a token from its neighbour on one side"""

    NONE = "none"
    ONE = "one"
    MANY = "many"
    BREAK = "break"  # line start/end, comment, or file boundary


class SpacingRule(BaseRule):
    """Spaces around infix operators, after commas and keywords, none inside brackets."""

    @property
    def rule_id(self) -> str:
        return "operator-spacing"

    @property
    def name(self) -> str:
        return "Operator spacing"

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        return (
            "One space around infix operators such as '<-', '==' and '+', none around "
            "'^', ':' and '::'; a space after ',' and after 'if'/'for'/'while'/'switch'; "
            "no space inside brackets"
        )

    def evaluate(self, context: LintContext) -> list[Violation]:
        violations: list[Violation] = []

        for i, token in enumerate(context.tokens):
            if token.kind is TokenKind.OPERATOR:
                violations.extend(self._check_operator(context, i, token))
            elif token.kind is TokenKind.PUNCTUATION:
                violations.extend(self._check_punctuation(context, i, token))
            elif token.kind is TokenKind.IDENTIFIER:
                violations.extend(self._check_keyword(context, i, token))

        return violations

    # -- gaps ---------------------------------------------------------------

    @staticmethod
    def _gap_before(context: LintContext, index: int) -> Gap:
        prev = context.neighbour(index, -1)
        if prev is None or prev.kind is TokenKind.NEWLINE:
            return Gap.BREAK
        if prev.kind is TokenKind.WHITESPACE:
            before = context.neighbour(index, -2)
            if before is None or before.kind is TokenKind.NEWLINE:
                return Gap.BREAK  # indentation
            return Gap.ONE if prev.text == " " else Gap.MANY
        return Gap.NONE

    @staticmethod
    def _gap_after(context: LintContext, index: int) -> Gap:
        nxt = context.neighbour(index, 1)
        if nxt is None or nxt.kind in (TokenKind.NEWLINE, TokenKind.COMMENT):
            return Gap.BREAK
        if nxt.kind is TokenKind.WHITESPACE:
            after = context.neighbour(index, 2)
            if after is None or after.kind in (TokenKind.NEWLINE, TokenKind.COMMENT):
                return Gap.BREAK  # trailing space or space before a comment
            return Gap.ONE if nxt.text == " " else Gap.MANY
        return Gap.NONE

    def _is_unary(self, context: LintContext, index: int) -> bool:
        if context.tokens[index].text not in UNARY_OPERATORS:
            return False
        prev = context.prev_significant(index)
        if prev is None:
            return True
        token = context.tokens[prev]
        if token.kind is TokenKind.OPERATOR:
            return True
        if token.is_punct(*OPERAND_OPENERS):
            return True
        if token.is_punct(")"):
            return self._closes_header(context, prev)
        return token.kind is TokenKind.IDENTIFIER and token.text in OPERAND_KEYWORDS

    @staticmethod
    def _closes_header(context: LintContext, index: int) -> bool:
        opener = context.matching_open(index)
        if opener is None:
            return False
        keyword = context.prev_significant(opener)
        if keyword is None:
            return False
        token = context.tokens[keyword]
        return token.kind is TokenKind.IDENTIFIER and token.text in HEADER_KEYWORDS

    # -- checks -------------------------------------------------------------

    def _check_operator(self, context: LintContext, index: int, token: Token) -> list[Violation]:
        op = token.text
        found = []

        if self.config.forbids_spaces(op):
            if self._gap_before(context, index) in (Gap.ONE, Gap.MANY):
                found.append(self._create_violation(context, token, f"unexpected space before '{op}'"))
            if self._gap_after(context, index) in (Gap.ONE, Gap.MANY):
                found.append(self._create_violation(context, token, f"unexpected space after '{op}'"))
            return found

        if not self.config.wants_spaces(op) or self._is_unary(context, index):
            return found

        before = self._gap_before(context, index)
        if before is Gap.NONE:
            found.append(self._create_violation(context, token, f"missing space before '{op}'"))
        elif before is Gap.MANY:
            found.append(self._create_violation(context, token, f"extra space before '{op}'"))

        after = self._gap_after(context, index)
        if after is Gap.NONE:
            found.append(self._create_violation(context, token, f"missing space after '{op}'"))
        elif after is Gap.MANY:
            found.append(self._create_violation(context, token, f"extra space after '{op}'"))
        return found

    def _check_punctuation(self, context: LintContext, index: int, token: Token) -> list[Violation]:
        text = token.text
        found = []

        if text in ("(", "["):
            if self._gap_after(context, index) in (Gap.ONE, Gap.MANY):
                found.append(self._create_violation(context, token, f"unexpected space after '{text}'"))
            if text == "(" and self._is_spaced_call(context, index):
                found.append(self._create_violation(context, token, "unexpected space before '('"))

        elif text in (")", "]"):
            if self._gap_before(context, index) in (Gap.ONE, Gap.MANY) and not self._follows_comma(
                context, index
            ):
                found.append(self._create_violation(context, token, f"unexpected space before '{text}'"))

        elif text == ",":
            prev = context.prev_significant(index)
            empty_arg = prev is not None and context.tokens[prev].is_punct("[", ",")
            if self._gap_before(context, index) in (Gap.ONE, Gap.MANY) and not empty_arg:
                found.append(self._create_violation(context, token, "unexpected space before ','"))
            after = self._gap_after(context, index)
            nxt = context.neighbour(index, 1)
            if after is Gap.NONE and not nxt.is_punct(")", "]", ","):
                found.append(self._create_violation(context, token, "missing space after ','"))
            elif after is Gap.MANY:
                found.append(self._create_violation(context, token, "extra space after ','"))

        elif text == "{":
            prev = context.neighbour(index, -1)
            if prev is not None and self._opens_block(prev):
                found.append(self._create_violation(context, token, "missing space before '{'"))
            elif self._gap_before(context, index) is Gap.MANY:
                opener = context.neighbour(index, -2)
                if opener is not None and self._opens_block(opener):
                    found.append(self._create_violation(context, token, "extra space before '{'"))

        return found

    def _check_keyword(self, context: LintContext, index: int, token: Token) -> list[Violation]:
        found = []
        nxt = context.neighbour(index, 1)
        if nxt is None:
            return found

        if token.text in SPACED_KEYWORDS:
            if nxt.is_punct("("):
                found.append(self._create_violation(context, token, f"missing space after '{token.text}'"))
            elif nxt.kind is TokenKind.WHITESPACE and nxt.text != " ":
                paren = context.neighbour(index, 2)
                if paren is not None and paren.is_punct("("):
                    found.append(self._create_violation(context, token, f"extra space after '{token.text}'"))

        elif token.text == "function" and nxt.kind is TokenKind.WHITESPACE:
            paren = context.neighbour(index, 2)
            if paren is not None and paren.is_punct("("):
                found.append(self._create_violation(context, token, "unexpected space after 'function'"))

        elif token.text == "else":
            prev = context.neighbour(index, -1)
            if prev is not None and prev.is_punct("}"):
                found.append(self._create_violation(context, token, "missing space before 'else'"))

        return found

    @staticmethod
    def _opens_block(token: Token) -> bool:
        if token.is_punct(")"):
            return True
        return token.kind is TokenKind.IDENTIFIER and token.text in ("else", "repeat")

    def _is_spaced_call(self, context: LintContext, index: int) -> bool:
        """`mean (x)`: a function name separated from its argument list"""
        prev = context.neighbour(index, -1)
        if prev is None or prev.kind is not TokenKind.WHITESPACE:
            return False
        name = context.neighbour(index, -2)
        return (
            name is not None
            and name.kind is TokenKind.IDENTIFIER
            and name.text not in NON_CALL_KEYWORDS
        )

    @staticmethod
    def _follows_comma(context: LintContext, index: int) -> bool:
        """`x[1, ]` leaves an empty argument after the comma"""
        prev = context.prev_significant(index)
        return prev is not None and context.tokens[prev].is_punct(",")
