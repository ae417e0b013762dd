# src/sprig/parser/parser.py
import logging
from enum import IntEnum

from ..sprig_token import *
from ..sprig_ast import *
from ..config import config
from ..errors import SprigSyntaxError
from ..lexer import Lexer

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2
    LESSGREATER = 3
    SUM = 4
    PRODUCT = 5
    PREFIX = 6
    CALL = 7


LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL = Precedence

precedences = {
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    ASTERISK: PRODUCT, SLASH: PRODUCT,
}

prefix_operators = {
    MINUS: Operator.NEGATE,
    BANG: Operator.NOT,
}

infix_operators = {
    PLUS: Operator.PLUS,
    MINUS: Operator.MINUS,
    ASTERISK: Operator.MULTIPLY,
    SLASH: Operator.DIVIDE,
    EQ: Operator.EQ,
    NOT_EQ: Operator.NOT_EQ,
    LT: Operator.LT,
    GT: Operator.GT,
}


class Parser:
    """Pratt parser over any token source exposing ``next_token()``.

    ``parse_program()`` always returns a Program. Statements that fail to
    parse are dropped and described in ``errors``; parsing then resumes at
    the next statement boundary.

    Every parse method that builds a node advances past the tokens it
    consumed, so once an expression is parsed ``cur_token`` is the first
    token that is not part of it. A return value of None means the rule
    failed and a diagnostic has been recorded.
    """

    def __init__(self, lexer):
        self.lexer = lexer
        self._errors = []
        self._consumed = 0
        self.cur_token = None
        self.peek_token = None

        self.prefix_parse_fns = {
            IDENT: self.parse_identifier,
            INT: self.parse_integer_literal,
            BANG: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
        }
        self.infix_parse_fns = {
            token_type: self.parse_infix_expression for token_type in infix_operators
        }

        self.next_token()
        self.next_token()

    @property
    def errors(self):
        """Diagnostics from the most recent ``parse_program()`` call."""
        return list(self._errors)

    def _log(self, message, level="verbose"):
        if config.should_log(level):
            logger.debug(message)

    def _error(self, message):
        self._log(f"parse error: {message}", "normal")
        self._errors.append(message)

    def parse_program(self):
        self._errors = []
        statements = []

        while not self.cur_token_is(EOF):
            start = self._consumed
            try:
                stmt = self.parse_statement()
            except RecursionError:
                self._error(f"expression nested too deeply near {self.describe(self.cur_token)}")
                stmt = None
            if stmt is not None:
                statements.append(stmt)
            else:
                self.synchronize(start)

        program = Program(statements=tuple(statements))
        self._log(f"parsed {len(program.statements)} statements, {len(self._errors)} errors", "minimal")
        return program

    def parse_statement(self):
        self._log(f"statement at {self.cur_token}")
        if self.cur_token_is(LET):
            return self.parse_let_statement()
        elif self.cur_token_is(RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self):
        token = self.cur_token

        if not self.expect_peek(IDENT):
            return None

        name = Identifier(token=self.cur_token, value=self.cur_token.literal)

        if not self.expect_peek(ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            return None

        # A let without its ';' is dropped even though the value parsed
        if not self.cur_token_is(SEMICOLON):
            self.terminator_error("let statement")
            return None
        self.next_token()

        return LetStatement(token=token, name=name, value=value)

    def parse_return_statement(self):
        token = self.cur_token
        self.next_token()

        return_value = self.parse_expression(LOWEST)
        if return_value is None:
            return None

        if not self.cur_token_is(SEMICOLON):
            self.terminator_error("return statement")
            return None
        self.next_token()

        return ReturnStatement(token=token, return_value=return_value)

    def parse_expression_statement(self):
        token = self.cur_token
        expression = self.parse_expression(LOWEST)
        if expression is None:
            return None

        # Semicolons are optional here
        if self.cur_token_is(SEMICOLON):
            self.next_token()

        return ExpressionStatement(token=token, expression=expression)

    def parse_expression(self, precedence):
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.type)
            return None

        left_exp = prefix()
        if left_exp is None:
            return None

        while not self.cur_token_is(SEMICOLON) and precedence < self.cur_precedence():
            infix = self.infix_parse_fns.get(self.cur_token.type)
            if infix is None:
                return left_exp

            left_exp = infix(left_exp)
            if left_exp is None:
                return None

        return left_exp

    def parse_identifier(self):
        ident = Identifier(token=self.cur_token, value=self.cur_token.literal)
        self.next_token()
        return ident

    def parse_integer_literal(self):
        token = self.cur_token
        literal = token.literal
        # Length check first: int() refuses very long digit strings
        digits = literal.lstrip("0") or "0"
        if (not (literal.isascii() and literal.isdigit())
                or len(digits) > len(str(config.max_int))
                or int(digits) > config.max_int):
            self._error(f"could not parse {literal!r} as integer")
            return None

        self.next_token()
        return IntegerLiteral(token=token, value=int(digits))

    def parse_prefix_expression(self):
        token = self.cur_token
        operator = prefix_operators[token.type]
        self.next_token()

        right = self.parse_expression(PREFIX)
        if right is None:
            return None

        return PrefixExpression(token=token, operator=operator, right=right)

    def parse_infix_expression(self, left):
        token = self.cur_token
        operator = infix_operators[token.type]
        precedence = self.cur_precedence()
        self.next_token()

        right = self.parse_expression(precedence)
        if right is None:
            return None

        return InfixExpression(token=token, left=left, operator=operator, right=right)

    # === ERROR RECOVERY ===
    def synchronize(self, start):
        """Skip to the next statement boundary after a failed statement.

        ``start`` is the token count when the statement began; if the rule
        consumed nothing, the offending token is skipped first so the loop
        always makes progress.
        """
        if self._consumed == start and not self.cur_token_is(EOF):
            skipped = self.cur_token
            self.next_token()
            if skipped.type == SEMICOLON:
                return

        while not self.cur_token_is(EOF):
            if self.cur_token_is(SEMICOLON):
                self.next_token()
                return
            if self.cur_token_is(LET) or self.cur_token_is(RETURN):
                return
            self.next_token()

    def peek_error(self, t):
        self._error(f"expected next token to be {t}, got {self.describe(self.peek_token)} instead")

    def terminator_error(self, statement):
        self._error(f"expected {SEMICOLON} after {statement}, got {self.describe(self.cur_token)}")

    def no_prefix_parse_fn_error(self, t):
        if t == EOF:
            self._error("no prefix parse function for end of input found")
        else:
            self._error(f"no prefix parse function for {t} found")

    @staticmethod
    def describe(token):
        if token.type == EOF:
            return "end of input"
        return str(token.type)

    # === TOKEN UTILITIES ===
    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        self._consumed += 1

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t):
        if self.peek_token_is(t):
            self.next_token()
            return True
        self.peek_error(t)
        return False

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)


def parse(source, filename="<stdin>"):
    """Lex and parse ``source``, raising SprigSyntaxError on any diagnostic."""
    parser = Parser(Lexer(source, filename=filename))
    program = parser.parse_program()
    if parser.errors:
        raise SprigSyntaxError(parser.errors, filename=filename)
    return program
