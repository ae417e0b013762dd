# src/sprig/lexer.py
import logging

from .sprig_token import *

logger = logging.getLogger(__name__)


class Lexer:
    """Turns source text into tokens, one ``next_token()`` call at a time.

    Once the input is exhausted every further call returns an EOF token.
    """

    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self):
        if self.ch == "\n":
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        # Skip whitespace and line comments (both # and // styles)
        while True:
            self.skip_whitespace()
            if self.ch == "#" or (self.ch == "/" and self.peek_char() == "/"):
                self.skip_comment()
                continue
            break

        line, column = self.line, self.column

        if self.ch == "":
            return Token(EOF, "", line, column)

        if self.ch == "=":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(EQ, "==", line, column)
            else:
                tok = Token(ASSIGN, "=", line, column)
        elif self.ch == "!":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(NOT_EQ, "!=", line, column)
            else:
                tok = Token(BANG, "!", line, column)
        elif self.ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.is_letter(self.ch):
            # read_identifier leaves ch on the first character after the word
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)
        elif self.is_digit(self.ch):
            return Token(INT, self.read_number(), line, column)
        else:
            logger.debug("%s:%d:%d: illegal character %r", self.filename, line, column, self.ch)
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def __iter__(self):
        while True:
            tok = self.next_token()
            if tok.type == EOF:
                return
            yield tok

    def skip_comment(self):
        while self.ch != "\n" and self.ch != "":
            self.read_char()

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def is_letter(self, char):
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    def is_digit(self, char):
        return "0" <= char <= "9"

    def skip_whitespace(self):
        while self.ch in (" ", "\t", "\n", "\r"):
            self.read_char()


class TokenStream:
    """Token source over an already-built sequence of tokens.

    Handy for replaying lexer output into a parser, and for feeding the
    parser hand-made tokens. After the sequence runs out, EOF is returned
    indefinitely.
    """

    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self._done = False

    def next_token(self):
        if not self._done:
            tok = next(self._tokens, None)
            if tok is not None and tok.type != EOF:
                return tok
            self._done = True
        return Token(EOF, "")
