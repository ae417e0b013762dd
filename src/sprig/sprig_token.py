# src/sprig/sprig_token.py
"""Token kinds and the Token value produced by the lexer."""

from dataclasses import dataclass, field
from enum import Enum


class TokenType(Enum):
    # Special
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    SEMICOLON = ";"
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    LET = "LET"
    RETURN = "RETURN"

    def __str__(self):
        return self.name


ILLEGAL = TokenType.ILLEGAL
EOF = TokenType.EOF
IDENT = TokenType.IDENT
INT = TokenType.INT
ASSIGN = TokenType.ASSIGN
PLUS = TokenType.PLUS
MINUS = TokenType.MINUS
BANG = TokenType.BANG
ASTERISK = TokenType.ASTERISK
SLASH = TokenType.SLASH
LT = TokenType.LT
GT = TokenType.GT
EQ = TokenType.EQ
NOT_EQ = TokenType.NOT_EQ
SEMICOLON = TokenType.SEMICOLON
COMMA = TokenType.COMMA
LPAREN = TokenType.LPAREN
RPAREN = TokenType.RPAREN
LBRACE = TokenType.LBRACE
RBRACE = TokenType.RBRACE
LET = TokenType.LET
RETURN = TokenType.RETURN

KEYWORDS = {
    "let": LET,
    "return": RETURN,
}

# Single-character tokens; '=' and '!' are handled separately for '==' and '!='
SINGLE_CHAR_TOKENS = {
    "+": PLUS,
    "-": MINUS,
    "*": ASTERISK,
    "/": SLASH,
    "<": LT,
    ">": GT,
    ";": SEMICOLON,
    ",": COMMA,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
}


def lookup_ident(ident):
    """Return the keyword type for ``ident``, or IDENT."""
    return KEYWORDS.get(ident, IDENT)


@dataclass(frozen=True)
class Token:
    type: TokenType
    literal: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __str__(self):
        return f"{self.type.name}({self.literal!r})"

    def __repr__(self):
        return f"Token({self.type.name}, {self.literal!r}, line={self.line}, column={self.column})"


__all__ = [
    "Token", "TokenType", "KEYWORDS", "SINGLE_CHAR_TOKENS", "lookup_ident",
    "ILLEGAL", "EOF", "IDENT", "INT", "ASSIGN", "PLUS", "MINUS", "BANG",
    "ASTERISK", "SLASH", "LT", "GT", "EQ", "NOT_EQ", "SEMICOLON", "COMMA",
    "LPAREN", "RPAREN", "LBRACE", "RBRACE", "LET", "RETURN",
]
