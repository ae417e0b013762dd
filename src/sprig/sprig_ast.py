# src/sprig/sprig_ast.py
"""AST nodes produced by :class:`sprig.parser.Parser`.

Every node is immutable once built. Composite nodes own their children
outright; nothing points back up the tree. ``str(node)`` renders the
structure with every prefix and infix expression fully parenthesised,
which is what the tests compare against.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .sprig_token import Token


class Operator(Enum):
    """Operators the grammar knows about, tagged with their fixity."""

    NEGATE = ("-", "prefix")
    NOT = ("!", "prefix")
    PLUS = ("+", "infix")
    MINUS = ("-", "infix")
    MULTIPLY = ("*", "infix")
    DIVIDE = ("/", "infix")
    EQ = ("==", "infix")
    NOT_EQ = ("!=", "infix")
    LT = ("<", "infix")
    GT = (">", "infix")

    def __init__(self, symbol, fixity):
        self.symbol = symbol
        self.fixity = fixity

    @property
    def is_prefix(self):
        return self.fixity == "prefix"

    def __str__(self):
        return self.symbol


# Base classes
class Node:
    token: Token

    def token_literal(self) -> str:
        return self.token.literal


class Statement(Node):
    pass


class Expression(Node):
    pass


@dataclass(frozen=True)
class Program(Node):
    statements: Tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self):
        return "\n".join(str(stmt) for stmt in self.statements)


# Expression nodes
@dataclass(frozen=True)
class Identifier(Expression):
    token: Token
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    token: Token
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class PrefixExpression(Expression):
    token: Token
    operator: Operator
    right: Expression

    def __str__(self):
        return f"({self.operator}{self.right})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    token: Token
    left: Expression
    operator: Operator
    right: Expression

    def __str__(self):
        return f"({self.left} {self.operator} {self.right})"


# Statement nodes
@dataclass(frozen=True)
class LetStatement(Statement):
    token: Token
    name: Identifier
    value: Expression

    def __str__(self):
        return f"{self.token_literal()} {self.name} = {self.value};"


@dataclass(frozen=True)
class ReturnStatement(Statement):
    token: Token
    return_value: Expression

    def __str__(self):
        return f"{self.token_literal()} {self.return_value};"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    token: Token
    expression: Expression

    def __str__(self):
        return str(self.expression)


__all__ = [
    "Operator", "Node", "Statement", "Expression", "Program",
    "Identifier", "IntegerLiteral", "PrefixExpression", "InfixExpression",
    "LetStatement", "ReturnStatement", "ExpressionStatement",
]
