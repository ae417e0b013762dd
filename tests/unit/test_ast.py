"""AST node construction, rendering and immutability."""

import dataclasses

import pytest

from sprig.sprig_ast import (
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    Operator,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from sprig.sprig_token import ASTERISK, BANG, IDENT, INT, LET, MINUS, RETURN, Token


def ident(name):
    return Identifier(token=Token(IDENT, name), value=name)


def integer(value):
    return IntegerLiteral(token=Token(INT, str(value)), value=value)


def test_hand_built_program_renders():
    program = Program(statements=(
        LetStatement(token=Token(LET, "let"), name=ident("myVar"), value=ident("anotherVar")),
        ReturnStatement(
            token=Token(RETURN, "return"),
            return_value=InfixExpression(
                token=Token(ASTERISK, "*"),
                left=PrefixExpression(token=Token(MINUS, "-"), operator=Operator.NEGATE, right=integer(2)),
                operator=Operator.MULTIPLY,
                right=ident("x"),
            ),
        ),
    ))

    assert str(program) == "let myVar = anotherVar;\nreturn ((-2) * x);"
    assert program.token_literal() == "let"


def test_expression_statement_renders_its_expression():
    statement = ExpressionStatement(
        token=Token(BANG, "!"),
        expression=PrefixExpression(token=Token(BANG, "!"), operator=Operator.NOT, right=ident("ok")),
    )

    assert str(statement) == "(!ok)"
    assert statement.token_literal() == "!"


def test_statement_and_expression_are_disjoint():
    assert issubclass(LetStatement, Statement)
    assert issubclass(ReturnStatement, Statement)
    assert issubclass(ExpressionStatement, Statement)
    for cls in (Identifier, IntegerLiteral, PrefixExpression, InfixExpression):
        assert issubclass(cls, Expression)
        assert not issubclass(cls, Statement)


def test_nodes_are_immutable():
    node = integer(5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = 6

    program = Program(statements=(ExpressionStatement(token=node.token, expression=node),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        program.statements = ()


def test_structurally_equal_trees_compare_equal():
    assert integer(5) == integer(5)
    assert ident("a") != ident("b")


def test_operator_fixity_and_symbols():
    prefix = [op for op in Operator if op.is_prefix]
    infix = [op for op in Operator if not op.is_prefix]

    assert prefix == [Operator.NEGATE, Operator.NOT]
    assert [str(op) for op in infix] == ["+", "-", "*", "/", "==", "!=", "<", ">"]
    assert Operator.NEGATE is not Operator.MINUS
    assert Operator.NEGATE.symbol == Operator.MINUS.symbol == "-"
