"""CLI commands exercised through click's test runner."""

import pytest
from click.testing import CliRunner

from sprig import __version__
from sprig.cli.main import cli, render_tree
from sprig.lexer import Lexer
from sprig.parser import Parser


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    def _write(text):
        path = tmp_path / "program.sp"
        path.write_text(text)
        return str(path)
    return _write


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_valid_file(runner, source_file):
    result = runner.invoke(cli, ["check", source_file("let x = 1 + 2;\nx * 3")])

    assert result.exit_code == 0
    assert "Syntax is valid" in result.output


def test_check_reports_errors_and_fails(runner, source_file):
    result = runner.invoke(cli, ["check", source_file("let = 1;\nreturn 2")])

    assert result.exit_code == 1
    assert "expected next token to be IDENT, got ASSIGN instead" in result.output
    assert "expected SEMICOLON after return statement, got end of input" in result.output


def test_check_missing_file(runner):
    result = runner.invoke(cli, ["check", "does-not-exist.sp"])
    assert result.exit_code != 0


def test_tokens_table(runner, source_file):
    result = runner.invoke(cli, ["tokens", source_file("let answer = 42;")])

    assert result.exit_code == 0
    for expected in ("LET", "IDENT", "answer", "ASSIGN", "INT", "42", "SEMICOLON"):
        assert expected in result.output


def test_ast_shows_tree_and_errors(runner, source_file):
    result = runner.invoke(cli, ["ast", source_file("let = 0;\nlet y = -a + 2;")])

    assert result.exit_code == 0
    assert "Parser Errors" in result.output
    assert "infix +" in result.output
    assert "prefix -" in result.output
    assert "identifier y" in result.output


def test_render_tree_labels():
    program = Parser(Lexer("return !x == 1;")).parse_program()
    tree = render_tree(program)

    (statement,) = tree.children
    assert "return" in str(statement.label)
    (infix,) = statement.children
    assert "infix ==" in str(infix.label)


def test_repl_parses_lines(runner):
    result = runner.invoke(cli, ["repl"], input="let x = 1 * 2 + 3;\n\nlet y = 5\nexit\n")

    assert result.exit_code == 0
    assert "let x = ((1 * 2) + 3);" in result.output
    assert "Error: expected SEMICOLON after let statement, got end of input" in result.output


def test_repl_token_mode(runner):
    result = runner.invoke(cli, ["repl", "--tokens"], input="x == 1\n")

    assert result.exit_code == 0
    assert 'IDENT, "x"' in result.output
    assert 'EQ, "=="' in result.output
    assert 'INT, "1"' in result.output
    assert "Goodbye" in result.output


def test_debug_flag_enables_parser_logging(runner, source_file, monkeypatch):
    from sprig.config import config

    monkeypatch.setattr(config, "_debug_level", "none")
    result = runner.invoke(cli, ["--debug", "check", source_file("1 + 1")])

    assert result.exit_code == 0
    assert config.debug_level == "verbose"


def test_render_tree_prefix_has_single_child():
    program = Parser(Lexer("-a * b")).parse_program()
    (statement,) = render_tree(program).children
    (infix,) = statement.children

    assert "infix *" in str(infix.label)
    prefix, right = infix.children
    assert "prefix -" in str(prefix.label)
    assert len(prefix.children) == 1
    assert "identifier b" in str(right.label)
