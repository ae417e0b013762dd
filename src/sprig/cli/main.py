# src/sprig/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from .. import __version__
from ..config import config
from ..errors import SprigSyntaxError
from ..lexer import Lexer
from ..parser import Parser, parse
from ..sprig_ast import (
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    ReturnStatement,
)

PROMPT = ">> "

console = Console()


def _read_source(file):
    with open(file, "r") as f:
        return f.read()


def _print_errors(errors, header="Parser Errors:"):
    console.print(f"[bold red]{header}[/bold red]")
    for error in errors:
        console.print(f"  ❌ {error}", markup=False)


def _add_node(branch, node):
    if isinstance(node, LetStatement):
        sub = branch.add("[magenta]let[/magenta]")
        _add_node(sub, node.name)
        _add_node(sub, node.value)
    elif isinstance(node, ReturnStatement):
        sub = branch.add("[magenta]return[/magenta]")
        _add_node(sub, node.return_value)
    elif isinstance(node, ExpressionStatement):
        sub = branch.add("[magenta]expression[/magenta]")
        _add_node(sub, node.expression)
    elif isinstance(node, (PrefixExpression, InfixExpression)):
        operator = node.operator
        sub = branch.add(f"[yellow]{operator.fixity} {operator}[/yellow]")
        if not operator.is_prefix:
            _add_node(sub, node.left)
        _add_node(sub, node.right)
    elif isinstance(node, Identifier):
        branch.add(f"[cyan]identifier[/cyan] {node.value}")
    elif isinstance(node, IntegerLiteral):
        branch.add(f"[green]int[/green] {node.value}")
    else:
        branch.add(repr(node))


def render_tree(program):
    """Build a rich Tree mirroring the program's statements."""
    tree = Tree("[bold blue]program[/bold blue]")
    for stmt in program.statements:
        _add_node(tree, stmt)
    return tree


@click.group()
@click.version_option(version=__version__, prog_name="Sprig")
@click.option("--debug", is_flag=True, help="Log parser decisions to stderr.")
def cli(debug):
    """Sprig - lexer and Pratt parser for a tiny expression language"""
    if debug:
        config.debug_level = "verbose"
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Sprig file"""
    lexer = Lexer(_read_source(file), filename=file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in lexer:
        table.add_row(token.type.name, token.literal, str(token.line), str(token.column))

    console.print(table)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show AST of a Sprig file"""
    parser = Parser(Lexer(_read_source(file), filename=file))
    program = parser.parse_program()

    if parser.errors:
        _print_errors(parser.errors)

    console.print(Panel.fit(
        render_tree(program),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue",
    ))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a Sprig file"""
    try:
        parse(_read_source(file), filename=file)
    except SprigSyntaxError as e:
        _print_errors(e.errors, header="❌ Syntax Errors Found:")
        sys.exit(1)

    console.print("[bold green]✅ Syntax is valid![/bold green]")


def _lex_line(line):
    for token in Lexer(line):
        console.print(f'{token.type.name}, "{token.literal}"', markup=False, highlight=False)


def _parse_line(line):
    parser = Parser(Lexer(line))
    program = parser.parse_program()
    for error in parser.errors:
        console.print(f"[red]Error: {escape(error)}[/red]")
    if program.statements:
        console.print(str(program), markup=False, highlight=False)


@cli.command()
@click.option("--tokens", "show_tokens", is_flag=True, help="Print tokens instead of the parse.")
def repl(show_tokens):
    """Start the Sprig REPL"""
    console.print(f"[bold green]Sprig REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    handle = _lex_line if show_tokens else _parse_line
    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print("\n👋 Goodbye!")
            break

        if line.strip() in ("exit", "quit"):
            break
        if not line.strip():
            continue
        handle(line)


if __name__ == "__main__":
    cli()
