# src/scryptlang/cli/main.py
import click
import logging
import sys
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import config
from ..lexer import Lexer, find_illegal
from ..parser import Parser
from ..evaluator import Evaluator
from ..formatter import format_program
from ..object import Number, Boolean, Array
from ..error_reporter import (
    ScryptSyntaxError, ScryptRuntimeError, print_error,
    CONDITION_NOT_BOOL, ARGUMENT_COUNT, NOT_A_FUNCTION,
)

console = Console()

# Runtime errors that exit with status 3 rather than 2
_USAGE_ERRORS = {CONDITION_NOT_BOOL, ARGUMENT_COUNT, NOT_A_FUNCTION}


def _configure_logging(debug, verbose):
    if not (debug or verbose):
        return
    config.set_debug(True, "verbose" if verbose else "normal")
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _read_source(file):
    with open(file, 'r') as f:
        return f.read()


def _parse_source(source_code):
    """Lex and parse; returns (program, errors) with every syntax error found."""
    tokens = Lexer(source_code).tokenize()
    bad = find_illegal(tokens)
    if bad is not None:
        return None, [ScryptSyntaxError.illegal(bad)]
    parser = Parser(tokens)
    program = parser.parse_program()
    return program, parser.errors


def _parse_or_exit(source_code):
    program, errors = _parse_source(source_code)
    if errors:
        for error in errors:
            print_error(error)
        # Lexing failures exit 1; parse failures exit 2
        sys.exit(1 if program is None else 2)
    return program


def _exit_code(error):
    if isinstance(error, ScryptRuntimeError) and error.kind in _USAGE_ERRORS:
        return 3
    return 2


@click.group()
@click.version_option(version=__version__, prog_name="Scrypt")
@click.option('--debug', is_flag=True, help="Log parser and evaluator activity")
@click.option('--verbose', is_flag=True, help="Log every evaluated node (implies --debug)")
def cli(debug, verbose):
    """Scrypt Programming Language - a small scripting language interpreter"""
    _configure_logging(debug, verbose)


@cli.command()
@click.argument('file', type=click.File('r'), default='-')
def run(file):
    """Run a Scrypt program (reads stdin when FILE is omitted or -)"""
    program = _parse_or_exit(file.read())

    evaluator = Evaluator()
    try:
        evaluator.eval_node(program, evaluator.new_environment())
    except ScryptRuntimeError as e:
        print_error(e)
        sys.exit(_exit_code(e))
    except RecursionError:
        print_error(ScryptRuntimeError("maximum recursion depth exceeded"))
        sys.exit(2)


@cli.command()
@click.argument('file', type=click.Path(exists=True))
def check(file):
    """Check syntax of a Scrypt file"""
    source_code = _read_source(file)
    _parse_or_exit(source_code)
    console.print("[bold green]Syntax is valid![/bold green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True))
def ast(file):
    """Show AST of a Scrypt file"""
    source_code = _read_source(file)
    program = _parse_or_exit(source_code)

    console.print(Panel.fit(
        Text(repr(program)),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue"
    ))


@cli.command()
@click.argument('file', type=click.Path(exists=True))
def tokens(file):
    """Show tokens of a Scrypt file"""
    source_code = _read_source(file)
    token_list = Lexer(source_code).tokenize()

    bad = find_illegal(token_list)
    if bad is not None:
        print_error(ScryptSyntaxError.illegal(bad))
        sys.exit(1)

    table = Table(title="Tokens")
    table.add_column("Line", style="yellow", justify="right")
    table.add_column("Column", style="yellow", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")

    for token in token_list:
        table.add_row(str(token.line), str(token.column), token.type, Text(token.literal))

    console.print(table)


@cli.command()
@click.argument('file', type=click.Path(exists=True))
def fmt(file):
    """Print a Scrypt file in canonical layout"""
    source_code = _read_source(file)
    program = _parse_or_exit(source_code)
    click.echo(format_program(program), nl=False)


@cli.command()
def repl():
    """Start Scrypt REPL"""
    evaluator = Evaluator()
    env = evaluator.new_environment()
    console.print(f"[bold green]Scrypt REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            code = console.input("[bold blue]>>> [/bold blue]")
        except (KeyboardInterrupt, EOFError):
            console.print("\nGoodbye!")
            break

        if code.strip() in ['exit', 'quit']:
            break
        if not code.strip():
            continue

        program, errors = _parse_source(code)
        if errors:
            for error in errors:
                print_error(error, console)
            continue

        try:
            result = evaluator.eval_node(program, env)
            if isinstance(result, (Number, Boolean, Array)):
                console.print(Text(result.inspect(), style="green"))
        except ScryptRuntimeError as e:
            print_error(e, console)
        except RecursionError:
            print_error(ScryptRuntimeError("maximum recursion depth exceeded"), console)


if __name__ == "__main__":
    cli()
