# objkit/cli/main.py
import json
import logging
import re
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import load_settings
from ..patterns import REGEX, matching_patterns
from ..strings import replace_all
from ..traversal import map_object_to_array
from ..types import (
    get_type,
    is_array,
    is_based_on_object,
    is_clean_number,
    is_date,
    is_function,
    is_integer,
    is_number,
    is_object,
    is_promise,
    is_string,
)
from ..values import is_null_or_empty, length

console = Console()
err_console = Console(stderr=True)

_PREDICATES = [
    ("is_array", is_array),
    ("is_object", is_object),
    ("is_based_on_object", is_based_on_object),
    ("is_function", is_function),
    ("is_string", is_string),
    ("is_date", is_date),
    ("is_number", is_number),
    ("is_clean_number", is_clean_number),
    ("is_integer", is_integer),
    ("is_promise", is_promise),
]


def _parse_argument(raw):
    """JSON when it parses, the raw string otherwise."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _fail(message):
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option('--log-level', default=None,
              type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
              help="Overrides OBJKIT_LOG_LEVEL.")
@click.pass_context
def cli(ctx, log_level):
    """objkit - inspect how values classify, measure and traverse"""
    settings = load_settings()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    ctx.obj = settings


@cli.command(name="type")
@click.argument('value')
def type_(value):
    """Show the type tag and predicate results for VALUE"""
    parsed = _parse_argument(value)

    table = Table(title=f"Type of {escape(value)}")
    table.add_column("Check", style="cyan")
    table.add_column("Result", style="green")
    table.add_row("get_type", str(get_type(parsed)))
    for name, predicate in _PREDICATES:
        table.add_row(name, str(predicate(parsed)))

    console.print(table)


@cli.command(name="length")
@click.argument('value')
def length_(value):
    """Print the length of VALUE"""
    console.print(length(_parse_argument(value)), highlight=False)


@cli.command()
@click.argument('value')
def empty(value):
    """Tell whether VALUE is null or empty"""
    console.print(str(is_null_or_empty(_parse_argument(value))), highlight=False)


@cli.command()
@click.argument('text')
@click.argument('search')
@click.argument('replacement')
@click.option('--regex', 'use_regex', is_flag=True, help="Treat SEARCH as a regular expression.")
@click.option('--max-replacements', type=click.IntRange(min=0), default=None,
              help="Upper bound on replacement passes (default: OBJKIT_MAX_REPLACEMENTS or 50).")
@click.pass_obj
def replace(settings, text, search, replacement, use_regex, max_replacements):
    """Replace SEARCH in TEXT until nothing changes"""
    if use_regex:
        try:
            search = re.compile(search)
        except re.error as e:
            _fail(f"Invalid regular expression: {e}")

    if max_replacements is None:
        max_replacements = settings.max_replacements

    result = replace_all(text, search, replacement, max_replacements)
    console.print(result, markup=False, highlight=False)


@cli.command()
@click.argument('file', type=click.Path(exists=True))
def keys(file):
    """Summarise the top-level keys of a JSON object file"""
    try:
        with open(file, 'r') as f:
            document = json.load(f)
    except ValueError as e:
        _fail(f"{file} is not valid JSON: {e}")

    if not is_object(document):
        _fail(f"{file} holds a JSON {get_type(document)}, expected an object")

    table = Table(title=escape(file))
    table.add_column("Key", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Length", style="yellow")
    table.add_column("Empty", style="green")

    rows = map_object_to_array(
        document,
        lambda key, value: (escape(str(key)), str(get_type(value)), str(length(value)), str(is_null_or_empty(value))),
    )
    for row in rows:
        table.add_row(*row)

    console.print(table)


@cli.command()
@click.argument('value')
def match(value):
    """Check VALUE against the bundled regular expressions"""
    matched = matching_patterns(value)
    for name in vars(REGEX):
        mark = "✅" if name in matched else "❌"
        console.print(f"{mark} {name}", highlight=False)


if __name__ == "__main__":
    cli()
