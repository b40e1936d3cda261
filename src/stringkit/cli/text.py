"""CLI commands for plain string operations."""

import json
import logging
from typing import TextIO

import click

from stringkit.cli.exit_codes import ExitCode
from stringkit.cli.output import error_exit
from stringkit.core import (
    iter_lines,
    str_split,
    str_to_lower,
    str_to_upper,
    trim,
    trim_left,
    trim_right,
)

logger = logging.getLogger(__name__)

_TRIMMERS = {
    "both": trim,
    "left": trim_left,
    "right": trim_right,
}


@click.command("trim")
@click.argument("text")
@click.option(
    "--side",
    type=click.Choice(sorted(_TRIMMERS)),
    default="both",
    show_default=True,
    help="Which end(s) to trim.",
)
def trim_command(text: str, side: str) -> None:
    """Remove spaces, tabs and newlines from the ends of TEXT.

    Examples:

        stringkit trim "  padded  "

        stringkit trim --side left "  padded  "
    """
    click.echo(_TRIMMERS[side](text))


@click.command("case")
@click.argument("text")
@click.option(
    "--upper/--lower",
    "upper",
    default=False,
    help="Convert to uppercase instead of lowercase.",
)
def case_command(text: str, upper: bool) -> None:
    """Convert the ASCII letters of TEXT to lower or upper case."""
    click.echo(str_to_upper(text) if upper else str_to_lower(text))


@click.command("split")
@click.argument("text")
@click.option(
    "-d",
    "--delimiters",
    default=",",
    show_default=True,
    help="Characters that each mark a split point.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output segments as a JSON list.",
)
def split_command(text: str, delimiters: str, json_output: bool) -> None:
    """Split TEXT at every delimiter character.

    Consecutive delimiters produce empty segments.

    Examples:

        stringkit split "a,b,,c"

        stringkit split -d ":;" --json "a:b;c"
    """
    segments = str_split(text, delimiters)
    logger.debug("Split %d characters into %d segments", len(text), len(segments))
    if json_output:
        click.echo(json.dumps(segments))
        return
    for segment in segments:
        click.echo(segment)


@click.command("lines")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output lines as a JSON list of objects.",
)
def lines_command(source: TextIO, json_output: bool) -> None:
    """Read SOURCE line by line and print each line with its length.

    SOURCE defaults to standard input and is read as UTF-8. Blank lines
    are reported with length 0. Input that is not valid UTF-8 exits with
    INPUT_ERROR, reported as JSON when --json is given.
    """
    name = getattr(source, "name", "<stream>")
    try:
        lines = list(iter_lines(source))
    except UnicodeDecodeError as e:
        error_exit(
            f"Cannot decode {name} as UTF-8: {e.reason}",
            ExitCode.INPUT_ERROR,
            json_output=json_output,
        )
    logger.debug("Read %d lines from %s", len(lines), name)
    if json_output:
        click.echo(
            json.dumps([{"length": len(line), "text": line} for line in lines])
        )
        return
    for line in lines:
        click.echo(f"{len(line)}\t{line}")
