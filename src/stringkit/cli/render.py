"""CLI command for formatted-string construction."""

import logging

import click

from stringkit.cli.exit_codes import ExitCode
from stringkit.cli.output import error_exit
from stringkit.config import TomlParseError, get_config
from stringkit.core import AllocationError, FormatError, FormattedStringBuilder

logger = logging.getLogger(__name__)


def _coerce_argument(value: str) -> int | float | str:
    """Convert a command-line argument to int, then float, else keep str."""
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue
    return value


@click.command("format", context_settings={"ignore_unknown_options": True})
@click.argument("template")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--initial-size",
    type=click.IntRange(min=1),
    default=None,
    help="Override the initial render buffer size in bytes.",
)
@click.option(
    "--max-size",
    type=click.IntRange(min=1),
    default=None,
    help="Override the render buffer size limit in bytes.",
)
@click.option(
    "--encoding",
    default=None,
    help="Override the encoding used to measure rendered text.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Report the rendered length and whether the buffer grew.",
)
@click.pass_context
def format_command(
    ctx: click.Context,
    template: str,
    args: tuple[str, ...],
    initial_size: int | None,
    max_size: int | None,
    encoding: str | None,
    verbose: bool,
) -> None:
    """Render a printf-style TEMPLATE with ARGS.

    Arguments that look like integers or floats are converted before
    rendering, so "%d" and "%.2f" directives work as expected. Negative
    numbers are passed through as arguments, not options.

    Examples:

        stringkit format "%s scored %d" alice 42

        stringkit format "%+d" -5

        stringkit format --max-size 64 "%.3f" 3.14159
    """
    try:
        config = get_config(
            ctx.obj.get("config_path"),
            initial_buffer_size=initial_size,
            max_buffer_size=max_size,
            encoding=encoding,
            strict=True,
        )
    except (TomlParseError, TypeError, ValueError) as e:
        error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR)

    builder = FormattedStringBuilder(
        initial_size=config.render.initial_buffer_size,
        max_size=config.render.max_buffer_size,
        encoding=config.render.encoding,
    )
    logger.debug(
        "format: initial_size=%d max_size=%s encoding=%s",
        builder.initial_size,
        builder.max_size,
        builder.encoding,
    )

    arguments = [_coerce_argument(arg) for arg in args]
    try:
        result = builder.build(template, *arguments)
    except FormatError as e:
        error_exit(str(e), ExitCode.FORMAT_ERROR)
    except AllocationError as e:
        error_exit(str(e), ExitCode.ALLOCATION_ERROR)

    click.echo(result.text)
    if verbose:
        click.echo(
            f"length={result.length} capacity={result.capacity} "
            f"grown={'yes' if result.grown else 'no'}",
            err=True,
        )
