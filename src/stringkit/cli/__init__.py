"""CLI module for stringkit."""

import logging
from pathlib import Path

import click

from stringkit.cli.exit_codes import ExitCode
from stringkit.cli.output import error_exit
from stringkit.config import TomlParseError, get_config
from stringkit.logging import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="stringkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.stringkit/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """stringkit - Trim, split, convert and format strings."""
    ctx.ensure_object(dict)

    try:
        config = get_config(config_path, strict=True)
        logging_config = config.logging.with_overrides(
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except (TomlParseError, TypeError, ValueError) as e:
        error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR)

    configure_logging(logging_config)
    logger.debug(
        "stringkit starting: initial_buffer_size=%d, max_buffer_size=%s, "
        "encoding=%s",
        config.render.initial_buffer_size,
        config.render.max_buffer_size,
        config.render.encoding,
    )
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = config


# Defer import to avoid circular dependency
def _register_commands():
    from stringkit.cli.config import config_group
    from stringkit.cli.render import format_command
    from stringkit.cli.text import (
        case_command,
        lines_command,
        split_command,
        trim_command,
    )

    main.add_command(trim_command)
    main.add_command(case_command)
    main.add_command(split_command)
    main.add_command(lines_command)
    main.add_command(format_command)
    main.add_command(config_group)


_register_commands()
