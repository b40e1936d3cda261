"""CLI commands for configuration inspection."""

import dataclasses
import json

import click

from stringkit.config.models import StringKitConfig


@click.group("config")
def config_group() -> None:
    """Inspect stringkit configuration."""


@config_group.command("show")
@click.pass_context
def show_config_cmd(ctx: click.Context) -> None:
    """Print the effective configuration as JSON.

    Environment variables (STRINGKIT_*) override the config file, which
    overrides the defaults.
    """
    config: StringKitConfig = ctx.obj["config"]
    click.echo(json.dumps(dataclasses.asdict(config), indent=2, default=str))
