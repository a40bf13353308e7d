"""Click parameters shared by the scanning commands."""

from __future__ import annotations

import click

from ndkregistry.discovery.config_paths import CONFIG_ROOT_ENVVAR

root_argument = click.argument(
    "root",
    type=click.Path(file_okay=False),
    required=False,
    default=None,
    envvar=CONFIG_ROOT_ENVVAR,
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
