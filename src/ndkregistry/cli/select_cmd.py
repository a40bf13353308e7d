"""``ndkregistry select [root]`` -- Pick the best matching installation.

Exit Codes:
    0 -- An installation matched.
    1 -- Nothing matched.
"""

from __future__ import annotations

import json
import sys

import click

from ndkregistry.cli.options import format_option, root_argument
from ndkregistry.cli.output import print_installation
from ndkregistry.discovery.config_paths import resolve_config_root
from ndkregistry.discovery.registry_scanner import RegistryScanner
from ndkregistry.discovery.selection import select_installation
from ndkregistry.exceptions import InvalidVersionError


@click.command("select")
@root_argument
@click.option("--name", default=None, help="Installation name (case-insensitive).")
@click.option("--version", "version_prefix", default=None, help="Version prefix, e.g. 10.2.")
@format_option
def select_command(
    root: str | None,
    name: str | None,
    version_prefix: str | None,
    output_format: str,
) -> None:
    """Print the newest installation matching --name and --version."""
    registry = RegistryScanner().scan(resolve_config_root(root))

    try:
        chosen = select_installation(registry, name=name, version=version_prefix)
    except InvalidVersionError as exc:
        raise click.BadParameter(str(exc), param_hint="--version") from exc

    if chosen is None:
        if output_format == "json":
            click.echo(json.dumps(None))
        else:
            click.echo("No matching NDK installation.")
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(chosen.to_dict(), indent=2))
    else:
        print_installation(chosen)
    sys.exit(0)
