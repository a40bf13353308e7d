"""``ndkregistry list [root]`` -- Print every usable NDK installation.

When ROOT is omitted, the folder comes from ``NDKREGISTRY_CONFIG_ROOT`` or
the platform default.

Exit Codes:
    0 -- At least one installation was found.
    2 -- No installation was found.
"""

from __future__ import annotations

import json
import sys

import click

from ndkregistry.cli.options import format_option, root_argument
from ndkregistry.cli.output import print_registry
from ndkregistry.discovery.config_paths import resolve_config_root
from ndkregistry.discovery.registry_scanner import RegistryScanner


@click.command("list")
@root_argument
@format_option
@click.option(
    "--devices",
    is_flag=True,
    default=False,
    help="Also list the devices supported by each installation.",
)
def list_command(root: str | None, output_format: str, devices: bool) -> None:
    """Scan the manifest folder and list installed NDKs, oldest first."""
    folder = resolve_config_root(root)
    registry = RegistryScanner().scan(folder)

    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in registry], indent=2))
    elif not registry:
        click.echo(f"No NDK installations found in {folder}.")
    else:
        print_registry(registry, show_devices=devices)

    sys.exit(0 if registry else 2)
