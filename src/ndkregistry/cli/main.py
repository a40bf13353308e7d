"""ndkregistry CLI -- Inspect locally installed BlackBerry Native SDKs.

Entry point for the ``ndkregistry`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    list    -- Scan the manifest folder and print every usable NDK.
    select  -- Print the installation that best matches a name/version.

Usage::

    ndkregistry list
    ndkregistry list ~/.rim/bbndk/qconfig --devices
    ndkregistry list --format json
    ndkregistry select --version 10.2
    ndkregistry -v list          # show per-file diagnostics
"""

from __future__ import annotations

import logging

import click

from ndkregistry import __version__
from ndkregistry.cli.list_cmd import list_command
from ndkregistry.cli.select_cmd import select_command


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Log scan diagnostics at debug level.",
)
def cli(verbose: bool) -> None:
    """ndkregistry: Discover, validate and rank installed NDKs.

    Reads the installation manifests written by the NDK installer, drops
    installations that no longer exist on disk and lists the rest from
    oldest to newest.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s %(name)s] %(message)s",
        )


# Register all subcommands
cli.add_command(list_command)
cli.add_command(select_command)
