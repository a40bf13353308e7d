"""Rich output formatting helpers for the ndkregistry CLI.

Installations are printed oldest first, mirroring registry order, with the
newest (default) installation highlighted.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ndkregistry.core.models import DeviceKind, InstallationRecord

_KIND_STYLES: dict[DeviceKind, str] = {
    DeviceKind.DEVICE: "green",
    DeviceKind.SIMULATOR: "cyan",
}

console = Console()


def kind_style(kind: DeviceKind) -> str:
    """Return the Rich style string for a device kind."""
    return _KIND_STYLES.get(kind, "white")


def print_registry(records: Sequence[InstallationRecord], show_devices: bool = False) -> None:
    """Print a summary table of installed NDKs.

    Args:
        records: Registry in ascending order.
        show_devices: Print a device table under the summary for each NDK.
    """
    if not records:
        console.print("[dim]No NDK installations found.[/dim]")
        return

    table = Table(title="Installed NDKs", show_header=True, header_style="bold")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Version", justify="right", no_wrap=True)
    table.add_column("Host", style="dim", overflow="fold")
    table.add_column("Target", style="dim", overflow="fold")
    table.add_column("Devices", justify="right")

    newest = records[-1]
    for record in records:
        name = Text(record.name or "(unnamed)")
        if record is newest:
            name.stylize("green")
        table.add_row(
            name,
            str(record.version),
            str(record.host_path),
            str(record.target_path),
            str(len(record.devices)),
        )

    console.print(table)
    console.print(f"[bold]{len(records)}[/bold] installation(s), newest: {newest.name} {newest.version}")

    if show_devices:
        for record in records:
            _print_devices(record)


def print_installation(record: InstallationRecord) -> None:
    """Print a detail panel for a single installation."""
    body = Text.assemble(
        ("Version: ", "bold"), (str(record.version), ""), "\n",
        ("Host:    ", "bold"), (str(record.host_path), ""), "\n",
        ("Target:  ", "bold"), (str(record.target_path), ""), "\n",
        ("Devices: ", "bold"),
        (f"{len(record.physical_devices)} device(s), {len(record.simulators)} simulator(s)", ""),
    )
    console.print(Panel(body, title=record.name or "(unnamed)", expand=False))
    if record.devices:
        _print_devices(record)


def _print_devices(record: InstallationRecord) -> None:
    title = f"{record.name or '(unnamed)'} {record.version}"
    if not record.devices:
        console.print(f"[dim]{title}: no device descriptor found.[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Device")
    table.add_column("Family", style="dim")
    table.add_column("Architecture")
    table.add_column("Kind", justify="center")
    for device in record.devices:
        table.add_row(
            device.name,
            device.family or "-",
            device.architecture or "-",
            Text(device.kind.value, style=kind_style(device.kind)),
        )
    console.print(table)
