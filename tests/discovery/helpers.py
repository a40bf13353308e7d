"""Shared test helpers for building fake NDK installations on disk.

Each helper writes a minimal but realistic layout: host and target
directories, an installation manifest in a ``qconfig`` folder and,
optionally, a ``blackberry-sdk-descriptor.xml`` file.
"""

from __future__ import annotations

from pathlib import Path

DESCRIPTOR = "blackberry-sdk-descriptor.xml"

Z10 = {"name": "BlackBerry Z10", "family": "z10", "architecture": "armle-v7"}
SIMULATOR = {"name": "BlackBerry 10 Simulator", "architecture": "x86", "type": "simulator"}


def manifest_xml(
    name: str | None = "BlackBerry Native SDK",
    version: str | None = "10.2.0.1155",
    host: str | Path | None = None,
    target: str | Path | None = None,
) -> str:
    """Render an installation manifest; ``None`` fields are omitted."""
    parts = ["<installation>"]
    for tag, value in (("name", name), ("version", version), ("host", host), ("target", target)):
        if value is not None:
            parts.append(f"  <{tag}>{value}</{tag}>")
    parts.append("</installation>")
    return "\n".join(parts) + "\n"


def create_installation(base: Path, label: str) -> tuple[Path, Path]:
    """Create host and target directories laid out like a real NDK.

    Returns:
        ``(host_path, target_path)``. The target is ``<base>/<label>/target/qnx6``
        so descriptor files can be placed one or two levels above it.
    """
    host = base / label / "host" / "linux" / "x86"
    target = base / label / "target" / "qnx6"
    host.mkdir(parents=True, exist_ok=True)
    target.mkdir(parents=True, exist_ok=True)
    return host, target


def write_manifest(
    config_root: Path,
    filename: str,
    name: str | None = "BlackBerry Native SDK",
    version: str | None = "10.2.0.1155",
    host: str | Path | None = None,
    target: str | Path | None = None,
) -> Path:
    """Write a manifest file under the config root (subfolders allowed)."""
    path = config_root / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(manifest_xml(name, version, host, target), encoding="utf-8")
    return path


def write_descriptor(folder: Path, devices: list[dict[str, str]]) -> Path:
    """Write a device descriptor file listing *devices* as child elements."""
    lines = ["<?xml version=\"1.0\" encoding=\"utf-8\"?>", "<sdk>", "  <devices>"]
    for device in devices:
        lines.append("    <device>")
        for key, value in device.items():
            lines.append(f"      <{key}>{value}</{key}>")
        lines.append("    </device>")
    lines.extend(["  </devices>", "</sdk>"])
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / DESCRIPTOR
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def create_ndk(
    base: Path,
    config_root: Path,
    label: str,
    name: str = "BlackBerry Native SDK",
    version: str = "10.2.0.1155",
) -> Path:
    """Create an existing installation plus its manifest; return the manifest."""
    host, target = create_installation(base, label)
    return write_manifest(config_root, f"{label}.xml", name=name, version=version, host=host, target=target)
