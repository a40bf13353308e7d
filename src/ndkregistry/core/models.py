"""Data models for discovered NDK installations.

Contains the device descriptors read from ``blackberry-sdk-descriptor.xml``
and the ``InstallationRecord`` built from a single installation manifest.
Both are immutable once constructed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from ndkregistry.core.versioning import NdkVersion, VersionedEntity
from ndkregistry.exceptions import MissingFieldError

logger = logging.getLogger(__name__)


def is_blank_path(value: str | os.PathLike[str] | None) -> bool:
    """Check whether a path value is missing or empty.

    ``Path("")`` normalizes to ``Path(".")``, so a ``PathLike`` whose string
    form is ``"."`` also counts as empty.
    """
    if value is None:
        return True
    if isinstance(value, os.PathLike):
        return os.fspath(value).strip() in ("", ".")
    return not str(value).strip()


class DeviceKind(Enum):
    """Whether a descriptor entry targets real hardware or a simulator."""

    DEVICE = "device"
    SIMULATOR = "simulator"


@dataclass(frozen=True)
class DeviceDescriptor:
    """One device or architecture supported by an installation.

    Attributes:
        name: Display label (e.g., "BlackBerry Z10").
        family: Device family identifier (e.g., "z10"). Empty if undeclared.
        architecture: CPU architecture (e.g., "armle-v7", "x86").
        kind: Physical device or simulator.
    """

    name: str
    family: str = ""
    architecture: str = ""
    kind: DeviceKind = DeviceKind.DEVICE

    @property
    def is_simulator(self) -> bool:
        return self.kind is DeviceKind.SIMULATOR


@dataclass(frozen=True)
class InstallationRecord:
    """Descriptor of a locally installed NDK.

    Attributes:
        identity: Name and version of the installation.
        host_path: Directory holding the host-side tools.
        target_path: Directory holding the target sysroot.
        devices: Devices supported by the installation, possibly empty.
    """

    identity: VersionedEntity
    host_path: Path
    target_path: Path
    devices: tuple[DeviceDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if is_blank_path(self.host_path):
            raise MissingFieldError("host_path")
        if is_blank_path(self.target_path):
            raise MissingFieldError("target_path")
        object.__setattr__(self, "host_path", Path(self.host_path))
        object.__setattr__(self, "target_path", Path(self.target_path))
        object.__setattr__(self, "devices", tuple(self.devices or ()))

    @classmethod
    def create(
        cls,
        name: str,
        version: NdkVersion | str,
        host_path: str | Path,
        target_path: str | Path,
        devices: list[DeviceDescriptor] | tuple[DeviceDescriptor, ...] = (),
    ) -> InstallationRecord:
        """Build a record from flat fields.

        Raises:
            MissingFieldError: If name, version or a path is absent.
            InvalidVersionError: If *version* is not a valid version string.
        """
        return cls(
            identity=VersionedEntity(name, version),  # type: ignore[arg-type]
            host_path=host_path,  # type: ignore[arg-type]
            target_path=target_path,  # type: ignore[arg-type]
            devices=tuple(devices),
        )

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def version(self) -> NdkVersion:
        return self.identity.version

    @property
    def simulators(self) -> tuple[DeviceDescriptor, ...]:
        return tuple(d for d in self.devices if d.is_simulator)

    @property
    def physical_devices(self) -> tuple[DeviceDescriptor, ...]:
        return tuple(d for d in self.devices if not d.is_simulator)

    def exists(self) -> bool:
        """Check that both the host and target directories are present.

        Any error raised by the filesystem counts as "not present".
        """
        try:
            return self.host_path.is_dir() and self.target_path.is_dir()
        except (OSError, ValueError):
            logger.debug("Existence check failed for %s", self.target_path, exc_info=True)
            return False

    def compare_to(self, other: InstallationRecord | None) -> int:
        """Three-way comparison by version, then case-insensitive name.

        Returns:
            -1, 0 or 1. Any record sorts after ``None``.
        """
        if other is None:
            return 1
        mine, theirs = self.identity.sort_key(), other.identity.sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, InstallationRecord):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, InstallationRecord):
            return NotImplemented
        return self.compare_to(other) > 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, InstallationRecord):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, InstallationRecord):
            return NotImplemented
        return self.compare_to(other) >= 0

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view of the record."""
        return {
            "name": self.name,
            "version": str(self.version),
            "host_path": str(self.host_path),
            "target_path": str(self.target_path),
            "devices": [
                {
                    "name": d.name,
                    "family": d.family,
                    "architecture": d.architecture,
                    "kind": d.kind.value,
                }
                for d in self.devices
            ],
        }
