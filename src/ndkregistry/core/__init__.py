"""Core value types: versions, installation records and device descriptors."""

from ndkregistry.core.models import DeviceDescriptor, DeviceKind, InstallationRecord
from ndkregistry.core.versioning import NdkVersion, VersionedEntity

__all__ = [
    "DeviceDescriptor",
    "DeviceKind",
    "InstallationRecord",
    "NdkVersion",
    "VersionedEntity",
]
