"""Parsers for NDK installation manifests and device descriptor files.

Public API::

    from ndkregistry.parsers import ManifestParser

    parser = ManifestParser()
    record = parser.parse_file("qconfig/bbndk_10_2.xml")
    if record is not None:
        print(record.name, record.version, len(record.devices))
"""

from __future__ import annotations

from ndkregistry.parsers.descriptor import DESCRIPTOR_FILENAME, DeviceDescriptorLoader
from ndkregistry.parsers.manifest import ManifestParser, descriptor_candidates

__all__ = [
    "DESCRIPTOR_FILENAME",
    "DeviceDescriptorLoader",
    "ManifestParser",
    "descriptor_candidates",
]
