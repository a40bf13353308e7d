"""Parser for NDK installation manifests.

Each manifest under the configuration root describes one installation:

.. code-block:: xml

    <installation>
      <name>BlackBerry Native SDK 10.2</name>
      <version>10.2.0.1155</version>
      <host>C:/bbndk/host_10_2_0_15/win32/x86</host>
      <target>C:/bbndk/target_10_2_0_1155/qnx6</target>
    </installation>

The document is read as a stream. Fields are collected until the closing
``</installation>`` tag; a field that appears twice keeps its last value.
``host`` and ``target`` are required. A missing ``name`` reads as the empty
string. A missing or malformed ``version`` rejects the manifest.

Device Lookup
-------------
The device list comes from ``blackberry-sdk-descriptor.xml``. Depending on
the NDK layout it sits beside the target directory or one or two levels
above it, so three candidates are tried in order:

1. ``<target>/blackberry-sdk-descriptor.xml``
2. ``<target>/../blackberry-sdk-descriptor.xml``
3. ``<target>/../../blackberry-sdk-descriptor.xml``

The first candidate the loader can read wins, even if it lists no devices.
If none can be read the installation has no known devices.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import IO

from defusedxml import ElementTree as DEFUSED_ET
from defusedxml.common import DefusedXmlException

from ndkregistry.core.models import DeviceDescriptor, InstallationRecord
from ndkregistry.core.versioning import VersionedEntity
from ndkregistry.exceptions import NdkRegistryError
from ndkregistry.parsers.descriptor import DESCRIPTOR_FILENAME, DeviceDescriptorLoader

logger = logging.getLogger(__name__)

_ROOT_TAG = "installation"
_FIELD_TAGS = frozenset({"name", "version", "host", "target"})


def _local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def descriptor_candidates(target_path: Path | str) -> list[Path]:
    """Candidate descriptor locations for a target directory, in search order."""
    target = Path(target_path)
    return [
        target / DESCRIPTOR_FILENAME,
        target / ".." / DESCRIPTOR_FILENAME,
        target / ".." / ".." / DESCRIPTOR_FILENAME,
    ]


class ManifestParser:
    """Turns one installation manifest into an ``InstallationRecord``.

    Args:
        loader: Device descriptor loader used for the fallback search.
    """

    def __init__(self, loader: DeviceDescriptorLoader | None = None) -> None:
        self.loader = loader if loader is not None else DeviceDescriptorLoader()

    def parse(self, stream: IO[str] | IO[bytes]) -> InstallationRecord | None:
        """Parse a manifest from an open stream.

        Malformed or truncated XML is logged and rejected. I/O and decoding
        errors raised by the stream propagate to the caller.

        Args:
            stream: Text or binary stream positioned at the start of the document.

        Returns:
            The installation record, or ``None`` if the manifest is not a
            complete, valid installation description.
        """
        fields: dict[str, str] = {}
        try:
            for _event, element in DEFUSED_ET.iterparse(stream, events=("end",)):
                tag = _local_name(element.tag)
                if tag in _FIELD_TAGS:
                    fields[tag] = (element.text or "").strip()
                elif tag == _ROOT_TAG:
                    return self._build_record(fields)
        except (ET.ParseError, DefusedXmlException):
            logger.warning("Malformed NDK manifest: %s", getattr(stream, "name", "<stream>"), exc_info=True)
            return None
        return None

    def parse_file(self, path: Path | str) -> InstallationRecord | None:
        """Open *path* as UTF-8 text and parse it."""
        with open(path, "r", encoding="utf-8") as stream:
            return self.parse(stream)

    def find_devices(self, target_path: Path | str) -> list[DeviceDescriptor]:
        """Run the descriptor fallback search for a target directory."""
        for candidate in descriptor_candidates(target_path):
            devices = self.loader.load(candidate)
            if devices is not None:
                return devices
        return []

    def _build_record(self, fields: dict[str, str]) -> InstallationRecord | None:
        host = fields.get("host")
        target = fields.get("target")
        if not host or not target:
            return None

        try:
            identity = VersionedEntity(fields.get("name", ""), fields.get("version"))  # type: ignore[arg-type]
        except NdkRegistryError as exc:
            logger.debug("Rejected NDK manifest %r: %s", fields.get("name", ""), exc)
            return None

        return InstallationRecord(
            identity=identity,
            host_path=Path(host),
            target_path=Path(target),
            devices=tuple(self.find_devices(target)),
        )
