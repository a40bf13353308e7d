"""Loader for ``blackberry-sdk-descriptor.xml`` device descriptor files.

A descriptor file lists the devices and simulators an NDK can target. Every
``<device>`` element, at any depth, becomes one ``DeviceDescriptor``:

.. code-block:: xml

    <sdk>
      <devices>
        <device>
          <name>BlackBerry Z10</name>
          <family>z10</family>
          <architecture>armle-v7</architecture>
        </device>
        <device name="BlackBerry 10 Simulator" architecture="x86" type="simulator"/>
      </devices>
    </sdk>

Fields may be child elements or attributes; child elements win. A missing
``type`` is inferred from the architecture (``x86`` means simulator).

``load()`` distinguishes two outcomes callers care about:

- ``None`` -- no usable file at this path; try another candidate.
- a list (possibly empty) -- the file exists and was read.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from defusedxml import ElementTree as DEFUSED_ET
from defusedxml.common import DefusedXmlException

from ndkregistry.core.models import DeviceDescriptor, DeviceKind

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "blackberry-sdk-descriptor.xml"

_SIMULATOR_ARCHITECTURES = frozenset({"x86"})


def _field(element: ET.Element, name: str) -> str:
    """Read a field from a child element, falling back to an attribute."""
    child = element.find(name)
    if child is not None and child.text and child.text.strip():
        return child.text.strip()
    return (element.get(name) or "").strip()


def _device_from_element(element: ET.Element) -> DeviceDescriptor:
    family = _field(element, "family")
    architecture = _field(element, "architecture")
    device_type = _field(element, "type").lower()
    name = _field(element, "name") or family or architecture or "unknown"

    if device_type:
        is_simulator = device_type == "simulator"
    else:
        is_simulator = architecture.lower() in _SIMULATOR_ARCHITECTURES

    return DeviceDescriptor(
        name=name,
        family=family,
        architecture=architecture,
        kind=DeviceKind.SIMULATOR if is_simulator else DeviceKind.DEVICE,
    )


class DeviceDescriptorLoader:
    """Reads device descriptors from a single descriptor file.

    Failures are isolated to the file being read: they are logged and
    reported as ``None``, never raised.
    """

    def load(self, path: Path | str) -> list[DeviceDescriptor] | None:
        """Load all device entries from *path*.

        Args:
            path: Candidate location of a descriptor file.

        Returns:
            The devices in document order, an empty list if the file declares
            none, or ``None`` if the file is missing or unreadable.
        """
        path = Path(path)
        try:
            if not path.is_file():
                return None
        except OSError:
            return None

        try:
            with path.open("r", encoding="utf-8") as stream:
                tree = DEFUSED_ET.parse(stream)
        except (OSError, ValueError, ET.ParseError, DefusedXmlException):
            logger.warning("Unable to load NDK descriptor file: %s", path, exc_info=True)
            return None

        return [_device_from_element(el) for el in tree.getroot().iter("device")]
