"""Discovery of installed NDKs from their configuration manifests.

Public API::

    from ndkregistry.discovery import RegistryScanner, select_installation

    registry = RegistryScanner().scan(root)
    active = select_installation(registry, version="10.2")
"""

from __future__ import annotations

from ndkregistry.discovery.config_paths import (
    CONFIG_ROOT_ENVVAR,
    default_config_root,
    resolve_config_root,
)
from ndkregistry.discovery.registry_scanner import RegistryScanner, scan_registry
from ndkregistry.discovery.selection import latest_installation, select_installation

__all__ = [
    "CONFIG_ROOT_ENVVAR",
    "RegistryScanner",
    "default_config_root",
    "latest_installation",
    "resolve_config_root",
    "scan_registry",
    "select_installation",
]
