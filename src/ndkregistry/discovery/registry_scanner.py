"""Registry scanner for installed NDKs.

Walks a configuration folder for installation manifests, parses each one,
keeps the installations that are still present on disk and returns them in
registry order (version ascending, then name).

Error Isolation:
    A single broken manifest never aborts the scan. Unreadable files are
    logged and skipped. Manifests that are not valid installations are
    skipped quietly, as are installations whose directories were removed.
    If the folder itself becomes unreadable part way through, the records
    collected so far are returned.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ndkregistry.core.models import InstallationRecord, is_blank_path
from ndkregistry.discovery.config_paths import resolve_config_root
from ndkregistry.parsers.manifest import ManifestParser

logger = logging.getLogger(__name__)

MANIFEST_SUFFIX = ".xml"


class RegistryScanner:
    """Discovers installed NDKs from their manifests.

    Usage::

        scanner = RegistryScanner()
        for ndk in scanner.scan(Path("~/.rim/bbndk/qconfig").expanduser()):
            print(f"{ndk.name} {ndk.version} -> {ndk.target_path}")
    """

    def __init__(self, parser: ManifestParser | None = None) -> None:
        self.parser = parser if parser is not None else ManifestParser()

    def iter_manifest_files(self, root: Path) -> Iterator[Path]:
        """Yield every ``*.xml`` file under *root*, recursively.

        Directories and files are visited in sorted order. Directories that
        cannot be listed are logged and skipped.
        """

        def _on_error(error: OSError) -> None:
            logger.warning(
                "Unable to list configuration folder: %s", error.filename or root,
                exc_info=error,
            )

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if filename.lower().endswith(MANIFEST_SUFFIX):
                    yield Path(dirpath) / filename

    def scan(self, root: str | Path) -> list[InstallationRecord]:
        """Scan *root* for installed NDKs.

        Args:
            root: Configuration folder holding the manifests.

        Returns:
            Installations present on disk, sorted by version then name.
            Empty if *root* does not exist.

        Raises:
            ValueError: If *root* is empty or ``None``.
        """
        if is_blank_path(root):
            raise ValueError("root must be a non-empty path")

        root_path = Path(root)
        records: list[InstallationRecord] = []
        try:
            if not root_path.is_dir():
                return records
        except OSError:
            logger.warning("Unable to access configuration folder: %s", root_path, exc_info=True)
            return records

        try:
            for manifest in self.iter_manifest_files(root_path):
                record = self._load_manifest(manifest)
                if record is not None and record.exists():
                    records.append(record)
        except Exception:
            logger.warning(
                "Unable to load info about configuration files from folder: %s",
                root_path, exc_info=True,
            )

        records.sort(key=lambda r: r.identity.sort_key())
        logger.debug("Found %d NDK installation(s) under %s", len(records), root_path)
        return records

    def _load_manifest(self, manifest: Path) -> InstallationRecord | None:
        """Parse a single manifest, logging and absorbing any failure."""
        try:
            return self.parser.parse_file(manifest)
        except Exception:
            logger.warning("Unable to open configuration file: %s", manifest, exc_info=True)
            return None


def scan_registry(root: str | Path | None = None) -> list[InstallationRecord]:
    """Scan the configured manifest folder with a default scanner.

    Args:
        root: Explicit folder. Falls back to ``NDKREGISTRY_CONFIG_ROOT`` and
            then to the platform default.
    """
    return RegistryScanner().scan(resolve_config_root(root))
