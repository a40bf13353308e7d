"""Shared fixtures for CLI tests.

Provides a populated manifest folder with two installations, one of which
ships a device descriptor, plus one stale manifest.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from ndkregistry.discovery.config_paths import CONFIG_ROOT_ENVVAR

from tests.discovery.helpers import SIMULATOR, Z10, create_installation, create_ndk, write_descriptor, write_manifest


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Create a Click CliRunner with no configured manifest folder."""
    monkeypatch.delenv(CONFIG_ROOT_ENVVAR, raising=False)
    return CliRunner()


@pytest.fixture
def populated_root(tmp_path: Path) -> Path:
    """Manifest folder with NDK 10.2 (with devices), NDK 10.3 and a stale entry."""
    config_root = tmp_path / "qconfig"
    base = tmp_path / "bbndk"

    host, target = create_installation(base, "bbndk_10_2")
    write_descriptor(target.parent.parent, [Z10, SIMULATOR])
    write_manifest(config_root, "bbndk_10_2.xml", name="SDK-Ten-Two", version="10.2.0.1155", host=host, target=target)

    create_ndk(base, config_root, "bbndk_10_3", name="SDK-Ten-Three", version="10.3.1.995")
    write_manifest(config_root, "stale.xml", name="SDK-Removed", version="10.1", host=base / "gone", target=base / "gone")
    return config_root
