"""Shared fixtures for ndkregistry tests."""

import pathlib

import pytest


@pytest.fixture
def config_root(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty manifest folder (the installer's ``qconfig``)."""
    root = tmp_path / "qconfig"
    root.mkdir()
    return root


@pytest.fixture
def ndk_base(tmp_path: pathlib.Path) -> pathlib.Path:
    """Directory under which fake NDK installations are created."""
    base = tmp_path / "bbndk"
    base.mkdir()
    return base
