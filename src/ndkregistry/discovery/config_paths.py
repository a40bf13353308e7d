"""Where NDK installation manifests live on each platform.

The BlackBerry Native SDK installer drops one XML manifest per installed NDK
into a per-user ``qconfig`` folder. Its location depends on the platform:

- Windows: ``%LOCALAPPDATA%/Research In Motion/BlackBerry Native SDK/qconfig``
- macOS: ``~/Library/Research In Motion/BlackBerry Native SDK/qconfig``
- Linux: ``~/.rim/bbndk/qconfig``

The ``NDKREGISTRY_CONFIG_ROOT`` environment variable overrides the default.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from pathlib import Path

CONFIG_ROOT_ENVVAR = "NDKREGISTRY_CONFIG_ROOT"

_VENDOR_DIR = Path("Research In Motion") / "BlackBerry Native SDK" / "qconfig"


def current_platform() -> str:
    """Return the current platform identifier: "windows", "macos" or "linux"."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return "windows" if system == "windows" else "linux"


def default_config_root(
    home: Path | None = None,
    platform_name: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Default manifest folder for a platform.

    Args:
        home: Override the home directory (for testing).
        platform_name: Override the detected platform.
        environ: Override the process environment.

    Returns:
        The platform's default ``qconfig`` folder. It may not exist.
    """
    home_dir = home if home is not None else Path.home()
    env = environ if environ is not None else os.environ
    name = platform_name or current_platform()

    if name == "windows":
        local_app_data = env.get("LOCALAPPDATA")
        base = Path(local_app_data) if local_app_data else home_dir / "AppData" / "Local"
        return base / _VENDOR_DIR
    if name == "macos":
        return home_dir / "Library" / _VENDOR_DIR
    return home_dir / ".rim" / "bbndk" / "qconfig"


def resolve_config_root(
    explicit: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Resolve the manifest folder: explicit path, then env var, then default."""
    if explicit:
        return Path(explicit)
    env = environ if environ is not None else os.environ
    from_env = env.get(CONFIG_ROOT_ENVVAR)
    if from_env:
        return Path(from_env)
    return default_config_root(environ=env)
