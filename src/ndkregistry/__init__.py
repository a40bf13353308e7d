"""ndkregistry: Discovery and ranking of locally installed BlackBerry Native SDKs."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
