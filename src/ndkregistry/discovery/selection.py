"""Choosing one installation out of a scanned registry.

Registries are sorted ascending, so the "best" installation is the last one
that matches. Remembering which installation the user picked is left to
the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from ndkregistry.core.models import InstallationRecord


def latest_installation(records: Sequence[InstallationRecord]) -> InstallationRecord | None:
    """Return the highest installation, or ``None`` for an empty registry."""
    if not records:
        return None
    return max(records, key=lambda r: r.identity.sort_key())


def select_installation(
    records: Sequence[InstallationRecord],
    name: str | None = None,
    version: str | None = None,
) -> InstallationRecord | None:
    """Pick the highest installation matching a name and/or version prefix.

    Args:
        records: A registry as returned by ``RegistryScanner.scan``.
        name: Case-insensitive installation name to match exactly.
        version: Version prefix; ``"10.2"`` matches ``10.2.0.1155``.

    Returns:
        The best match, or ``None`` when nothing matches.

    Raises:
        InvalidVersionError: If *version* is not a dotted numeric prefix.
    """
    candidates = list(records)
    if name is not None:
        wanted = name.casefold()
        candidates = [r for r in candidates if r.name.casefold() == wanted]
    if version is not None:
        candidates = [r for r in candidates if r.version.startswith(version)]
    return latest_installation(candidates)
