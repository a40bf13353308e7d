"""Version numbers and the named+versioned value type shared by all records.

NDK manifests declare versions in the four-part ``MAJOR.MINOR[.BUILD[.REVISION]]``
form (e.g. ``10.2.0.1155``). Two- and three-part versions are accepted as well;
for ordering, missing trailing components count as zero, so ``10.2`` and
``10.2.0.0`` sort as equal.

The registry's total order is defined once, here, by ``VersionedEntity.sort_key``:
version ascending, then name ascending, case-insensitively.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from ndkregistry.exceptions import InvalidVersionError, MissingFieldError

_VERSION_RE = re.compile(r"^\d+(?:\.\d+){1,3}$")

_COMPONENT_COUNT = 4


@functools.total_ordering
class NdkVersion:
    """A structured ``MAJOR.MINOR[.BUILD[.REVISION]]`` version.

    Attributes:
        components: The integer components as written (2 to 4 of them).
    """

    __slots__ = ("components",)

    def __init__(self, *components: int) -> None:
        if not 2 <= len(components) <= _COMPONENT_COUNT:
            raise InvalidVersionError(
                f"Version needs 2 to {_COMPONENT_COUNT} components, got {len(components)}"
            )
        if any(not isinstance(c, int) or c < 0 for c in components):
            raise InvalidVersionError(f"Invalid version components: {components!r}")
        self.components: tuple[int, ...] = tuple(components)

    @classmethod
    def parse(cls, text: str) -> NdkVersion:
        """Parse a version string such as ``"10.2.0.1155"``.

        Args:
            text: The version string. Surrounding whitespace is ignored.

        Returns:
            The parsed ``NdkVersion``.

        Raises:
            InvalidVersionError: If *text* is not a 2 to 4 part numeric version.
        """
        if text is None:
            raise InvalidVersionError("Version string is missing")
        stripped = text.strip()
        if not _VERSION_RE.match(stripped):
            raise InvalidVersionError(f"Invalid version: {text!r}")
        return cls(*(int(part) for part in stripped.split(".")))

    @property
    def key(self) -> tuple[int, int, int, int]:
        """Components padded with trailing zeros, used for comparison."""
        padding = (0,) * (_COMPONENT_COUNT - len(self.components))
        return self.components + padding  # type: ignore[return-value]

    @property
    def major(self) -> int:
        return self.key[0]

    @property
    def minor(self) -> int:
        return self.key[1]

    @property
    def build(self) -> int:
        return self.key[2]

    @property
    def revision(self) -> int:
        return self.key[3]

    def startswith(self, prefix: NdkVersion | str) -> bool:
        """Check whether the written components begin with *prefix*.

        ``NdkVersion.parse("10.2.0.1155").startswith("10.2")`` is True.
        A one-part prefix such as ``"10"`` is accepted here.
        """
        if isinstance(prefix, NdkVersion):
            wanted = prefix.components
        else:
            parts = prefix.strip().split(".")
            if not all(p.isdigit() for p in parts):
                raise InvalidVersionError(f"Invalid version prefix: {prefix!r}")
            wanted = tuple(int(p) for p in parts)
        return self.key[: len(wanted)] == wanted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NdkVersion):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NdkVersion):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)

    def __repr__(self) -> str:
        return f"NdkVersion({str(self)!r})"


@dataclass(frozen=True)
class VersionedEntity:
    """A display name paired with a version.

    Passing a string as *version* parses it. A missing (``None``) name fails
    construction; an empty name is accepted because manifests may omit it.

    Attributes:
        name: Display name of the entity.
        version: Its structured version.
    """

    name: str
    version: NdkVersion

    def __post_init__(self) -> None:
        if self.name is None:
            raise MissingFieldError("name")
        if self.version is None:
            raise MissingFieldError("version")
        if isinstance(self.version, str):
            object.__setattr__(self, "version", NdkVersion.parse(self.version))
        elif not isinstance(self.version, NdkVersion):
            raise InvalidVersionError(f"Unsupported version value: {self.version!r}")

    def sort_key(self) -> tuple[tuple[int, int, int, int], str]:
        """Registry sort key: version ascending, then case-insensitive name."""
        return (self.version.key, self.name.casefold())
