"""Property-based tests for registry ordering and scan isolation.

Verifies that:
- Registry order is version ascending, then case-insensitive name.
- compare_to is antisymmetric and agrees with sorting.
- Malformed manifests never change how many valid installations a scan finds.
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from ndkregistry.core.models import InstallationRecord
from ndkregistry.core.versioning import NdkVersion
from ndkregistry.discovery.registry_scanner import RegistryScanner

from tests.discovery.helpers import create_ndk


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

versions = st.lists(st.integers(min_value=0, max_value=20), min_size=2, max_size=4).map(
    lambda parts: ".".join(str(p) for p in parts)
)

names = st.text(alphabet=st.sampled_from("abcABC xyzXYZ"), min_size=0, max_size=8)


@st.composite
def record_strategy(draw: st.DrawFn) -> InstallationRecord:
    """Generate an InstallationRecord with arbitrary name and version."""
    return InstallationRecord.create(draw(names), draw(versions), "/host", "/target")


garbage = st.sampled_from([
    "",
    "<installation>",
    "<installation><host>/h</host></installation>",
    "<installation><version>x.y</version><host>/h</host><target>/t</target></installation>",
    "not xml at all",
    "<project><name>unrelated</name></project>",
])


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrderingProperties:
    """Sorting always yields version-then-name order."""

    @given(st.lists(record_strategy(), max_size=12))
    @settings(max_examples=100)
    def test_sorted_is_version_then_name(self, records: list[InstallationRecord]) -> None:
        ordered = sorted(records)
        for a, b in zip(ordered, ordered[1:]):
            assert a.version <= b.version
            if a.version == b.version:
                assert a.name.casefold() <= b.name.casefold()

    @given(record_strategy(), record_strategy())
    def test_compare_to_antisymmetric(self, a: InstallationRecord, b: InstallationRecord) -> None:
        assert a.compare_to(b) == -b.compare_to(a)

    @given(record_strategy(), record_strategy())
    def test_zero_only_when_version_and_name_match(self, a: InstallationRecord, b: InstallationRecord) -> None:
        same = a.version == b.version and a.name.casefold() == b.name.casefold()
        assert (a.compare_to(b) == 0) == same

    @given(versions, versions)
    def test_version_order_is_numeric(self, x: str, y: str) -> None:
        vx, vy = NdkVersion.parse(x), NdkVersion.parse(y)
        padded_x = tuple(int(p) for p in x.split(".")) + (0,) * (4 - len(x.split(".")))
        padded_y = tuple(int(p) for p in y.split(".")) + (0,) * (4 - len(y.split(".")))
        assert (vx < vy) == (padded_x < padded_y)


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


class TestIsolationProperties:
    """N valid manifests plus M broken files always yield N records."""

    @given(
        valid=st.integers(min_value=0, max_value=4),
        broken=st.lists(garbage, max_size=5),
    )
    @settings(max_examples=25, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    def test_broken_files_do_not_change_result(self, valid: int, broken: list[str]) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp)
            config_root = base / "qconfig"
            config_root.mkdir()
            for i in range(valid):
                create_ndk(base / "ndks", config_root, f"ndk{i}", version=f"10.{i}")
            for i, content in enumerate(broken):
                (config_root / f"broken{i}.xml").write_text(content, encoding="utf-8")

            registry = RegistryScanner().scan(config_root)

        assert len(registry) == valid
        assert [str(r.version) for r in registry] == [f"10.{i}" for i in range(valid)]
