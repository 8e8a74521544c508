"""Pytest configuration and shared fixtures for flat-pack cabinet tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from flatpack.domain import CabinetParameters, CabinetSpec


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: tests that build real solids with the mesh kernel"
    )


# =============================================================================
# Recording geometry kernel
# =============================================================================


@dataclass(eq=False)
class RecordedSolid:
    """A solid produced by RecordingKernel: the operation that made it."""

    op: str
    args: tuple[Any, ...] = ()
    children: tuple["RecordedSolid", ...] = ()


@dataclass
class RecordingKernel:
    """Geometry kernel stub that records every call instead of building solids."""

    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def _record(
        self, op: str, args: tuple[Any, ...] = (), children: tuple[Any, ...] = ()
    ) -> RecordedSolid:
        self.calls.append((op, args))
        return RecordedSolid(op, args, children)

    def box(self, size):
        return self._record("box", (tuple(size),))

    def cylinder(self, height, radius, segments):
        return self._record("cylinder", (height, radius, segments))

    def translate(self, vector, solid):
        return self._record("translate", (tuple(vector),), (solid,))

    def rotate(self, angle, axis, solid):
        return self._record("rotate", (angle, tuple(axis)), (solid,))

    def union(self, *solids):
        return self._record("union", (), solids)

    def subtract(self, solid, tool):
        return self._record("subtract", (), (solid, tool))

    def count(self, op: str) -> int:
        return sum(1 for name, _ in self.calls if name == op)


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def kernel() -> RecordingKernel:
    return RecordingKernel()


@pytest.fixture
def reference_spec() -> CabinetSpec:
    """600 x 1200 x 350 cabinet, 18 mm boards, 3 shelves, 80 mm toe kick."""
    return CabinetSpec(
        width=600.0,
        height=1200.0,
        depth=350.0,
        board_thickness=18.0,
        shelf_count=3,
        toe_kick_height=80.0,
    )


@pytest.fixture
def assembled_params(reference_spec: CabinetSpec) -> CabinetParameters:
    return CabinetParameters(spec=reference_spec)


@pytest.fixture
def exploded_params(reference_spec: CabinetSpec) -> CabinetParameters:
    return CabinetParameters(spec=reference_spec, exploded=True)
