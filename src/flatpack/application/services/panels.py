"""Panel solid construction."""

from __future__ import annotations

from flatpack.contracts.kernel import GeometryKernel, Solid
from flatpack.domain.value_objects import PanelSpec


def build_panel(kernel: GeometryKernel, panel: PanelSpec) -> Solid:
    """Create a box for ``panel`` at its resolved centre."""
    return kernel.translate(panel.center.as_tuple(), kernel.box(panel.size.as_tuple()))
