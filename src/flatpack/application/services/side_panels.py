"""Side panel assembly: drilling the shared hole pattern into each side."""

from __future__ import annotations

import logging

from flatpack.contracts.kernel import GeometryKernel, Solid
from flatpack.domain.constants import DEFAULT_SEGMENTS
from flatpack.domain.value_objects import HolePattern, PanelSpec

from .panels import build_panel

__all__ = ["SidePanelAssembler"]

logger = logging.getLogger(__name__)

# Cylinders are built along Z; a quarter turn about Y lays them along X.
_Y_AXIS = (0.0, 1.0, 0.0)


class SidePanelAssembler:
    """Builds a side panel solid with its fastener holes cut out.

    All holes are unioned into a single cutting tool and removed with one
    subtract, rather than one subtract per hole.
    """

    def __init__(self, kernel: GeometryKernel, segments: int = DEFAULT_SEGMENTS) -> None:
        self.kernel = kernel
        self.segments = segments

    def hole_tool(self, pattern: HolePattern, x: float) -> Solid:
        """Union of every hole cut, positioned for a panel centred at ``x``."""
        drill = self.kernel.rotate(
            90.0,
            _Y_AXIS,
            self.kernel.cylinder(pattern.length, pattern.radius, self.segments),
        )
        cuts = [
            self.kernel.translate(center.as_tuple(), drill)
            for center in pattern.placed_at(x)
        ]
        return self.kernel.union(*cuts)

    def assemble(self, panel: PanelSpec, pattern: HolePattern) -> Solid:
        """Build ``panel`` and subtract the hole pattern at its actual X."""
        logger.debug(
            f"Drilling {len(pattern)} holes into {panel.label} at x={panel.center.x}"
        )
        solid = build_panel(self.kernel, panel)
        return self.kernel.subtract(solid, self.hole_tool(pattern, panel.center.x))
