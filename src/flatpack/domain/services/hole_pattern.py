"""Hole pattern planning for cabinet side panels."""

from __future__ import annotations

import logging

from ..constants import EDGE_MARGIN, HOLE_CLEARANCE, HOLE_RADIUS, SECOND_ROW_OFFSET
from ..entities import CabinetSpec
from ..value_objects import HolePattern, HoleSite
from .layout import PanelLayoutEngine

__all__ = ["HolePatternPlanner"]

logger = logging.getLogger(__name__)


class HolePatternPlanner:
    """Plans the fastener holes shared by both side panels.

    Holes are laid out in the cabinet's central frame (X=0):
    - two rows below the top panel (EDGE_MARGIN and SECOND_ROW_OFFSET down)
    - two rows above the bottom panel, mirrored
    - one row at each shelf height
    Every row has a hole near the front and one near the back edge.
    """

    def __init__(
        self,
        edge_margin: float = EDGE_MARGIN,
        second_row_offset: float = SECOND_ROW_OFFSET,
        hole_radius: float = HOLE_RADIUS,
        hole_clearance: float = HOLE_CLEARANCE,
    ) -> None:
        self.edge_margin = edge_margin
        self.second_row_offset = second_row_offset
        self.hole_radius = hole_radius
        self.hole_clearance = hole_clearance

    def plan(self, spec: CabinetSpec) -> HolePattern:
        """Compute the hole pattern for a cabinet.

        Args:
            spec: Cabinet dimensions.

        Returns:
            HolePattern with 8 + 2 * shelf_count sites.
        """
        top_z = PanelLayoutEngine.top_panel_z(spec)
        bottom_z = PanelLayoutEngine.bottom_panel_z(spec)

        rows = [
            top_z - self.edge_margin,
            top_z - self.second_row_offset,
            bottom_z + self.edge_margin,
            bottom_z + self.second_row_offset,
            *PanelLayoutEngine.shelf_heights(spec),
        ]

        front_y = spec.depth / 2 - self.edge_margin
        back_y = -front_y
        sites = tuple(HoleSite(y, z) for z in rows for y in (front_y, back_y))

        logger.debug(f"Planned {len(sites)} holes per side ({len(rows)} rows)")
        return HolePattern(
            sites=sites,
            radius=self.hole_radius,
            length=spec.board_thickness + self.hole_clearance,
        )
