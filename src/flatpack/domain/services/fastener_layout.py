"""Fastener placement computation."""

from __future__ import annotations

from ..entities import CabinetParameters
from ..value_objects import FastenerPlacement, HolePattern, Side
from .layout import PanelLayoutEngine

__all__ = ["FastenerLayoutService"]


class FastenerLayoutService:
    """Resolves where every fastener sits, one per hole per side.

    Fasteners start at their side panel's assembled X position and move
    outward by half the explode offset, so when exploded they hang between
    the panel and the cabinet body. Heads point away from the cabinet.
    """

    def placements(
        self, params: CabinetParameters, pattern: HolePattern, side: Side
    ) -> list[FastenerPlacement]:
        """Compute fastener placements for one side panel."""
        base_x = PanelLayoutEngine.side_x(params.spec, side)
        x = base_x + side.sign * params.explode / 2
        rotation = side.sign * 90.0
        return [
            FastenerPlacement(side=side, site=site, position=position, rotation=rotation)
            for site, position in zip(pattern.sites, pattern.placed_at(x))
        ]

    def all_placements(
        self, params: CabinetParameters, pattern: HolePattern
    ) -> dict[Side, list[FastenerPlacement]]:
        return {side: self.placements(params, pattern, side) for side in Side}
