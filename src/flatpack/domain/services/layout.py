"""Panel layout engine for flat-pack cabinets.

Computes the centre and extent of every panel purely from the cabinet
dimensions and the explode offset. No solids are created here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import CabinetParameters, CabinetSpec
from ..value_objects import PanelSpec, PanelType, Side, Vector3

__all__ = ["CabinetLayout", "PanelLayoutEngine"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CabinetLayout:
    """Resolved panel positions for one cabinet at one explode offset.

    Attributes:
        left_side: Left side panel.
        right_side: Right side panel.
        top: Top panel.
        bottom: Bottom panel.
        back: Back panel.
        shelves: Shelves ordered bottom to top.
        top_z: Centre height of the top panel.
        bottom_z: Centre height of the bottom panel.
        explode: Explode offset the layout was computed with.
    """

    left_side: PanelSpec
    right_side: PanelSpec
    top: PanelSpec
    bottom: PanelSpec
    back: PanelSpec
    shelves: tuple[PanelSpec, ...]
    top_z: float
    bottom_z: float
    explode: float

    def side(self, side: Side) -> PanelSpec:
        return self.left_side if side is Side.LEFT else self.right_side

    @property
    def panels(self) -> list[PanelSpec]:
        """All panels: sides, top, bottom, back, then shelves."""
        return [
            self.left_side,
            self.right_side,
            self.top,
            self.bottom,
            self.back,
            *self.shelves,
        ]

    @property
    def shelf_heights(self) -> list[float]:
        return [shelf.center.z for shelf in self.shelves]


class PanelLayoutEngine:
    """Computes panel sizes and centres for a cabinet.

    Coordinate system:
    - Origin: floor level at the centre of the cabinet footprint
    - X: Width, side panels move outward along X when exploded
    - Y: Depth, top moves to +Y and bottom/back move to -Y when exploded
    - Z: Height
    """

    def compute(self, params: CabinetParameters) -> CabinetLayout:
        """Compute the full panel layout.

        Args:
            params: Cabinet dimensions and explode offset.

        Returns:
            The resolved CabinetLayout.
        """
        spec = params.spec
        explode = params.explode
        t = spec.board_thickness

        top_z = self.top_panel_z(spec)
        bottom_z = self.bottom_panel_z(spec)

        side_size = Vector3(t, spec.depth, spec.height)
        left_side = PanelSpec(
            PanelType.LEFT_SIDE,
            side_size,
            Vector3(self.side_x(spec, Side.LEFT, explode), 0.0, spec.height / 2),
        )
        right_side = PanelSpec(
            PanelType.RIGHT_SIDE,
            side_size,
            Vector3(self.side_x(spec, Side.RIGHT, explode), 0.0, spec.height / 2),
        )

        horizontal_size = Vector3(spec.width, spec.depth, t)
        top = PanelSpec(PanelType.TOP, horizontal_size, Vector3(0.0, explode, top_z))
        bottom = PanelSpec(
            PanelType.BOTTOM, horizontal_size, Vector3(0.0, -explode, bottom_z)
        )

        back = PanelSpec(
            PanelType.BACK,
            Vector3(spec.width, t, spec.height - spec.toe_kick_height),
            Vector3(
                0.0,
                -spec.depth / 2 - explode,
                (spec.height + spec.toe_kick_height) / 2,
            ),
        )

        shelves = tuple(self._shelves(spec, explode))

        logger.debug(
            f"Layout computed: explode={explode}, top_z={top_z}, "
            f"bottom_z={bottom_z}, shelves={len(shelves)}"
        )
        return CabinetLayout(
            left_side=left_side,
            right_side=right_side,
            top=top,
            bottom=bottom,
            back=back,
            shelves=shelves,
            top_z=top_z,
            bottom_z=bottom_z,
            explode=explode,
        )

    @staticmethod
    def side_x(spec: CabinetSpec, side: Side, explode: float = 0.0) -> float:
        """X centre of a side panel, pushed outward by the explode offset."""
        return side.sign * (spec.width / 2 - spec.board_thickness / 2 + explode)

    @staticmethod
    def top_panel_z(spec: CabinetSpec) -> float:
        """Centre height of the top panel."""
        return spec.height - spec.board_thickness / 2

    @staticmethod
    def bottom_panel_z(spec: CabinetSpec) -> float:
        """Centre height of the bottom panel, resting on the toe kick."""
        return spec.toe_kick_height + spec.board_thickness / 2

    @staticmethod
    def shelf_heights(spec: CabinetSpec) -> list[float]:
        """Centre heights of the shelves, evenly spaced above the bottom panel."""
        t = spec.board_thickness
        inner_height = spec.height - spec.toe_kick_height - t
        spacing = inner_height / (spec.shelf_count + 1)
        return [
            spec.toe_kick_height + t + spacing * number
            for number in range(1, spec.shelf_count + 1)
        ]

    def _shelves(self, spec: CabinetSpec, explode: float) -> list[PanelSpec]:
        t = spec.board_thickness
        size = Vector3(spec.width - 2 * t, spec.depth - t, t)
        shelves = []
        for index, z in enumerate(self.shelf_heights(spec)):
            # Shelves fan out around the second shelf.
            y = (explode / 2) * (index - 1)
            shelves.append(PanelSpec(PanelType.SHELF, size, Vector3(0.0, y, z), index))
        return shelves
