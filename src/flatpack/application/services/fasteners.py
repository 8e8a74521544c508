"""Fastener model construction and placement."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from flatpack.contracts.kernel import GeometryKernel, Solid
from flatpack.domain.constants import (
    DEFAULT_SEGMENTS,
    FASTENER_HEAD_HEIGHT,
    FASTENER_HEAD_RADIUS,
    FASTENER_SHAFT_LENGTH,
    FASTENER_SHAFT_RADIUS,
)
from flatpack.domain.value_objects import FastenerPlacement

__all__ = ["FastenerModelBuilder", "FastenerPlacementEngine"]

logger = logging.getLogger(__name__)

_Y_AXIS = (0.0, 1.0, 0.0)


class FastenerModelBuilder:
    """Builds the canonical fastener: a shaft along +Z with a head on top.

    The shaft is centred on the origin; the head sits on the shaft's +Z end.
    """

    def __init__(
        self,
        kernel: GeometryKernel,
        segments: int = DEFAULT_SEGMENTS,
        shaft_length: float = FASTENER_SHAFT_LENGTH,
        shaft_radius: float = FASTENER_SHAFT_RADIUS,
        head_height: float = FASTENER_HEAD_HEIGHT,
        head_radius: float = FASTENER_HEAD_RADIUS,
    ) -> None:
        self.kernel = kernel
        self.segments = segments
        self.shaft_length = shaft_length
        self.shaft_radius = shaft_radius
        self.head_height = head_height
        self.head_radius = head_radius

    @property
    def head_offset(self) -> float:
        """Z of the head centre relative to the shaft centre."""
        return self.shaft_length / 2 + self.head_height / 2

    def build(self) -> Solid:
        shaft = self.kernel.cylinder(self.shaft_length, self.shaft_radius, self.segments)
        head = self.kernel.translate(
            (0.0, 0.0, self.head_offset),
            self.kernel.cylinder(self.head_height, self.head_radius, self.segments),
        )
        return self.kernel.union(shaft, head)


class FastenerPlacementEngine:
    """Instances one fastener model at every placement of a side."""

    def __init__(self, kernel: GeometryKernel) -> None:
        self.kernel = kernel

    def place(self, model: Solid, placements: Sequence[FastenerPlacement]) -> Solid:
        """Union of ``model`` transformed onto each placement.

        Raises:
            ValueError: If there are no placements.
        """
        if not placements:
            raise ValueError("At least one fastener placement is required")

        instances = [
            self.kernel.translate(
                placement.position.as_tuple(),
                self.kernel.rotate(placement.rotation, _Y_AXIS, model),
            )
            for placement in placements
        ]
        logger.debug(f"Placed {len(instances)} fasteners on {placements[0].side.value} side")
        return self.kernel.union(*instances)
