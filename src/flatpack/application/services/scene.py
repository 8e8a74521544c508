"""Scene composition: the final union of all cabinet parts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from flatpack.contracts.kernel import GeometryKernel, Solid

__all__ = ["CabinetParts", "SceneComposer"]

logger = logging.getLogger(__name__)


@dataclass
class CabinetParts:
    """Finished, fully positioned part solids of one cabinet."""

    left_side: Solid
    right_side: Solid
    left_fasteners: Solid
    right_fasteners: Solid
    top: Solid
    bottom: Solid
    back: Solid
    shelves: list[Solid] = field(default_factory=list)

    def all(self) -> list[Solid]:
        return [
            self.left_side,
            self.right_side,
            self.left_fasteners,
            self.right_fasteners,
            self.top,
            self.bottom,
            self.back,
            *self.shelves,
        ]


class SceneComposer:
    """Unions finished parts into one solid. Performs no positioning."""

    def __init__(self, kernel: GeometryKernel) -> None:
        self.kernel = kernel

    def compose(self, parts: CabinetParts) -> Solid:
        solids = parts.all()
        logger.debug(f"Composing {len(solids)} parts")
        return self.kernel.union(*solids)
