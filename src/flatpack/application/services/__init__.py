"""Application services that turn planned geometry into solids."""

from .fasteners import FastenerModelBuilder, FastenerPlacementEngine
from .panels import build_panel
from .scene import CabinetParts, SceneComposer
from .side_panels import SidePanelAssembler

__all__ = [
    "CabinetParts",
    "FastenerModelBuilder",
    "FastenerPlacementEngine",
    "SceneComposer",
    "SidePanelAssembler",
    "build_panel",
]
