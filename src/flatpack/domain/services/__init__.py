"""Domain services for cabinet geometry planning."""

from .fastener_layout import FastenerLayoutService
from .hole_pattern import HolePatternPlanner
from .layout import CabinetLayout, PanelLayoutEngine

__all__ = [
    "CabinetLayout",
    "FastenerLayoutService",
    "HolePatternPlanner",
    "PanelLayoutEngine",
]
