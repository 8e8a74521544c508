"""Domain layer - cabinet layout and hole planning."""

from .entities import CabinetParameters, CabinetSpec, CabinetSpecError
from .services import (
    CabinetLayout,
    FastenerLayoutService,
    HolePatternPlanner,
    PanelLayoutEngine,
)
from .value_objects import (
    FastenerPlacement,
    HolePattern,
    HoleSite,
    PanelSpec,
    PanelType,
    Side,
    Vector3,
)

__all__ = [
    "CabinetLayout",
    "CabinetParameters",
    "CabinetSpec",
    "CabinetSpecError",
    "FastenerLayoutService",
    "FastenerPlacement",
    "HolePattern",
    "HolePatternPlanner",
    "HoleSite",
    "PanelLayoutEngine",
    "PanelSpec",
    "PanelType",
    "Side",
    "Vector3",
]
