"""Value objects for the flat-pack cabinet domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PanelType(str, Enum):
    """Types of panels in a flat-pack cabinet."""

    LEFT_SIDE = "left_side"
    RIGHT_SIDE = "right_side"
    TOP = "top"
    BOTTOM = "bottom"
    BACK = "back"
    SHELF = "shelf"


class Side(str, Enum):
    """Which side panel of the cabinet a hole or fastener belongs to.

    Attributes:
        LEFT: The side panel at negative X.
        RIGHT: The side panel at positive X.
    """

    LEFT = "left"
    RIGHT = "right"

    @property
    def sign(self) -> float:
        """Direction of this side along the X axis (-1 or +1)."""
        return -1.0 if self is Side.LEFT else 1.0

    @property
    def panel_type(self) -> PanelType:
        return PanelType.LEFT_SIDE if self is Side.LEFT else PanelType.RIGHT_SIDE


@dataclass(frozen=True)
class Vector3:
    """A point or extent in cabinet space.

    Coordinate system:
    - Origin: floor level, centred on the cabinet's width and depth
    - X: Width (left to right)
    - Y: Depth (back to front)
    - Z: Height (bottom to top)
    """

    x: float
    y: float
    z: float

    def offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Vector3:
        """Return a copy moved by the given deltas."""
        return Vector3(self.x + dx, self.y + dy, self.z + dz)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class PanelSpec:
    """Size and centre position of one cabinet panel.

    Attributes:
        panel_type: Role of the panel in the cabinet.
        size: Extent as (width along X, depth along Y, height along Z).
        center: Centre of the panel in cabinet space.
        index: Zero-based shelf index, None for structural panels.
    """

    panel_type: PanelType
    size: Vector3
    center: Vector3
    index: int | None = None

    def __post_init__(self) -> None:
        if self.size.x <= 0 or self.size.y <= 0 or self.size.z <= 0:
            raise ValueError("Panel dimensions must be positive")

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'shelf 2'."""
        name = self.panel_type.value.replace("_", " ")
        if self.index is not None:
            return f"{name} {self.index + 1}"
        return name


@dataclass(frozen=True)
class HoleSite:
    """A planned fastener hole on a side panel.

    Attributes:
        y: Signed offset from the panel's depth centre.
        z: Absolute height along the cabinet's vertical axis.
    """

    y: float
    z: float


@dataclass(frozen=True)
class HolePattern:
    """Hole sites planned once in the cabinet's central (X=0) frame.

    The same pattern is drilled into both side panels by translating it to
    each panel's X position, so left and right drilling can never diverge.

    Attributes:
        sites: Hole sites in planning order.
        radius: Radius of each cylindrical cut.
        length: Length of each cut along the X axis.
    """

    sites: tuple[HoleSite, ...]
    radius: float
    length: float

    def __post_init__(self) -> None:
        if self.radius <= 0 or self.length <= 0:
            raise ValueError("Hole radius and length must be positive")

    def __len__(self) -> int:
        return len(self.sites)

    def placed_at(self, x: float) -> list[Vector3]:
        """Return hole centres for a panel whose centre lies at ``x``."""
        return [Vector3(x, site.y, site.z) for site in self.sites]


@dataclass(frozen=True)
class FastenerPlacement:
    """Resolved position and orientation of one fastener.

    The fastener model is authored along +Z; ``rotation`` is the angle in
    degrees about the Y axis that turns it onto the side panel normal.
    """

    side: Side
    site: HoleSite
    position: Vector3
    rotation: float
