"""Domain entities for flat-pack cabinet generation."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import EXPLODE_DISTANCE


class CabinetSpecError(ValueError):
    """Raised when cabinet dimensions would produce degenerate geometry.

    Attributes:
        errors: Every validation rule the dimensions violated.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid cabinet dimensions: " + "; ".join(errors))


@dataclass(frozen=True)
class CabinetSpec:
    """The six dimensions that fully determine a cabinet.

    All lengths are in millimeters. Any positive values are accepted as long
    as the resulting panels have positive size.

    Attributes:
        width: Outer width along X.
        height: Outer height along Z, measured from the floor.
        depth: Outer depth along Y.
        board_thickness: Thickness of every panel.
        shelf_count: Number of evenly spaced shelves.
        toe_kick_height: Height of the recess below the bottom panel.
    """

    width: float
    height: float
    depth: float
    board_thickness: float
    shelf_count: int
    toe_kick_height: float

    def __post_init__(self) -> None:
        errors = self.validate()
        if errors:
            raise CabinetSpecError(errors)

    def validate(self) -> list[str]:
        """Validate dimensions and return list of error messages."""
        errors: list[str] = []
        lengths = {
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "board_thickness": self.board_thickness,
            "toe_kick_height": self.toe_kick_height,
        }
        for name, value in lengths.items():
            if value <= 0:
                errors.append(f"{name} must be positive (got {value})")

        if isinstance(self.shelf_count, bool) or not isinstance(self.shelf_count, int):
            errors.append(f"shelf_count must be an integer (got {self.shelf_count!r})")
        elif self.shelf_count < 0:
            errors.append(f"shelf_count must not be negative (got {self.shelf_count})")

        if errors:
            return errors

        if self.toe_kick_height + 2 * self.board_thickness >= self.height:
            errors.append(
                "height must exceed toe_kick_height + 2 * board_thickness "
                f"({self.height} <= {self.toe_kick_height + 2 * self.board_thickness})"
            )
        if self.width <= 2 * self.board_thickness:
            errors.append(
                f"width must exceed 2 * board_thickness ({self.width} <= "
                f"{2 * self.board_thickness})"
            )
        if self.depth <= self.board_thickness:
            errors.append(
                f"depth must exceed board_thickness ({self.depth} <= "
                f"{self.board_thickness})"
            )
        return errors


@dataclass(frozen=True)
class CabinetParameters:
    """Cabinet dimensions together with the explode offset for one run.

    The offset is derived from the ``exploded`` flag only and never changes
    during a generation.
    """

    spec: CabinetSpec
    exploded: bool = False
    explode_distance: float = EXPLODE_DISTANCE

    def __post_init__(self) -> None:
        if self.explode_distance < 0:
            raise ValueError("Explode distance must be non-negative")

    @property
    def explode(self) -> float:
        """Part separation in millimeters, 0 when assembled."""
        return self.explode_distance if self.exploded else 0.0
