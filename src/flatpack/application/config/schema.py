"""Configuration schema for flat-pack cabinet generation.

A configuration file is JSON with a ``schema_version``, a ``cabinet`` block
holding the six dimensions and an optional ``render`` block.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from flatpack.domain.constants import DEFAULT_SEGMENTS

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CabinetDimensionsConfig(BaseModel):
    """Cabinet dimensions in millimeters.

    Attributes:
        width: Outer width.
        height: Outer height from the floor.
        depth: Outer depth.
        board_thickness: Thickness of every panel.
        shelf_count: Number of shelves (0 or more).
        toe_kick_height: Recess height below the bottom panel.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=600.0, gt=0)
    height: float = Field(default=1200.0, gt=0)
    depth: float = Field(default=350.0, gt=0)
    board_thickness: float = Field(default=18.0, gt=0)
    shelf_count: int = Field(default=3, ge=0)
    toe_kick_height: float = Field(default=80.0, gt=0)

    @model_validator(mode="after")
    def validate_inner_height(self) -> "CabinetDimensionsConfig":
        """Reject cabinets too short to fit the toe kick, top and bottom."""
        minimum = self.toe_kick_height + 2 * self.board_thickness
        if self.height <= minimum:
            raise ValueError(
                f"height ({self.height}) must exceed toe_kick_height + "
                f"2 * board_thickness ({minimum})"
            )
        return self


class RenderConfig(BaseModel):
    """Rendering options."""

    model_config = ConfigDict(extra="forbid")

    exploded: bool = Field(default=False, description="Render an exploded view")
    segments: int = Field(default=DEFAULT_SEGMENTS, ge=3, le=256)


class FlatpackConfiguration(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    cabinet: CabinetDimensionsConfig = Field(default_factory=CabinetDimensionsConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @model_validator(mode="after")
    def validate_version(self) -> "FlatpackConfiguration":
        if self.schema_version not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema_version {self.schema_version!r} "
                f"(supported: {supported})"
            )
        return self
