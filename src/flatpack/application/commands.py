"""Application commands (use cases) for cabinet generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from flatpack.contracts.kernel import GeometryKernel, Solid
from flatpack.domain import (
    CabinetLayout,
    CabinetParameters,
    CabinetSpec,
    FastenerLayoutService,
    FastenerPlacement,
    HolePattern,
    HolePatternPlanner,
    PanelLayoutEngine,
    Side,
)
from flatpack.domain.constants import DEFAULT_SEGMENTS

from .services import (
    CabinetParts,
    FastenerModelBuilder,
    FastenerPlacementEngine,
    SceneComposer,
    SidePanelAssembler,
    build_panel,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateOptions:
    """Invocation options for a generation run.

    Attributes:
        exploded: Render parts visually separated.
        segments: Facet count used for every cylinder.
    """

    exploded: bool = False
    segments: int = DEFAULT_SEGMENTS

    def __post_init__(self) -> None:
        if self.segments < 3:
            raise ValueError("Cylinders need at least 3 segments")


@dataclass(frozen=True)
class CabinetPlan:
    """All resolved coordinates of a cabinet, before any solid is built."""

    params: CabinetParameters
    layout: CabinetLayout
    hole_pattern: HolePattern
    fasteners: dict[Side, list[FastenerPlacement]]

    @property
    def fastener_count(self) -> int:
        return sum(len(placements) for placements in self.fasteners.values())


@dataclass(frozen=True)
class GenerationResult:
    """Output of a generation run: the composed solid and its plan."""

    solid: Solid
    plan: CabinetPlan


class GenerateCabinetCommand:
    """Command to generate a complete flat-pack cabinet.

    Planning is pure and runs without a kernel; building solids requires one.
    """

    def __init__(
        self,
        kernel: GeometryKernel | None = None,
        layout_engine: PanelLayoutEngine | None = None,
        hole_planner: HolePatternPlanner | None = None,
        fastener_layout: FastenerLayoutService | None = None,
    ) -> None:
        self.kernel = kernel
        self.layout_engine = layout_engine or PanelLayoutEngine()
        self.hole_planner = hole_planner or HolePatternPlanner()
        self.fastener_layout = fastener_layout or FastenerLayoutService()

    def plan(self, spec: CabinetSpec, options: GenerateOptions | None = None) -> CabinetPlan:
        """Resolve every panel, hole and fastener coordinate."""
        options = options or GenerateOptions()
        params = CabinetParameters(spec=spec, exploded=options.exploded)
        layout = self.layout_engine.compute(params)
        pattern = self.hole_planner.plan(spec)
        fasteners = self.fastener_layout.all_placements(params, pattern)
        return CabinetPlan(
            params=params, layout=layout, hole_pattern=pattern, fasteners=fasteners
        )

    def execute(
        self, spec: CabinetSpec, options: GenerateOptions | None = None
    ) -> GenerationResult:
        """Plan the cabinet and build the assembled solid.

        Kernel errors propagate unchanged; nothing is returned on failure.

        Raises:
            RuntimeError: If the command was created without a kernel.
        """
        if self.kernel is None:
            raise RuntimeError("A geometry kernel is required to build solids")
        options = options or GenerateOptions()
        kernel = self.kernel
        plan = self.plan(spec, options)
        layout = plan.layout

        logger.debug(
            f"Building cabinet {spec.width}x{spec.height}x{spec.depth} "
            f"(exploded={options.exploded})"
        )

        assembler = SidePanelAssembler(kernel, segments=options.segments)
        placement_engine = FastenerPlacementEngine(kernel)
        model = FastenerModelBuilder(kernel, segments=options.segments).build()

        parts = CabinetParts(
            left_side=assembler.assemble(layout.left_side, plan.hole_pattern),
            right_side=assembler.assemble(layout.right_side, plan.hole_pattern),
            left_fasteners=placement_engine.place(model, plan.fasteners[Side.LEFT]),
            right_fasteners=placement_engine.place(model, plan.fasteners[Side.RIGHT]),
            top=build_panel(kernel, layout.top),
            bottom=build_panel(kernel, layout.bottom),
            back=build_panel(kernel, layout.back),
            shelves=[build_panel(kernel, shelf) for shelf in layout.shelves],
        )
        solid = SceneComposer(kernel).compose(parts)
        return GenerationResult(solid=solid, plan=plan)


def generate_cabinet(
    spec: CabinetSpec,
    options: GenerateOptions | None = None,
    kernel: GeometryKernel | None = None,
) -> GenerationResult:
    """Generate a cabinet solid.

    Args:
        spec: Cabinet dimensions.
        options: Invocation options, assembled view by default.
        kernel: Geometry backend, a TrimeshKernel when omitted.

    Returns:
        GenerationResult with the composed solid and the resolved plan.
    """
    if kernel is None:
        from flatpack.infrastructure.trimesh_kernel import TrimeshKernel

        kernel = TrimeshKernel()
    return GenerateCabinetCommand(kernel=kernel).execute(spec, options)
