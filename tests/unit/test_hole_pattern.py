"""Unit tests for HolePatternPlanner and HolePattern."""

import pytest

from flatpack.domain import (
    CabinetParameters,
    CabinetSpec,
    HolePattern,
    HolePatternPlanner,
    HoleSite,
    PanelLayoutEngine,
    Side,
)


@pytest.fixture
def planner() -> HolePatternPlanner:
    return HolePatternPlanner()


class TestHolePatternPlanner:
    """Tests for hole site planning."""

    def test_reference_cabinet_has_fourteen_holes(
        self, planner: HolePatternPlanner, reference_spec: CabinetSpec
    ) -> None:
        assert len(planner.plan(reference_spec)) == 14

    def test_front_and_back_offsets(
        self, planner: HolePatternPlanner, reference_spec: CabinetSpec
    ) -> None:
        pattern = planner.plan(reference_spec)
        assert {site.y for site in pattern.sites} == {138.0, -138.0}

    def test_top_and_bottom_rows(
        self, planner: HolePatternPlanner, reference_spec: CabinetSpec
    ) -> None:
        pattern = planner.plan(reference_spec)
        assert pattern.sites[:8] == (
            HoleSite(138.0, 1154.0),
            HoleSite(-138.0, 1154.0),
            HoleSite(138.0, 1091.0),
            HoleSite(-138.0, 1091.0),
            HoleSite(138.0, 126.0),
            HoleSite(-138.0, 126.0),
            HoleSite(138.0, 189.0),
            HoleSite(-138.0, 189.0),
        )

    def test_shelf_rows_match_shelf_heights(
        self, planner: HolePatternPlanner, reference_spec: CabinetSpec
    ) -> None:
        pattern = planner.plan(reference_spec)
        layout = PanelLayoutEngine().compute(CabinetParameters(spec=reference_spec))
        shelf_hole_z = [site.z for site in pattern.sites[8:]]
        expected = [z for z in layout.shelf_heights for _ in range(2)]
        assert shelf_hole_z == expected

    @pytest.mark.parametrize("shelves", [0, 1, 2, 5, 10])
    def test_two_holes_per_shelf(self, planner: HolePatternPlanner, shelves: int) -> None:
        spec = CabinetSpec(600.0, 1200.0, 350.0, 18.0, shelves, 80.0)
        assert len(planner.plan(spec)) == 8 + 2 * shelves

    def test_hole_dimensions(
        self, planner: HolePatternPlanner, reference_spec: CabinetSpec
    ) -> None:
        pattern = planner.plan(reference_spec)
        assert pattern.radius == 2.0
        assert pattern.length == 20.0

    def test_rows_follow_top_and_bottom_panels(
        self, planner: HolePatternPlanner, reference_spec: CabinetSpec
    ) -> None:
        pattern = planner.plan(reference_spec)
        layout = PanelLayoutEngine().compute(CabinetParameters(spec=reference_spec))
        rows = sorted({site.z for site in pattern.sites[:8]})
        assert rows == [
            layout.bottom_z + 37.0,
            layout.bottom_z + 100.0,
            layout.top_z - 100.0,
            layout.top_z - 37.0,
        ]
        assert layout.top.center.z == layout.top_z
        assert layout.bottom.center.z == layout.bottom_z

    @pytest.mark.parametrize("side", list(Side))
    def test_panel_local_holes_unchanged_by_explode(
        self, planner: HolePatternPlanner, reference_spec: CabinetSpec, side: Side
    ) -> None:
        """Exploding moves the holes with their panel and nothing else."""
        pattern = planner.plan(reference_spec)
        engine = PanelLayoutEngine()
        local = []
        for exploded in (False, True):
            layout = engine.compute(
                CabinetParameters(spec=reference_spec, exploded=exploded)
            )
            panel_x = layout.side(side).center.x
            local.append(
                [(p.x - panel_x, p.y, p.z) for p in pattern.placed_at(panel_x)]
            )
        assembled, exploded_holes = local
        assert assembled == exploded_holes

    def test_custom_edge_margin(self, reference_spec: CabinetSpec) -> None:
        pattern = HolePatternPlanner(edge_margin=50.0).plan(reference_spec)
        assert pattern.sites[0] == HoleSite(125.0, 1141.0)


class TestHolePatternPlacement:
    """Tests for translating the shared pattern onto each side panel."""

    @pytest.mark.parametrize("exploded", [False, True])
    def test_left_and_right_sites_are_identical(
        self,
        planner: HolePatternPlanner,
        reference_spec: CabinetSpec,
        exploded: bool,
    ) -> None:
        """Both sides get the same holes in their own panel frame."""
        params = CabinetParameters(spec=reference_spec, exploded=exploded)
        layout = PanelLayoutEngine().compute(params)
        pattern = planner.plan(reference_spec)

        local = {}
        for side in Side:
            panel = layout.side(side)
            placed = pattern.placed_at(panel.center.x)
            local[side] = [(p.x - panel.center.x, p.y, p.z) for p in placed]

        assert local[Side.LEFT] == local[Side.RIGHT]
        assert all(x == 0.0 for x, _, _ in local[Side.LEFT])

    def test_placed_at_uses_given_x(self) -> None:
        pattern = HolePattern(sites=(HoleSite(1.0, 2.0),), radius=2.0, length=20.0)
        [center] = pattern.placed_at(-291.0)
        assert center.as_tuple() == (-291.0, 1.0, 2.0)

    def test_invalid_radius_rejected(self) -> None:
        with pytest.raises(ValueError):
            HolePattern(sites=(), radius=0.0, length=20.0)
