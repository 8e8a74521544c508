"""Output formatters for cabinet plans."""

from __future__ import annotations

import json
from typing import Any

from flatpack.application.commands import CabinetPlan
from flatpack.domain import PanelSpec, Side


def _panel_dict(panel: PanelSpec) -> dict[str, Any]:
    return {
        "label": panel.label,
        "type": panel.panel_type.value,
        "size": list(panel.size.as_tuple()),
        "center": list(panel.center.as_tuple()),
    }


class LayoutReportFormatter:
    """Formats a cabinet plan as a human readable report."""

    def format(self, plan: CabinetPlan, solid_info: dict[str, Any] | None = None) -> str:
        spec = plan.params.spec
        lines = [
            "CABINET LAYOUT",
            "=" * 78,
            f"Width: {spec.width:g}  Height: {spec.height:g}  Depth: {spec.depth:g}  "
            f"Board: {spec.board_thickness:g}  Toe kick: {spec.toe_kick_height:g}",
            f"Shelves: {spec.shelf_count}  Explode: {plan.params.explode:g}",
            "",
            f"{'Panel':<14} {'Size (w x d x h)':<28} {'Center (x, y, z)'}",
            "-" * 78,
        ]
        for panel in plan.layout.panels:
            size = " x ".join(f"{v:.1f}" for v in panel.size.as_tuple())
            center = ", ".join(f"{v:.2f}" for v in panel.center.as_tuple())
            lines.append(f"{panel.label:<14} {size:<28} ({center})")

        lines.append("")
        lines.append(f"HOLES PER SIDE: {len(plan.hole_pattern)}")
        lines.append("-" * 78)
        for site in plan.hole_pattern.sites:
            lines.append(f"  y={site.y:8.2f}  z={site.z:8.2f}")

        lines.append("")
        for side in Side:
            lines.append(f"Fasteners ({side.value}): {len(plan.fasteners[side])}")

        if solid_info is not None:
            lines.append("")
            lines.append("SOLID")
            lines.append("-" * 78)
            lines.append(f"  Bounds min: {solid_info['bounds_min']}")
            lines.append(f"  Bounds max: {solid_info['bounds_max']}")
            lines.append(f"  Volume: {solid_info['volume']:.1f}")
            lines.append(f"  Watertight: {solid_info['watertight']}")
            lines.append(f"  Bodies: {solid_info['bodies']}")

        return "\n".join(lines)


class LayoutJsonFormatter:
    """Formats a cabinet plan as JSON."""

    def format(self, plan: CabinetPlan, solid_info: dict[str, Any] | None = None) -> str:
        spec = plan.params.spec
        data: dict[str, Any] = {
            "cabinet": {
                "width": spec.width,
                "height": spec.height,
                "depth": spec.depth,
                "board_thickness": spec.board_thickness,
                "shelf_count": spec.shelf_count,
                "toe_kick_height": spec.toe_kick_height,
            },
            "explode": plan.params.explode,
            "panels": [_panel_dict(panel) for panel in plan.layout.panels],
            "holes": {
                "radius": plan.hole_pattern.radius,
                "length": plan.hole_pattern.length,
                "sites": [
                    {"y": site.y, "z": site.z} for site in plan.hole_pattern.sites
                ],
            },
            "fasteners": {
                side.value: [
                    {
                        "position": list(placement.position.as_tuple()),
                        "rotation": placement.rotation,
                    }
                    for placement in plan.fasteners[side]
                ]
                for side in Side
            },
        }
        if solid_info is not None:
            data["solid"] = solid_info
        return json.dumps(data, indent=2)
