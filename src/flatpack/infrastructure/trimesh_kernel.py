"""Geometry kernel backed by trimesh meshes and manifold3d booleans."""

from __future__ import annotations

import math

import numpy as np
import trimesh
from trimesh.creation import box, cylinder

__all__ = ["TrimeshKernel"]


class TrimeshKernel:
    """GeometryKernel implementation producing ``trimesh.Trimesh`` solids.

    Boolean operations run through the manifold3d engine. Failures raised by
    trimesh or manifold3d are not caught here.
    """

    def __init__(self, engine: str = "manifold") -> None:
        self.engine = engine

    def box(self, size: tuple[float, float, float]) -> trimesh.Trimesh:
        return box(extents=size)

    def cylinder(self, height: float, radius: float, segments: int) -> trimesh.Trimesh:
        return cylinder(radius=radius, height=height, sections=segments)

    def translate(
        self, vector: tuple[float, float, float], solid: trimesh.Trimesh
    ) -> trimesh.Trimesh:
        moved = solid.copy()
        moved.apply_translation(np.asarray(vector, dtype=float))
        return moved

    def rotate(
        self,
        angle: float,
        axis: tuple[float, float, float],
        solid: trimesh.Trimesh,
    ) -> trimesh.Trimesh:
        matrix = trimesh.transformations.rotation_matrix(math.radians(angle), axis)
        rotated = solid.copy()
        rotated.apply_transform(matrix)
        return rotated

    def union(self, *solids: trimesh.Trimesh) -> trimesh.Trimesh:
        if not solids:
            raise ValueError("union requires at least one solid")
        if len(solids) == 1:
            return solids[0].copy()
        return trimesh.boolean.union(list(solids), engine=self.engine)

    def subtract(
        self, solid: trimesh.Trimesh, tool: trimesh.Trimesh
    ) -> trimesh.Trimesh:
        return trimesh.boolean.difference([solid, tool], engine=self.engine)

    @staticmethod
    def describe(solid: trimesh.Trimesh) -> dict[str, object]:
        """Summarise a solid for reports: bounds, volume and watertightness."""
        lower, upper = solid.bounds
        return {
            "bounds_min": [float(v) for v in lower],
            "bounds_max": [float(v) for v in upper],
            "volume": float(solid.volume),
            "watertight": bool(solid.is_watertight),
            "bodies": len(solid.split(only_watertight=False)),
        }
