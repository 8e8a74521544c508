"""Geometry kernel protocol.

The cabinet pipeline never builds or combines solids itself. It asks a
kernel for primitives, rigid transforms and boolean operations, so layout
and planning logic can run against any CSG engine or a recording stub.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# Opaque solid handle owned by the kernel implementation.
Solid = Any


@runtime_checkable
class GeometryKernel(Protocol):
    """Protocol for the solid modelling backend.

    Conventions:
    - Primitives are centred on the origin.
    - Cylinders run along the +Z axis.
    - Angles are in degrees.
    - Operations never mutate their inputs.

    Example:
        ```python
        class MyKernel:
            def box(self, size):
                ...
        ```
    """

    def box(self, size: tuple[float, float, float]) -> Solid:
        """Create an axis-aligned box with the given (x, y, z) extent."""
        ...

    def cylinder(self, height: float, radius: float, segments: int) -> Solid:
        """Create a cylinder along Z."""
        ...

    def translate(self, vector: tuple[float, float, float], solid: Solid) -> Solid:
        """Return a copy of ``solid`` moved by ``vector``."""
        ...

    def rotate(
        self, angle: float, axis: tuple[float, float, float], solid: Solid
    ) -> Solid:
        """Return a copy of ``solid`` rotated about ``axis`` through the origin."""
        ...

    def union(self, *solids: Solid) -> Solid:
        """Combine solids into one."""
        ...

    def subtract(self, solid: Solid, tool: Solid) -> Solid:
        """Remove ``tool`` from ``solid``."""
        ...
