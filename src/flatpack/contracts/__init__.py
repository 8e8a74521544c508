"""Contracts between the cabinet pipeline and its collaborators."""

from .kernel import GeometryKernel, Solid

__all__ = ["GeometryKernel", "Solid"]
