"""Parametric flat-pack cabinet generator."""

__version__ = "0.1.0"
