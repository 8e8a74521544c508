"""Application layer - use cases and configuration."""

from .commands import (
    CabinetPlan,
    GenerateCabinetCommand,
    GenerateOptions,
    GenerationResult,
    generate_cabinet,
)

__all__ = [
    "CabinetPlan",
    "GenerateCabinetCommand",
    "GenerateOptions",
    "GenerationResult",
    "generate_cabinet",
]
