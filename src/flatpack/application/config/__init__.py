"""Configuration loading for flat-pack cabinets."""

from .adapter import config_to_options, config_to_spec, merge_config_with_cli
from .loader import ConfigError, load_config, load_config_from_dict
from .schema import (
    SUPPORTED_VERSIONS,
    CabinetDimensionsConfig,
    FlatpackConfiguration,
    RenderConfig,
)

__all__ = [
    "CabinetDimensionsConfig",
    "ConfigError",
    "FlatpackConfiguration",
    "RenderConfig",
    "SUPPORTED_VERSIONS",
    "config_to_options",
    "config_to_spec",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
