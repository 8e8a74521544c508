"""Conversion from configuration models to domain objects."""

from typing import Any

from flatpack.application.commands import GenerateOptions
from flatpack.application.config.loader import load_config_from_dict
from flatpack.application.config.schema import FlatpackConfiguration
from flatpack.domain import CabinetSpec


def merge_config_with_cli(
    config: FlatpackConfiguration, **overrides: Any
) -> FlatpackConfiguration:
    """Apply CLI overrides on top of a configuration.

    Keys named after ``cabinet`` or ``render`` fields replace the file value;
    ``None`` values are ignored.

    Raises:
        ConfigError: If the merged values are invalid.
        KeyError: If an override names no known field.
    """
    cabinet = config.cabinet.model_dump()
    render = config.render.model_dump()
    for key, value in overrides.items():
        if value is None:
            continue
        if key in cabinet:
            cabinet[key] = value
        elif key in render:
            render[key] = value
        else:
            raise KeyError(f"Unknown configuration override: {key}")
    return load_config_from_dict(
        {
            "schema_version": config.schema_version,
            "cabinet": cabinet,
            "render": render,
        }
    )


def config_to_spec(config: FlatpackConfiguration) -> CabinetSpec:
    cabinet = config.cabinet
    return CabinetSpec(
        width=cabinet.width,
        height=cabinet.height,
        depth=cabinet.depth,
        board_thickness=cabinet.board_thickness,
        shelf_count=cabinet.shelf_count,
        toe_kick_height=cabinet.toe_kick_height,
    )


def config_to_options(config: FlatpackConfiguration) -> GenerateOptions:
    return GenerateOptions(
        exploded=config.render.exploded, segments=config.render.segments
    )
