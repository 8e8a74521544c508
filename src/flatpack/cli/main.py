"""Typer CLI for flat-pack cabinet generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from flatpack import __version__
from flatpack.application import GenerateCabinetCommand
from flatpack.application.config import (
    ConfigError,
    FlatpackConfiguration,
    config_to_options,
    config_to_spec,
    load_config,
    merge_config_with_cli,
)
from flatpack.domain import CabinetSpecError
from flatpack.infrastructure import LayoutJsonFormatter, LayoutReportFormatter

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="flatpack",
    help="Generate flat-pack cabinet geometry with fastener holes.",
)


@app.command()
def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Cabinet width in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Cabinet height in mm"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", help="Cabinet depth in mm"),
    ] = None,
    thickness: Annotated[
        float | None,
        typer.Option("--thickness", "-t", help="Board thickness in mm"),
    ] = None,
    shelves: Annotated[
        int | None,
        typer.Option("--shelves", "-s", help="Number of shelves"),
    ] = None,
    toe_kick: Annotated[
        float | None,
        typer.Option("--toe-kick", help="Toe kick height in mm"),
    ] = None,
    exploded: Annotated[
        bool | None,
        typer.Option("--exploded/--assembled", help="Render an exploded view"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Compute the layout without building solids"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate a cabinet and print its layout report."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file) if config_file else FlatpackConfiguration()
        config = merge_config_with_cli(
            config,
            width=width,
            height=height,
            depth=depth,
            board_thickness=thickness,
            shelf_count=shelves,
            toe_kick_height=toe_kick,
            exploded=exploded,
        )
        spec = config_to_spec(config)
    except (ConfigError, CabinetSpecError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    options = config_to_options(config)
    solid_info = None
    if dry_run:
        plan = GenerateCabinetCommand().plan(spec, options)
    else:
        from flatpack.infrastructure.trimesh_kernel import TrimeshKernel

        kernel = TrimeshKernel()
        result = GenerateCabinetCommand(kernel=kernel).execute(spec, options)
        plan = result.plan
        solid_info = kernel.describe(result.solid)

    formatter = LayoutJsonFormatter() if output_format == "json" else LayoutReportFormatter()
    typer.echo(formatter.format(plan, solid_info))


@app.command()
def version() -> None:
    """Print the package version."""
    typer.echo(f"flatpack {__version__}")


if __name__ == "__main__":
    app()
