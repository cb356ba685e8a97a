"""
Command-line interface for sketchdraw.

Commands:
- render: Render a drawing file (JSON or YAML) to SVG
- format-length: Format a millimetre length in a display unit
- info: Summarise a drawing file
- set-dimension: Change a dimension's displayed value

Usage:
    sketchdraw render kitchen.json -o kitchen.svg
    sketchdraw format-length 914.4 --unit ft
    sketchdraw info kitchen.yaml
    sketchdraw set-dimension kitchen.json dim-1 3200
"""

from collections import Counter
from pathlib import Path

import click

from .drawing_generator import UNITS, calculate_scale, format_length, render
from .models import Drawing, load_drawing, save_drawing, update_dimension_value

DEFAULT_VIEWPORT_WIDTH = 1200
DEFAULT_VIEWPORT_HEIGHT = 900


def _load(path: Path) -> Drawing:
    try:
        return load_drawing(path)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """sketchdraw - render construction sketches as scaled SVG."""
    pass


@cli.command("render")
@click.argument("drawing_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output SVG file path. If not specified, prints to stdout.",
)
@click.option("--width", "-w", default=DEFAULT_VIEWPORT_WIDTH, show_default=True, type=float,
              help="Viewport width.")
@click.option("--height", "-h", "height", default=DEFAULT_VIEWPORT_HEIGHT, show_default=True, type=float,
              help="Viewport height.")
def render_command(drawing_file: Path, output: Path | None, width: float, height: float):
    """Render DRAWING_FILE to SVG."""
    drawing = _load(drawing_file)
    svg = render(drawing, width, height)

    if output:
        output.write_text(svg + "\n", encoding="utf-8")
        click.echo(f"Exported SVG: {output}")
    else:
        click.echo(svg)


@cli.command("format-length")
@click.argument("value", type=float)
@click.option("--unit", "-u", default="mm", show_default=True, type=click.Choice(UNITS),
              help="Display unit.")
def format_length_command(value: float, unit: str):
    """Format VALUE (millimetres) in a display unit."""
    click.echo(format_length(value, unit))


@cli.command()
@click.argument("drawing_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--width", "-w", default=DEFAULT_VIEWPORT_WIDTH, show_default=True, type=float,
              help="Viewport width used for the scale factor.")
@click.option("--height", "-h", "height", default=DEFAULT_VIEWPORT_HEIGHT, show_default=True, type=float,
              help="Viewport height used for the scale factor.")
def info(drawing_file: Path, width: float, height: float):
    """Show a summary of DRAWING_FILE."""
    drawing = _load(drawing_file)

    click.echo(f"Title: {drawing.title}")
    click.echo(f"Type: {drawing.type}")
    click.echo(f"Unit: {drawing.unit}")
    click.echo(f"Scale label: {drawing.scale}")
    click.echo(f"Extent: {drawing.width:g} x {drawing.height:g} mm")
    if drawing.width > 0 and drawing.height > 0:
        factor = calculate_scale(drawing.width, drawing.height, width, height)
        click.echo(f"Scale factor ({width:g}x{height:g}): {factor:.4f}")
    else:
        click.echo("Scale factor: n/a (drawing extent must be positive)")

    counts = Counter(e.type for e in drawing.elements)
    click.echo(f"\nElements ({len(drawing.elements)}):")
    for kind, count in sorted(counts.items()):
        click.echo(f"  {kind}: {count}")

    dims = drawing.dimensions()
    if dims:
        click.echo("\nDimensions:")
        for dim in dims:
            text = dim.label or format_length(dim.value, dim.unit or drawing.unit)
            click.echo(f"  {dim.id}: {text}")


@cli.command("set-dimension")
@click.argument("drawing_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("element_id")
@click.argument("value", type=float)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to save the edited drawing (default: overwrite DRAWING_FILE).",
)
def set_dimension(drawing_file: Path, element_id: str, value: float, output: Path | None):
    """Set the displayed VALUE (mm) of dimension ELEMENT_ID."""
    drawing = _load(drawing_file)

    try:
        updated = update_dimension_value(drawing, element_id, value)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    except KeyError as e:
        raise click.ClickException(f"No dimension with id {element_id!r}") from e

    target = output or drawing_file
    try:
        save_drawing(updated, target)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Updated {element_id} -> {format_length(value, updated.unit)} in {target}")


if __name__ == "__main__":
    cli()
