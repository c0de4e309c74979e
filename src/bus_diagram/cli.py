"""CLI for bus-diagram."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import requests

from bus_diagram import __version__
from bus_diagram.api import KmbClient
from bus_diagram.errors import BusDiagramError
from bus_diagram.layout import DiagramConfig, SpacingMode
from bus_diagram.layout.constants import (
    DESTINATION_TEMPLATE,
    LABEL_RIGHT_MARGIN,
    MAX_LABEL_WIDTH,
    TEXT_X,
)
from bus_diagram.parser import RouteDiagram, format_stop_list, parse_stop_list
from bus_diagram.render import render_diagram, render_svg, write_png
from bus_diagram.themes import THEMES


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """bus-diagram: Generate vertical bus route diagrams from stop lists."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _fail(message: str) -> None:
    click.echo(message, err=True)
    raise SystemExit(1)


def _read_stop_list(path: Path) -> RouteDiagram:
    try:
        return parse_stop_list(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        _fail(f"Parse error: {path} is not valid UTF-8 ({e.reason} at byte {e.start})")
    except BusDiagramError as e:
        _fail(f"Parse error: {e}")


def _label_width_for(canvas_width: int) -> float:
    """Default label width for a custom canvas width."""
    return min(MAX_LABEL_WIDTH, canvas_width - TEXT_X - LABEL_RIGHT_MARGIN)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output file path. Defaults to <input>.png (or .svg)")
@click.option("--format", "fmt", type=click.Choice(["png", "svg"]), default=None,
              help="Output format (default: from the output suffix, else png)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="kmb",
              help="Visual theme (default: kmb)")
@click.option("--color", default=None, help="Accent color override, e.g. '#0066cc'")
@click.option("--width", type=int, default=None,
              help="Canvas width in pixels (label width follows unless set)")
@click.option("--height", type=int, default=None,
              help="Canvas height in pixels (default: fit all items)")
@click.option("--fan", is_flag=True,
              help="Spread items evenly over the canvas height instead of fixed spacing")
@click.option("--stop-spacing", type=float, default=None,
              help="Vertical distance between items (default: 60)")
@click.option("--max-label-width", type=float, default=None,
              help="Label width before wrapping/compressing (default: 360)")
@click.option("--min-scale", type=float, default=None,
              help="Minimum horizontal compression of labels (default: 0.6)")
@click.option("--footer-height", type=float, default=None,
              help="Height of the footer band showing the destination (default: none)")
@click.option("--route", default=None, help="Route number (overrides the stop list header)")
@click.option("--fare", default=None, help="Fare (overrides the stop list header)")
@click.option("--no-numbers", is_flag=True, help="Do not number the stops")
def render(
    input_file: Path,
    output: Path | None,
    fmt: str | None,
    theme: str,
    color: str | None,
    width: int | None,
    height: int | None,
    fan: bool,
    stop_spacing: float | None,
    max_label_width: float | None,
    min_scale: float | None,
    footer_height: float | None,
    route: str | None,
    fare: str | None,
    no_numbers: bool,
) -> None:
    """Render a stop list to a PNG (or SVG) route diagram."""
    diagram = _read_stop_list(input_file)

    if fmt is None:
        fmt = "svg" if output is not None and output.suffix.lower() == ".svg" else "png"
    if output is None:
        output = input_file.with_suffix(f".{fmt}")
    elif output.suffix.lower() != f".{fmt}":
        click.echo(f"Warning: writing {fmt} output to '{output.name}', "
                   f"which does not end in .{fmt}", err=True)

    if width is not None and max_label_width is None:
        max_label_width = _label_width_for(width)

    try:
        config = DiagramConfig().with_overrides(
            canvas_width=width,
            canvas_height=height,
            spacing_mode=SpacingMode.FAN if fan else None,
            stop_spacing=stop_spacing,
            max_label_width=max_label_width,
            min_horizontal_scale=min_scale,
            footer_height=footer_height,
            number_stops=False if no_numbers else None,
        )
    except ValueError as e:
        _fail(f"Invalid option: {e}")

    theme_obj = THEMES[theme].with_accent(color)
    kwargs = dict(
        route=route if route is not None else diagram.route,
        fare=fare if fare is not None else diagram.fare,
        footer=DESTINATION_TEMPLATE.format(destination=diagram.destination)
        if diagram.destination else "",
    )

    try:
        if fmt == "svg":
            svg = render_svg(diagram.items, config, theme_obj, **kwargs)
            if not svg.endswith("\n"):
                svg += "\n"
            output.write_text(svg, encoding="utf-8")
        else:
            image = render_diagram(diagram.items, config, theme_obj, **kwargs)
            write_png(image, output)
    except (BusDiagramError, ValueError) as e:
        _fail(f"Render error: {e}")

    if len(diagram.items) < 2:
        click.echo("Warning: fewer than 2 items, only the header was drawn", err=True)
    click.echo(f"Rendered {diagram.stop_count} stops, "
               f"{diagram.waypoint_count} waypoints -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a stop list."""
    diagram = _read_stop_list(input_file)

    errors = []
    if len(diagram.items) < 2:
        errors.append(f"need at least 2 items to draw a route, found {len(diagram.items)}")
    if diagram.stop_count == 0:
        errors.append("no stops (only waypoints)")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {diagram.stop_count} stops, {diagram.waypoint_count} waypoints")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a stop list."""
    diagram = _read_stop_list(input_file)

    click.echo(f"Route: {diagram.route or '(none)'}")
    click.echo(f"Fare: {diagram.fare or '(none)'}")
    click.echo(f"Destination: {diagram.destination or '(none)'}")
    click.echo(f"Stops: {diagram.stop_count}")
    click.echo(f"Waypoints: {diagram.waypoint_count}")
    if diagram.items:
        click.echo(f"  First: {diagram.items[0].display_name}")
        click.echo(f"  Last: {diagram.items[-1].display_name}")


@cli.command()
@click.argument("route")
def variants(route: str) -> None:
    """List the directions and services of a KMB route."""
    try:
        found = KmbClient().find_route_variants(route)
    except requests.RequestException as e:
        _fail(f"API error: {e}")
    except ValueError as e:
        _fail(str(e))

    if not found:
        _fail(f"Route {route.strip().upper()} not found")

    for v in found:
        service = "main" if v.is_main_service else f"special ({v.service_type})"
        click.echo(f"{v.route} {v.direction} service {v.service_type}: "
                   f"{v.orig_tc} -> {v.dest_tc} [{service}]")


@cli.command()
@click.argument("route")
@click.option("--direction", type=click.Choice(["outbound", "inbound"]), default="outbound",
              help="Direction of travel (default: outbound)")
@click.option("--service-type", default="1", help="Service type (default: 1, the main line)")
@click.option("--fare", default="", help="Fare to record in the stop list header")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Stop list path. Defaults to <ROUTE>_<direction>.txt")
@click.option("--render", "render_path", type=click.Path(path_type=Path), default=None,
              help="Also render the diagram to this PNG path")
def fetch(
    route: str,
    direction: str,
    service_type: str,
    fare: str,
    output: Path | None,
    render_path: Path | None,
) -> None:
    """Fetch a KMB route's stops into a stop list."""
    client = KmbClient()
    try:
        found = client.find_route_variants(route)
        variant = next(
            (v for v in found
             if v.direction == direction and v.service_type == service_type),
            None,
        )
        if variant is None:
            _fail(f"Route {route.strip().upper()} has no {direction} "
                  f"service {service_type}")
        stop_names = client.fetch_stop_names()
        items = client.fetch_route_items(
            variant.route, variant.direction, variant.service_type, stop_names
        )
    except requests.RequestException as e:
        _fail(f"API error: {e}")
    except ValueError as e:
        _fail(str(e))

    if not items:
        _fail(f"No stops returned for {variant.route} {direction}")

    diagram = RouteDiagram(
        route=variant.route,
        fare=fare,
        destination=variant.dest_tc,
        items=items,
    )

    if output is None:
        output = Path(f"{variant.route}_{direction}.txt")
    output.write_text(format_stop_list(diagram), encoding="utf-8")
    click.echo(f"Fetched {len(items)} stops -> {output}")

    if render_path is not None:
        image = render_diagram(
            diagram.items,
            theme=THEMES["kmb"],
            route=diagram.route,
            fare=diagram.fare,
        )
        write_png(image, render_path)
        click.echo(f"Rendered {len(items)} stops -> {render_path}")
