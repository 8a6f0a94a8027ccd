"""CLI for diagram-edges."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import click

from diagram_edges import __version__
from diagram_edges.config import DiagramConfig, connector_placement_for
from diagram_edges.layout import assign_layers, edge_endpoints, place_nodes, simple_manhattan
from diagram_edges.parser.definition import parse_diagram, parse_padding
from diagram_edges.parser.model import Diagram
from diagram_edges.render import EdgeStyle, render_svg
from diagram_edges.render.curves import path_length
from diagram_edges.themes import THEMES

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(log_level: str = "WARNING") -> None:
    """Send package log records to stderr at the requested level."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("diagram_edges")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level.upper()))


def _load(input_file: Path) -> tuple[Diagram, DiagramConfig]:
    """Parse a definition and place unpositioned nodes, exiting on bad input."""
    try:
        diagram, config = parse_diagram(input_file.read_text())
        place_nodes(diagram, config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return diagram, config


def _fmt(point) -> str:
    return f"({point.x:g}, {point.y:g})"


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", help="Logging level (default: WARNING)")
def cli(log_level: str) -> None:
    """diagram-edges: Route and render connector edges between diagram nodes."""
    setup_logging(log_level)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--style", type=click.Choice([s.value for s in EdgeStyle]), default=None,
              help="Edge style, overriding the definition")
@click.option("--padding", type=str, default=None,
              help="Clearance between nodes and orthogonal routes")
@click.option("--arrowhead/--no-arrowhead", default=None,
              help="Draw arrowheads at edge ends")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    style: str | None,
    padding: str | None,
    arrowhead: bool | None,
) -> None:
    """Render a diagram definition to SVG."""
    diagram, config = _load(input_file)

    if style is not None:
        config.edge_style = EdgeStyle(style)
    if padding is not None:
        try:
            config.padding = parse_padding(padding)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--padding") from e
    if arrowhead is not None:
        config.show_arrowhead = arrowhead

    svg = render_svg(diagram, THEMES[theme], config)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(diagram.nodes)} nodes, "
               f"{len(diagram.edges)} edges -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--padding", type=str, default=None,
              help="Clearance between nodes and routes")
def route(input_file: Path, padding: str | None) -> None:
    """Print the orthogonal waypoints of every edge."""
    diagram, config = _load(input_file)
    if padding is not None:
        try:
            config.padding = parse_padding(padding)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--padding") from e

    for edge in diagram.edges:
        src, dest = edge_endpoints(diagram, edge, config)
        waypoints = simple_manhattan(
            diagram.nodes[edge.source],
            diagram.nodes[edge.target],
            src, dest,
            config.padding,
            config,
        )
        if not waypoints:
            click.echo(f"{edge.id}: no route")
            continue
        points = " ".join(_fmt(p) for p in waypoints)
        click.echo(f"{edge.id}: {_fmt(src)} -> {points} -> {_fmt(dest)} "
                   f"[length {path_length(src, dest, waypoints):.2f}]")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a diagram definition."""
    try:
        diagram, config = parse_diagram(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

    errors = []

    for edge in diagram.edges:
        if edge.source == edge.target:
            errors.append(f"Edge {edge.id} connects node '{edge.source}' to itself")

    if any(not node.positioned for node in diagram.nodes.values()):
        try:
            assign_layers(diagram)
        except ValueError as e:
            errors.append(str(e))

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(diagram.nodes)} nodes, "
               f"{len(diagram.edges)} edges")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a diagram definition."""
    diagram, config = _load(input_file)

    style = config.edge_style.value if config.edge_style else "(by placement)"
    click.echo(f"Title: {diagram.title or '(none)'}")
    click.echo(f"Nodes: {len(diagram.nodes)}")
    click.echo(f"Edges: {len(diagram.edges)}")
    click.echo(f"Edge style: {style}")
    click.echo(f"Padding: {config.padding:g}")
    click.echo(f"Default placement: {config.connector_placement.value}")

    placements = Counter(
        connector_placement_for(config, node).value for node in diagram.nodes.values()
    )
    for placement, count in sorted(placements.items()):
        click.echo(f"  {placement}: {count} nodes")
    for type_id, placement in sorted(config.type_placements.items()):
        click.echo(f"  type {type_id}: {placement.value}")

    isolated = [nid for nid in diagram.nodes if not diagram.node_edges(nid)]
    if isolated:
        click.echo(f"Isolated nodes: {', '.join(isolated)}")
