"""CLI for flex-dump."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from flex_dump import __version__
from flex_dump.node.enums import PrintOptions
from flex_dump.node.model import Node
from flex_dump.parser import parse_tree
from flex_dump.printer import node_to_string
from flex_dump.render import render_svg
from flex_dump.themes import THEMES


def _load(input_file: Path) -> Node:
    """Load a tree file, exiting with status 1 on malformed input."""
    try:
        return parse_tree(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """flex-dump: Inspect flexbox layout trees as HTML-like text or SVG."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command("print")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Write to this file instead of stdout")
@click.option("--layout/--no-layout", default=True,
              help="Include computed layout (default: on)")
@click.option("--style/--no-style", default=True,
              help="Include non-default style properties (default: on)")
@click.option("--children/--no-children", default=True,
              help="Recurse into children (default: on)")
@click.option("--indent", "level", type=click.IntRange(min=0), default=0,
              help="Initial indentation level (default: 0)")
def print_tree(
    input_file: Path,
    output: Path | None,
    layout: bool,
    style: bool,
    children: bool,
    level: int,
) -> None:
    """Print a layout tree as nested <div> elements."""
    root = _load(input_file)

    options = PrintOptions.NONE
    if layout:
        options |= PrintOptions.LAYOUT
    if style:
        options |= PrintOptions.STYLE
    if children:
        options |= PrintOptions.CHILDREN

    text = node_to_string(root, options, level)

    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n")
        click.echo(f"Printed {sum(1 for _ in root.walk())} nodes -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
def svg(input_file: Path, output: Path | None, theme: str) -> None:
    """Render the computed layout of a tree as an SVG box diagram."""
    root = _load(input_file)
    content = render_svg(root, THEMES[theme])

    if output is None:
        output = input_file.with_suffix(".svg")

    if not content.endswith("\n"):
        content += "\n"
    output.write_text(content)
    click.echo(f"Rendered {sum(1 for _ in root.walk())} boxes -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a layout tree document."""
    root = _load(input_file)

    errors = []
    for node in root.walk():
        layout = node.layout
        if layout.width < 0 or layout.height < 0:
            errors.append(f"Node '{node.id}' has a negative computed size "
                          f"({layout.width} x {layout.height})")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {sum(1 for _ in root.walk())} nodes, "
               f"depth {root.depth()}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a layout tree document."""
    root = _load(input_file)
    nodes = list(root.walk())

    click.echo(f"Root: {root.id}")
    click.echo(f"Nodes: {len(nodes)}")
    click.echo(f"Depth: {root.depth()}")
    click.echo(f"Root size: {root.layout.width:g} x {root.layout.height:g}")
    measured = [node.id for node in nodes if node.has_measure_func]
    click.echo(f"Measured nodes: {len(measured)}")
    for node_id in measured:
        click.echo(f"  {node_id}")
