"""CLI entry point for shape-anchors."""

import json
import sys

import click

from shape_anchors.anchors import compute_anchor
from shape_anchors.diagram import Diagram
from shape_anchors.geometry.types import Bounds, Point, Size
from shape_anchors.logging import set_log_level
from shape_anchors.nodes import build_node
from shape_anchors.ports import generate_ports
from shape_anchors.renderers.ascii import AsciiRenderer
from shape_anchors.types import PortVariant, RouterKind, ShapeKind


def _floats(value: str | None, count: int, param: str) -> list[float] | None:
    if value is None:
        return None
    parts = [p.strip() for p in value.split(",")]
    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        numbers = []
    if len(numbers) != count:
        raise click.BadParameter(f"expected {count} comma-separated numbers, got '{value}'", param_hint=param)
    return numbers


def _fmt(p: Point) -> str:
    return f"{round(p.x, 4) + 0.0:g},{round(p.y, 4) + 0.0:g}"


def _fail(message: str) -> None:
    click.echo(f"error: {message}", err=True)
    sys.exit(1)


def _write(text: str, output: str | None) -> None:
    if output:
        try:
            with open(output, "w") as f:
                f.write(text)
        except OSError as e:
            _fail(f"cannot write '{output}': {e}")
    else:
        click.echo(text, nl=False)


_SHAPES = [k.value for k in ShapeKind]
_ROUTERS = [k.value for k in RouterKind]
_VARIANTS = [v.value for v in PortVariant]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log fallback branches (DEBUG level)")
def main(verbose: bool) -> None:
    """Shape anchor and docking-port geometry for diagram nodes."""
    if verbose:
        set_log_level("DEBUG")


@main.command()
@click.option("--shape", "-s", type=click.Choice(_SHAPES, case_sensitive=False), required=True, help="Node outline")
@click.option("--router", "-r", type=click.Choice(_ROUTERS, case_sensitive=False), default="manhattan")
@click.option("--bounds", "-b", "bounds", required=True, help="Node bounds as X,Y,WIDTH,HEIGHT")
@click.option("--ref", "ref", required=True, help="Reference point as X,Y")
def anchor(shape: str, router: str, bounds: str, ref: str) -> None:
    """Print the anchor point where an edge toward REF meets the outline."""
    x, y, w, h = _floats(bounds, 4, "--bounds")
    rx, ry = _floats(ref, 2, "--ref")
    try:
        point = compute_anchor(shape, Bounds(x, y, w, h), Point(rx, ry), router)
    except ValueError as e:
        _fail(str(e))
    click.echo(_fmt(point))


@main.command()
@click.option("--node-type", "-t", "node_type", type=str, default=None, help="Node type, e.g. task or api:node")
@click.option("--shape", "-s", type=click.Choice(_SHAPES, case_sensitive=False), default=None)
@click.option("--variant", type=click.Choice(_VARIANTS, case_sensitive=False), default=None)
@click.option("--size", "size", default=None, help="Node size as WIDTH,HEIGHT")
@click.option("--id", "node_id", default="node", show_default=True, help="Owning node id")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text")
def ports(
    node_type: str | None,
    shape: str | None,
    variant: str | None,
    size: str | None,
    node_id: str,
    as_json: bool,
) -> None:
    """List the docking ports of a node type or shape."""
    dims = _floats(size, 2, "--size")
    if node_type is not None and variant is not None:
        raise click.UsageError("--variant applies to --shape only; node types fix their own layout")
    try:
        if node_type is not None:
            node = build_node(node_id, node_type, size=Size(*dims) if dims else None)
            port_list = node.ports
        elif shape is not None:
            if dims is None:
                raise click.BadParameter("required with --shape", param_hint="--size")
            port_list = generate_ports(shape, Size(*dims), node_id=node_id, variant=variant)
        else:
            raise click.UsageError("pass --node-type or --shape")
    except ValueError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in port_list], indent=2))
        return
    for p in port_list:
        click.echo(f"{p.id}\t{p.kind.value}\tanchor={_fmt(p.anchor)}\tposition={_fmt(p.position)}")


@main.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
def route(input: str | None, output: str | None) -> None:
    """Compute transition endpoints for a diagram JSON document."""
    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            _fail(f"cannot read '{input}': {e}")
    else:
        text = sys.stdin.read()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        _fail(f"invalid JSON: {e}")

    try:
        routed = Diagram.from_dict(data).route()
    except ValueError as e:
        _fail(str(e))

    _write(json.dumps([r.to_dict() for r in routed], indent=2) + "\n", output)


@main.command()
@click.option("--node-type", "-t", "node_type", type=str, default="task", show_default=True)
@click.option("--size", "size", default=None, help="Node size as WIDTH,HEIGHT")
@click.option("--ref", "ref", default=None, help="Reference point as X,Y (node at origin)")
@click.option("--router", "-r", type=click.Choice(_ROUTERS, case_sensitive=False), default="manhattan")
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode")
@click.option("--scale", type=float, default=2.0, show_default=True, help="Canvas units per character column")
def preview(node_type: str, size: str | None, ref: str | None, router: str, use_ascii: bool, scale: float) -> None:
    """Draw a node outline with its ports (and an anchor) as text."""
    dims = _floats(size, 2, "--size")
    point = _floats(ref, 2, "--ref")
    try:
        node = build_node("preview", node_type, size=Size(*dims) if dims else None)
        renderer = AsciiRenderer(unicode=not use_ascii, scale=scale)
        rendered = renderer.render(node, Point(*point) if point else None, router)
    except ValueError as e:
        _fail(str(e))
    click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
