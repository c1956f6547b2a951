"""Anchor computer registry: one pure function per (shape, router) pair."""

from __future__ import annotations

import math
from typing import Callable

from shape_anchors.anchors.computers import (
    circle_manhattan_anchor,
    circle_polyline_anchor,
    default_anchor,
    diamond_manhattan_anchor,
    diamond_polyline_anchor,
    hexagon_anchor,
    octagon_manhattan_anchor,
    octagon_polyline_anchor,
    rectangle_manhattan_anchor,
    rectangle_polyline_anchor,
)
from shape_anchors.config import GeometryConfig, resolve_config
from shape_anchors.geometry.types import Bounds, Point
from shape_anchors.logging import get_logger
from shape_anchors.types import RouterKind, ShapeKind

logger = get_logger(__name__)

AnchorFunction = Callable[[Bounds, Point, GeometryConfig], Point]

_COMPUTERS: dict[tuple[ShapeKind, RouterKind], AnchorFunction] = {
    (ShapeKind.RECTANGLE, RouterKind.MANHATTAN): rectangle_manhattan_anchor,
    (ShapeKind.RECTANGLE, RouterKind.POLYLINE): rectangle_polyline_anchor,
    (ShapeKind.DIAMOND, RouterKind.MANHATTAN): diamond_manhattan_anchor,
    (ShapeKind.DIAMOND, RouterKind.POLYLINE): diamond_polyline_anchor,
    (ShapeKind.CIRCLE, RouterKind.MANHATTAN): circle_manhattan_anchor,
    (ShapeKind.CIRCLE, RouterKind.POLYLINE): circle_polyline_anchor,
    # Hexagons use one policy for both routers.
    (ShapeKind.HEXAGON, RouterKind.MANHATTAN): hexagon_anchor,
    (ShapeKind.HEXAGON, RouterKind.POLYLINE): hexagon_anchor,
    (ShapeKind.OCTAGON, RouterKind.MANHATTAN): octagon_manhattan_anchor,
    (ShapeKind.OCTAGON, RouterKind.POLYLINE): octagon_polyline_anchor,
}


def anchor_kind(shape: ShapeKind | str, router: RouterKind | str) -> str:
    """Registry key as a string, e.g. ``"manhattan:hexagon"``."""
    return f"{RouterKind.parse(router).value}:{ShapeKind.parse(shape).value}"


def get_anchor_function(shape: ShapeKind | str, router: RouterKind | str) -> AnchorFunction:
    return _COMPUTERS[(ShapeKind.parse(shape), RouterKind.parse(router))]


def compute_anchor(
    shape: ShapeKind | str,
    bounds: Bounds,
    reference: Point,
    router: RouterKind | str = RouterKind.MANHATTAN,
    *,
    config: GeometryConfig | None = None,
) -> Point:
    """Compute where an edge toward *reference* meets the outline of *shape*.

    Args:
        shape: Outline kind of the node.
        bounds: Node bounds in canvas coordinates.
        reference: Point the edge comes from (other node center, cursor...).
        router: Routing strategy of the edge.
        config: Geometry overrides; defaults to the process-wide config.

    Returns:
        A point on the outline. Never raises for geometric input: a reference
        at the center (or a non-finite one) yields the rightmost point
        ``center + (radius, 0)``. Non-finite bounds fields count as 0.

    Raises:
        UnsupportedShapeKind: If *shape* is not a known shape kind.
        UnsupportedRouterKind: If *router* is not a known router kind.
    """
    func = get_anchor_function(shape, router)
    cfg = resolve_config(config)

    clean = bounds.finite()
    if clean != bounds:
        logger.debug("non-finite bounds %s treated as zero", bounds)
        bounds = clean

    center = bounds.center
    dx = reference.x - center.x
    dy = reference.y - center.y
    if not (math.isfinite(dx) and math.isfinite(dy)) or (dx == 0 and dy == 0):
        return default_anchor(bounds, cfg)
    return func(bounds, reference, cfg)


class AnchorComputer:
    """An anchor function bound to one (shape, router) pair.

    Callers that resolve the pair once per node (a router asking for many
    endpoints) hold one of these instead of repeating the lookup.
    """

    def __init__(
        self,
        shape: ShapeKind | str,
        router: RouterKind | str = RouterKind.MANHATTAN,
        config: GeometryConfig | None = None,
    ) -> None:
        self.shape = ShapeKind.parse(shape)
        self.router = RouterKind.parse(router)
        self.config = config

    @property
    def kind(self) -> str:
        return anchor_kind(self.shape, self.router)

    def get_anchor(self, bounds: Bounds, reference: Point) -> Point:
        return compute_anchor(self.shape, bounds, reference, self.router, config=self.config)

    def __repr__(self) -> str:
        return f"AnchorComputer({self.kind})"


def supported_pairs() -> list[tuple[ShapeKind, RouterKind]]:
    return list(_COMPUTERS)
