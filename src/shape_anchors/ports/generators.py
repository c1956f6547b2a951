"""Port anchor layouts, one function per port variant.

Every function takes the node size and returns ``(suffix, anchor)`` pairs in
node-local coordinates. Positions reuse the outline formulas from
``geometry.polygon`` so ports sit on the drawn shape.
"""

from __future__ import annotations

import math

from shape_anchors.config import GeometryConfig
from shape_anchors.geometry.constants import (
    HEXAGON_API_ROTATION,
    HEXAGON_SUBPROCESS_ROTATION,
    HEXAGON_VERTEX_COUNT,
    ROUNDED_DIAGONAL_FAR,
    ROUNDED_DIAGONAL_NEAR,
)
from shape_anchors.geometry.polygon import diamond_vertices, regular_polygon
from shape_anchors.geometry.primitives import midpoint
from shape_anchors.geometry.types import Bounds, Point, Size
from shape_anchors.ports.types import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    LEFT,
    RIGHT,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
)

PortAnchors = list[tuple[str, Point]]


def rectangle_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    """Edge midpoints plus corners; task nodes allow diagonal connections."""
    w, h = max(size.width, 0.0), max(size.height, 0.0)
    return [
        (TOP, Point(w / 2, 0.0)),
        (RIGHT, Point(w, h / 2)),
        (BOTTOM, Point(w / 2, h)),
        (LEFT, Point(0.0, h / 2)),
        (TOP_LEFT, Point(0.0, 0.0)),
        (TOP_RIGHT, Point(w, 0.0)),
        (BOTTOM_LEFT, Point(0.0, h)),
        (BOTTOM_RIGHT, Point(w, h)),
    ]


def rounded_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    """Start/end nodes: compass points with hand-tuned diagonals."""
    w, h = max(size.width, 0.0), max(size.height, 0.0)
    near_x, far_x = w * ROUNDED_DIAGONAL_NEAR, w * ROUNDED_DIAGONAL_FAR
    near_y, far_y = h * ROUNDED_DIAGONAL_NEAR, h * ROUNDED_DIAGONAL_FAR
    return [
        (TOP, Point(w / 2, 0.0)),
        (RIGHT, Point(w, h / 2)),
        (BOTTOM, Point(w / 2, h)),
        (LEFT, Point(0.0, h / 2)),
        (TOP_LEFT, Point(near_x, near_y)),
        (TOP_RIGHT, Point(far_x, near_y)),
        (BOTTOM_LEFT, Point(near_x, far_y)),
        (BOTTOM_RIGHT, Point(far_x, far_y)),
    ]


def diamond_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    top, right, bottom, left = diamond_vertices(Bounds.from_size(size))
    w, h = max(size.width, 0.0), max(size.height, 0.0)
    return [
        (TOP, top),
        (RIGHT, right),
        (BOTTOM, bottom),
        (LEFT, left),
        (TOP_LEFT, Point(w * 0.25, h * 0.25)),
        (TOP_RIGHT, Point(w * 0.75, h * 0.25)),
        (BOTTOM_LEFT, Point(w * 0.25, h * 0.75)),
        (BOTTOM_RIGHT, Point(w * 0.75, h * 0.75)),
    ]


def _hexagon(size: Size, rotation: float, config: GeometryConfig) -> list[Point]:
    bounds = Bounds.from_size(size)
    return regular_polygon(bounds.center, bounds.radius(config.radius_scale), HEXAGON_VERTEX_COUNT, rotation)


def hexagon_90_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    """Pointy-top hexagon (api nodes): 4 principal ports only.

    Vertices from 90 degrees: v0 bottom, v1/v2 left side, v3 top, v4/v5 right side.
    """
    v = _hexagon(size, HEXAGON_API_ROTATION, config)
    return [
        (TOP, v[3]),
        (RIGHT, midpoint(v[4], v[5])),
        (BOTTOM, v[0]),
        (LEFT, midpoint(v[1], v[2])),
    ]


def hexagon_180_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    """Flat-top hexagon (sub-process nodes): 4 principal and 4 oblique ports.

    Vertices from 180 degrees: v0 left, v1/v2 top edge, v3 right, v4/v5 bottom edge.
    """
    v = _hexagon(size, HEXAGON_SUBPROCESS_ROTATION, config)
    return [
        (TOP, midpoint(v[1], v[2])),
        (RIGHT, v[3]),
        (BOTTOM, midpoint(v[4], v[5])),
        (LEFT, v[0]),
        (TOP_LEFT, midpoint(v[0], v[1])),
        (TOP_RIGHT, midpoint(v[2], v[3])),
        (BOTTOM_LEFT, midpoint(v[5], v[0])),
        (BOTTOM_RIGHT, midpoint(v[3], v[4])),
    ]


_CIRCLE_4 = [(TOP, 0), (RIGHT, 90), (BOTTOM, 180), (LEFT, 270)]
_CIRCLE_8 = _CIRCLE_4 + [(TOP_LEFT, 315), (TOP_RIGHT, 45), (BOTTOM_LEFT, 225), (BOTTOM_RIGHT, 135)]


def _circle(size: Size, config: GeometryConfig, directions: list[tuple[str, int]]) -> PortAnchors:
    bounds = Bounds.from_size(size)
    center = bounds.center
    r = max(bounds.radius(config.radius_scale) - config.circle_port_inset, 0.0)
    anchors: PortAnchors = []
    for suffix, degrees in directions:
        # measured from "up", clockwise, y down
        theta = math.radians(degrees)
        anchors.append((suffix, Point(center.x + r * math.sin(theta), center.y - r * math.cos(theta))))
    return anchors


def circle_4_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    return _circle(size, config, _CIRCLE_4)


def circle_8_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    return _circle(size, config, _CIRCLE_8)


def octagon_anchors(size: Size, config: GeometryConfig) -> PortAnchors:
    """Decision-table nodes: 4 principal ports pulled in from the box edges."""
    w, h = max(size.width, 0.0), max(size.height, 0.0)
    inset = config.octagon_port_inset
    return [
        (TOP, Point(w / 2, inset)),
        (RIGHT, Point(w - inset, h / 2)),
        (BOTTOM, Point(w / 2, h - inset)),
        (LEFT, Point(inset, h / 2)),
    ]
