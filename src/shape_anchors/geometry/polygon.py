"""Polygon vertex generator.

Produces the ordered, implicitly closed vertex lists of the node outlines.
Anchors, ports and renderers all build their polygons here.
"""

from __future__ import annotations

import math

from shape_anchors.geometry.constants import (
    CIRCLE_OUTLINE_SEGMENTS,
    HEXAGON_BASELINE_ROTATION,
    HEXAGON_VERTEX_COUNT,
    OCTAGON_CUT,
    OCTAGON_MAX_CUT_RATIO,
    RADIUS_SCALE,
)
from shape_anchors.geometry.types import Bounds, Point
from shape_anchors.types import ShapeKind

Polygon = list[Point]


def regular_polygon(center: Point, radius: float, vertex_count: int, rotation: float = 0.0) -> Polygon:
    """Vertices at ``rotation + k * 2pi / n`` on a circle of *radius*."""
    step = 2 * math.pi / vertex_count
    return [
        Point(center.x + radius * math.cos(rotation + k * step), center.y + radius * math.sin(rotation + k * step))
        for k in range(vertex_count)
    ]


def vertex_angles(vertex_count: int, rotation: float = 0.0) -> list[float]:
    step = 2 * math.pi / vertex_count
    return [rotation + k * step for k in range(vertex_count)]


def hexagon_vertices(
    bounds: Bounds,
    rotation: float = HEXAGON_BASELINE_ROTATION,
    radius_scale: float = RADIUS_SCALE,
) -> Polygon:
    return regular_polygon(bounds.center, bounds.radius(radius_scale), HEXAGON_VERTEX_COUNT, rotation)


def diamond_vertices(bounds: Bounds) -> Polygon:
    """Top, right, bottom, left: the edge midpoints of *bounds*."""
    # spans the full bounds, not a min(w, h) square; anchors and ports rely on it
    c = bounds.center
    return [
        Point(c.x, bounds.y),
        Point(bounds.right(), c.y),
        Point(c.x, bounds.bottom()),
        Point(bounds.x, c.y),
    ]


def rectangle_vertices(bounds: Bounds) -> Polygon:
    return [
        Point(bounds.x, bounds.y),
        Point(bounds.right(), bounds.y),
        Point(bounds.right(), bounds.bottom()),
        Point(bounds.x, bounds.bottom()),
    ]


def clamp_cut(bounds: Bounds, cut: float) -> float:
    limit = OCTAGON_MAX_CUT_RATIO * min(bounds.safe_width, bounds.safe_height) / 2
    return max(0.0, min(cut, limit))


def cut_corner_octagon(bounds: Bounds, cut: float = OCTAGON_CUT) -> Polygon:
    """A rectangle whose four corners are replaced by 45-degree cuts.

    Not a regular octagon: the straight sides keep the box proportions and
    only the corners shrink. Clockwise from the top edge's left end.
    """
    c = clamp_cut(bounds, cut)
    left, top, right, bottom = bounds.x, bounds.y, bounds.right(), bounds.bottom()
    return [
        Point(left + c, top),
        Point(right - c, top),
        Point(right, top + c),
        Point(right, bottom - c),
        Point(right - c, bottom),
        Point(left + c, bottom),
        Point(left, bottom - c),
        Point(left, top + c),
    ]


def outline(
    shape: ShapeKind | str,
    bounds: Bounds,
    *,
    rotation: float = HEXAGON_BASELINE_ROTATION,
    radius_scale: float = RADIUS_SCALE,
    cut: float = OCTAGON_CUT,
) -> Polygon:
    """The polygon a renderer draws for *shape* inside *bounds*.

    Circles come back sampled with CIRCLE_OUTLINE_SEGMENTS vertices.
    """
    kind = ShapeKind.parse(shape)
    if kind is ShapeKind.RECTANGLE:
        return rectangle_vertices(bounds)
    if kind is ShapeKind.DIAMOND:
        return diamond_vertices(bounds)
    if kind is ShapeKind.HEXAGON:
        return hexagon_vertices(bounds, rotation, radius_scale)
    if kind is ShapeKind.OCTAGON:
        return cut_corner_octagon(bounds, cut)
    return regular_polygon(bounds.center, bounds.radius(radius_scale), CIRCLE_OUTLINE_SEGMENTS)


def svg_points(vertices: Polygon, precision: int = 2) -> str:
    """Format vertices for an SVG ``<polygon points=...>`` attribute."""
    return " ".join(f"{round(p.x, precision):g},{round(p.y, precision):g}" for p in vertices)
