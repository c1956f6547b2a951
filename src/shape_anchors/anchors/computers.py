"""Per-shape anchor policies.

Each function maps a reference point to a point on the node outline. They
assume the reference point is not the node center; ``compute_anchor`` checks
that case before dispatching here.
"""

from __future__ import annotations

import math

from shape_anchors.config import GeometryConfig
from shape_anchors.geometry.constants import HEXAGON_BASELINE_ROTATION, HEXAGON_VERTEX_COUNT
from shape_anchors.geometry.polygon import (
    Polygon,
    cut_corner_octagon,
    diamond_vertices,
    hexagon_vertices,
    rectangle_vertices,
    vertex_angles,
)
from shape_anchors.geometry.primitives import (
    angular_distance,
    bearing,
    polar,
    ray_polygon_intersection,
    segment_intersection,
    unit,
)
from shape_anchors.geometry.types import Bounds, Point
from shape_anchors.logging import get_logger

logger = get_logger(__name__)


def snap_to_axis(dx: float, dy: float) -> tuple[float, float]:
    """Replace (dx, dy) by the unit axis of its dominant component.

    Ties go to the vertical axis.
    """
    if abs(dx) > abs(dy):
        return (1.0 if dx > 0 else -1.0), 0.0
    return 0.0, (1.0 if dy > 0 else -1.0)


def default_anchor(bounds: Bounds, config: GeometryConfig) -> Point:
    """The rightmost point of the inscribed circle, used for degenerate input."""
    center = bounds.center
    return Point(center.x + bounds.radius(config.radius_scale), center.y)


# ─── Circle ──────────────────────────────────────────────────────────────────


def circle_polyline_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    center = bounds.center
    radius = bounds.radius(config.radius_scale)
    direction = unit(reference.x - center.x, reference.y - center.y)
    if direction is None:
        return default_anchor(bounds, config)
    ux, uy = direction
    return Point(center.x + radius * ux, center.y + radius * uy)


def circle_manhattan_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    center = bounds.center
    radius = bounds.radius(config.radius_scale)
    mx, my = snap_to_axis(reference.x - center.x, reference.y - center.y)
    return Point(center.x + radius * mx, center.y + radius * my)


# ─── Hexagon ─────────────────────────────────────────────────────────────────


def nearest_edge(angles: list[float], angle: float) -> int:
    """Index i of the edge (i, i+1) whose angular midpoint is closest to *angle*."""
    n = len(angles)
    closest = 0
    min_diff = 2 * math.pi
    for i in range(n):
        first = angles[i]
        second = angles[(i + 1) % n]
        edge_angle = (first + second) / 2
        # the closing edge wraps past 2pi
        if second < first:
            edge_angle += math.pi
        diff = angular_distance(angle, edge_angle)
        if diff < min_diff:
            min_diff = diff
            closest = i
    return closest


def hexagon_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    """Hexagon policy, shared by both router kinds.

    Picks the edge facing the bearing, then intersects the center->reference
    line with it. Falls back to the radial projection when that fails.
    """
    center = bounds.center
    radius = bounds.radius(config.radius_scale)
    angle = bearing(center, reference)

    angles = vertex_angles(HEXAGON_VERTEX_COUNT, HEXAGON_BASELINE_ROTATION)
    vertices = hexagon_vertices(bounds, HEXAGON_BASELINE_ROTATION, config.radius_scale)
    edge = nearest_edge(angles, angle)

    hit = segment_intersection(center, reference, vertices[edge], vertices[(edge + 1) % HEXAGON_VERTEX_COUNT])
    if hit is None:
        logger.debug("hexagon edge %d missed for reference %s, using radial projection", edge, reference)
        return polar(center, radius, angle)
    return hit


# ─── Polygon outlines (rectangle, diamond, octagon) ──────────────────────────


def _outline_anchor(
    vertices: Polygon,
    bounds: Bounds,
    reference: Point,
    config: GeometryConfig,
    manhattan: bool,
) -> Point:
    center = bounds.center
    dx = reference.x - center.x
    dy = reference.y - center.y
    if manhattan:
        dx, dy = snap_to_axis(dx, dy)
    hit = ray_polygon_intersection(center, Point(center.x + dx, center.y + dy), vertices)
    if hit is None:
        logger.debug("no outline crossing toward %s, using radial projection", reference)
        return polar(center, bounds.radius(config.radius_scale), math.atan2(dy, dx))
    return hit


def rectangle_polyline_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    return _outline_anchor(rectangle_vertices(bounds), bounds, reference, config, manhattan=False)


def rectangle_manhattan_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    return _outline_anchor(rectangle_vertices(bounds), bounds, reference, config, manhattan=True)


def diamond_polyline_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    return _outline_anchor(diamond_vertices(bounds), bounds, reference, config, manhattan=False)


def diamond_manhattan_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    return _outline_anchor(diamond_vertices(bounds), bounds, reference, config, manhattan=True)


def octagon_polyline_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    vertices = cut_corner_octagon(bounds, config.octagon_cut)
    return _outline_anchor(vertices, bounds, reference, config, manhattan=False)


def octagon_manhattan_anchor(bounds: Bounds, reference: Point, config: GeometryConfig) -> Point:
    vertices = cut_corner_octagon(bounds, config.octagon_cut)
    return _outline_anchor(vertices, bounds, reference, config, manhattan=True)
