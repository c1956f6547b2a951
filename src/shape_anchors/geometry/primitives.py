"""Vector arithmetic, angle normalization and line/segment intersection."""

from __future__ import annotations

import math

from shape_anchors.geometry.constants import INTERSECTION_EPSILON
from shape_anchors.geometry.types import Point


def normalize_angle(angle: float) -> float:
    """Reduce *angle* (radians) into ``(-pi, pi]``."""
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle <= -math.pi:
        angle += 2 * math.pi
    return angle


def angular_distance(a: float, b: float) -> float:
    return abs(normalize_angle(a - b))


def bearing(origin: Point, target: Point) -> float:
    """Angle from *origin* to *target* via atan2 (y-down canvas)."""
    return math.atan2(target.y - origin.y, target.x - origin.x)


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def unit(dx: float, dy: float) -> tuple[float, float] | None:
    """Unit vector along (dx, dy), or None for a zero-length vector."""
    length = math.hypot(dx, dy)
    if length == 0.0 or not math.isfinite(length):
        return None
    return dx / length, dy / length


def polar(center: Point, radius: float, angle: float) -> Point:
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def is_finite_point(p: Point) -> bool:
    return math.isfinite(p.x) and math.isfinite(p.y)


def segment_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Intersect the infinite line p1-p2 with the finite segment p3-p4.

    Returns None when the lines are parallel (determinant below 1e-10) or the
    crossing lies outside the segment p3-p4.
    """
    denom = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    if not abs(denom) >= INTERSECTION_EPSILON:
        return None

    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / denom
    u = -((p1.x - p2.x) * (p1.y - p3.y) - (p1.y - p2.y) * (p1.x - p3.x)) / denom

    if 0.0 <= u <= 1.0:
        return Point(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))
    return None


def ray_polygon_intersection(origin: Point, through: Point, vertices: list[Point]) -> Point | None:
    """First crossing of the ray origin->through with a closed polygon.

    Crossings behind the origin are ignored. For a convex outline around the
    origin there is exactly one crossing (two equal ones at a vertex).
    """
    dx = through.x - origin.x
    dy = through.y - origin.y
    best: Point | None = None
    best_dist = math.inf
    n = len(vertices)
    for i in range(n):
        hit = segment_intersection(origin, through, vertices[i], vertices[(i + 1) % n])
        if hit is None:
            continue
        along = (hit.x - origin.x) * dx + (hit.y - origin.y) * dy
        if along < 0:
            continue
        d = distance(origin, hit)
        if d < best_dist:
            best = hit
            best_dist = d
    return best


def distance_to_segment(p: Point, a: Point, b: Point) -> float:
    abx = b.x - a.x
    aby = b.y - a.y
    length_sq = abx * abx + aby * aby
    if length_sq == 0.0:
        return distance(p, a)
    t = ((p.x - a.x) * abx + (p.y - a.y) * aby) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(p, Point(a.x + t * abx, a.y + t * aby))


def point_on_polygon(p: Point, vertices: list[Point], tolerance: float = 1e-6) -> bool:
    n = len(vertices)
    return any(distance_to_segment(p, vertices[i], vertices[(i + 1) % n]) <= tolerance for i in range(n))
