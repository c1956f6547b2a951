"""Geometry primitives, shared constants and polygon vertex generation."""

from __future__ import annotations

from shape_anchors.geometry.polygon import (
    Polygon,
    clamp_cut,
    cut_corner_octagon,
    diamond_vertices,
    hexagon_vertices,
    outline,
    rectangle_vertices,
    regular_polygon,
    svg_points,
    vertex_angles,
)
from shape_anchors.geometry.primitives import (
    angular_distance,
    bearing,
    distance,
    distance_to_segment,
    midpoint,
    normalize_angle,
    point_on_polygon,
    polar,
    ray_polygon_intersection,
    segment_intersection,
    unit,
)
from shape_anchors.geometry.types import Bounds, Point, Size

__all__ = [
    "Bounds",
    "Point",
    "Polygon",
    "Size",
    "angular_distance",
    "bearing",
    "clamp_cut",
    "cut_corner_octagon",
    "diamond_vertices",
    "distance",
    "distance_to_segment",
    "hexagon_vertices",
    "midpoint",
    "normalize_angle",
    "outline",
    "point_on_polygon",
    "polar",
    "ray_polygon_intersection",
    "rectangle_vertices",
    "regular_polygon",
    "segment_intersection",
    "svg_points",
    "unit",
    "vertex_angles",
]
