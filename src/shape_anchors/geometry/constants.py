"""Geometry constants shared by anchors, ports and renderers.

Anything that draws a node outline must read its numbers from here, otherwise
computed anchors and ports drift away from the drawn shape.
"""

from __future__ import annotations

import math

# ─── Outline radius ──────────────────────────────────────────────────────────

# radius = min(width, height) / 2 * RADIUS_SCALE for circles and hexagons.
RADIUS_SCALE: float = 0.9

# ─── Intersection math ───────────────────────────────────────────────────────

INTERSECTION_EPSILON: float = 1e-10

# ─── Hexagon rotations ───────────────────────────────────────────────────────

HEXAGON_VERTEX_COUNT: int = 6
HEXAGON_BASELINE_ROTATION: float = 0.0
HEXAGON_API_ROTATION: float = math.pi / 2
HEXAGON_SUBPROCESS_ROTATION: float = math.pi

# ─── Cut-corner octagon ──────────────────────────────────────────────────────

OCTAGON_CUT: float = 15.0
# cut <= OCTAGON_MAX_CUT_RATIO * min(width, height) / 2
OCTAGON_MAX_CUT_RATIO: float = 0.8
# Empirical: pulls the four octagon ports off the bounding box edge.
OCTAGON_PORT_INSET: float = 5.0

# ─── Ports ───────────────────────────────────────────────────────────────────

PORT_SIZE: float = 10.0
CIRCLE_PORT_INSET: float = 2.0

# Empirical fractions for the diagonal ports of rounded start/end nodes;
# they approximate the rounded corner.
ROUNDED_DIAGONAL_NEAR: float = 0.15
ROUNDED_DIAGONAL_FAR: float = 0.85

# ─── Rendering ───────────────────────────────────────────────────────────────

CIRCLE_OUTLINE_SEGMENTS: int = 32
