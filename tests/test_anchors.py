"""Tests for the anchor computer: every (shape, router) pair plus degenerate input."""

from __future__ import annotations

import math

import pytest

from shape_anchors.anchors import (
    AnchorComputer,
    anchor_kind,
    compute_anchor,
    get_anchor_function,
    nearest_edge,
    snap_to_axis,
    supported_pairs,
)
from shape_anchors.config import GeometryConfig
from shape_anchors.errors import UnsupportedRouterKind, UnsupportedShapeKind
from shape_anchors.geometry import (
    Bounds,
    Point,
    distance,
    hexagon_vertices,
    point_on_polygon,
    rectangle_vertices,
    vertex_angles,
)
from shape_anchors.types import RouterKind, ShapeKind

# ─── Helpers ──────────────────────────────────────────────────────────────────

SQUARE = Bounds(0, 0, 100, 100)
WIDE = Bounds(0, 0, 100, 60)


def ring(center: Point, radius: float, count: int = 24, phase: float = 0.1) -> list[Point]:
    """Reference points around *center*, offset from the axes by *phase*."""
    return [
        Point(center.x + radius * math.cos(phase + 2 * math.pi * k / count),
              center.y + radius * math.sin(phase + 2 * math.pi * k / count))
        for k in range(count)
    ]


def assert_point(p: Point, x: float, y: float, tol: float = 1e-9) -> None:
    assert p.x == pytest.approx(x, abs=tol), f"x: {p}"
    assert p.y == pytest.approx(y, abs=tol), f"y: {p}"


# ─── Circle ───────────────────────────────────────────────────────────────────


class TestCircle:
    @pytest.mark.parametrize("ref", ring(Point(50, 50), 200) + ring(Point(50, 50), 3))
    def test_polyline_lies_on_circle(self, ref):
        anchor = compute_anchor("circle", SQUARE, ref, "polyline")
        assert distance(anchor, SQUARE.center) == pytest.approx(45)

    def test_polyline_follows_true_direction(self):
        anchor = compute_anchor(ShapeKind.CIRCLE, SQUARE, Point(150, 150), RouterKind.POLYLINE)
        offset = 45 / math.sqrt(2)
        assert_point(anchor, 50 + offset, 50 + offset)

    @pytest.mark.parametrize("ref", ring(Point(50, 50), 200) + ring(Point(50, 50), 3))
    def test_manhattan_returns_one_of_four_poles(self, ref):
        anchor = compute_anchor("circle", SQUARE, ref, "manhattan")
        poles = [Point(95, 50), Point(5, 50), Point(50, 95), Point(50, 5)]
        assert anchor in poles

    def test_manhattan_south_west_reference_gives_south_pole(self):
        """|dx| == |dy| resolves to the vertical axis; y grows downwards."""
        anchor = compute_anchor("circle", SQUARE, Point(10, 90), "manhattan")
        assert anchor == Point(50, 95)

    def test_manhattan_horizontal_dominant(self):
        anchor = compute_anchor("circle", SQUARE, Point(-100, 60), "manhattan")
        assert anchor == Point(5, 50)

    def test_radius_uses_shorter_side(self):
        anchor = compute_anchor("circle", WIDE, Point(500, 30), "polyline")
        assert_point(anchor, 50 + 27, 30)

    def test_radius_scale_override(self):
        config = GeometryConfig(radius_scale=0.5)
        anchor = compute_anchor("circle", SQUARE, Point(200, 50), "polyline", config=config)
        assert_point(anchor, 75, 50)


# ─── Hexagon ──────────────────────────────────────────────────────────────────


class TestHexagon:
    def test_due_east_reference(self):
        anchor = compute_anchor("hexagon", SQUARE, Point(200, 50), "polyline")
        assert_point(anchor, 95, 50)

    def test_routers_share_one_policy(self):
        for ref in ring(SQUARE.center, 120) + ring(SQUARE.center, 10, phase=0.7):
            manhattan = compute_anchor("hexagon", SQUARE, ref, "manhattan")
            polyline = compute_anchor("hexagon", SQUARE, ref, "polyline")
            assert manhattan == polyline
        assert get_anchor_function("hexagon", "manhattan") is get_anchor_function("hexagon", "polyline")

    @pytest.mark.parametrize("bounds", [SQUARE, WIDE, Bounds(-40, 25, 80, 200)])
    def test_anchor_lies_on_an_edge(self, bounds):
        vertices = hexagon_vertices(bounds)
        refs = ring(bounds.center, 300) + ring(bounds.center, 1.5, phase=0.35)
        for ref in refs:
            anchor = compute_anchor("hexagon", bounds, ref, "polyline")
            assert point_on_polygon(anchor, vertices, tolerance=1e-6), f"{anchor} for {ref}"

    def test_anchor_is_on_ray_toward_reference(self):
        ref = Point(80, -40)
        anchor = compute_anchor("hexagon", SQUARE, ref, "polyline")
        center = SQUARE.center
        cross = (anchor.x - center.x) * (ref.y - center.y) - (anchor.y - center.y) * (ref.x - center.x)
        assert cross == pytest.approx(0, abs=1e-6)
        assert (anchor.x - center.x) * (ref.x - center.x) >= 0

    def test_top_edge_is_flat(self):
        """Baseline hexagon: vertices at 0, 60, ... degrees, so top and bottom are flat."""
        anchor = compute_anchor("hexagon", SQUARE, Point(50, -500), "polyline")
        assert_point(anchor, 50, 50 - 45 * math.sin(math.pi / 3))

    def test_zero_size_falls_back_to_center(self):
        bounds = Bounds(10, 10, 0, 0)
        anchor = compute_anchor("hexagon", bounds, Point(20, 10), "polyline")
        assert_point(anchor, 10, 10)


class TestNearestEdge:
    ANGLES = vertex_angles(6)

    def test_down_is_edge_one(self):
        assert nearest_edge(self.ANGLES, math.pi / 2) == 1

    def test_up_is_edge_four(self):
        assert nearest_edge(self.ANGLES, -math.pi / 2) == 4

    def test_closing_edge_wraps(self):
        """Edge 5 joins 300 and 0 degrees; its midpoint is 330 degrees."""
        assert nearest_edge(self.ANGLES, math.radians(-30)) == 5

    def test_east_picks_an_edge_touching_vertex_zero(self):
        assert nearest_edge(self.ANGLES, 0.0) in (0, 5)


# ─── Rectangle, diamond, octagon ──────────────────────────────────────────────


class TestRectangle:
    def test_polyline_right_edge(self):
        assert_point(compute_anchor("rectangle", WIDE, Point(200, 30), "polyline"), 100, 30)

    def test_polyline_diagonal(self):
        assert_point(compute_anchor("rectangle", WIDE, Point(150, 80), "polyline"), 100, 55)

    def test_polyline_top_edge(self):
        assert_point(compute_anchor("rectangle", WIDE, Point(50, -100), "polyline"), 50, 0)

    def test_manhattan_snaps_to_edge_midpoints(self):
        assert_point(compute_anchor("rectangle", WIDE, Point(150, 80), "manhattan"), 100, 30)
        assert_point(compute_anchor("rectangle", WIDE, Point(60, 200), "manhattan"), 50, 60)

    @pytest.mark.parametrize("ref", ring(Point(50, 30), 250))
    def test_polyline_lies_on_bounds(self, ref):
        anchor = compute_anchor("rectangle", WIDE, ref, "polyline")
        assert point_on_polygon(anchor, rectangle_vertices(WIDE), tolerance=1e-6)


class TestDiamond:
    def test_polyline_vertex(self):
        assert_point(compute_anchor("diamond", WIDE, Point(200, 30), "polyline"), 100, 30)

    def test_polyline_diagonal_hits_edge_midpoint(self):
        assert_point(compute_anchor("diamond", SQUARE, Point(100, 100), "polyline"), 75, 75)

    def test_manhattan_snaps_to_vertices(self):
        assert_point(compute_anchor("diamond", WIDE, Point(80, -100), "manhattan"), 50, 0)
        assert_point(compute_anchor("diamond", WIDE, Point(-80, 40), "manhattan"), 0, 30)


class TestOctagon:
    def test_polyline_flat_side(self):
        assert_point(compute_anchor("octagon", WIDE, Point(200, 30), "polyline"), 100, 30)

    def test_polyline_diagonal_misses_cut(self):
        assert_point(compute_anchor("octagon", WIDE, Point(150, 130), "polyline"), 80, 60)

    def test_polyline_hits_cut(self):
        """Toward the top-right corner the ray crosses the diagonal cut."""
        anchor = compute_anchor("octagon", SQUARE, Point(150, -50), "polyline")
        # cut edge (85, 0)-(100, 15) lies on x - y = 85; ray is x - 50 = 50 - y
        assert_point(anchor, 92.5, 7.5)

    def test_manhattan_tie_goes_vertical(self):
        assert_point(compute_anchor("octagon", WIDE, Point(150, 130), "manhattan"), 50, 60)

    def test_cut_override(self):
        config = GeometryConfig(octagon_cut=0)
        anchor = compute_anchor("octagon", SQUARE, Point(150, -50), "polyline", config=config)
        assert_point(anchor, 100, 0)


# ─── Cross-cutting properties ─────────────────────────────────────────────────


ALL_PAIRS = [(shape, router) for shape in ShapeKind for router in RouterKind]


class TestProperties:
    @pytest.mark.parametrize("shape,router", ALL_PAIRS)
    def test_degenerate_reference_returns_rightmost_point(self, shape, router):
        bounds = Bounds(10, 20, 100, 60)
        # center (60, 50), radius min(50, 30) * 0.9
        anchor = compute_anchor(shape, bounds, Point(60, 50), router)
        assert_point(anchor, 87, 50)

    @pytest.mark.parametrize("shape,router", ALL_PAIRS)
    def test_non_finite_reference_returns_rightmost_point(self, shape, router):
        anchor = compute_anchor(shape, SQUARE, Point(math.nan, 3), router)
        assert_point(anchor, 95, 50)
        anchor = compute_anchor(shape, SQUARE, Point(math.inf, 3), router)
        assert_point(anchor, 95, 50)

    @pytest.mark.parametrize("shape,router", ALL_PAIRS)
    def test_idempotent(self, shape, router):
        bounds = Bounds(-12.5, 7.25, 93.0, 41.0)
        for ref in ring(bounds.center, 77, count=12, phase=0.123):
            first = compute_anchor(shape, bounds, ref, router)
            second = compute_anchor(shape, bounds, ref, router)
            assert first == second

    @pytest.mark.parametrize("shape,router", ALL_PAIRS)
    def test_zero_size_never_fails(self, shape, router):
        anchor = compute_anchor(shape, Bounds(4, 4, 0, 0), Point(40, -3), router)
        assert math.isfinite(anchor.x) and math.isfinite(anchor.y)

    @pytest.mark.parametrize("shape,router", ALL_PAIRS)
    @pytest.mark.parametrize(
        "bounds",
        [
            Bounds(0, 0, math.nan, 100),
            Bounds(0, 0, 100, math.inf),
            Bounds(math.nan, 0, 100, 100),
            Bounds(0, -math.inf, 100, 100),
        ],
    )
    def test_non_finite_bounds_never_leak(self, shape, router, bounds):
        anchor = compute_anchor(shape, bounds, Point(200, 50), router)
        assert math.isfinite(anchor.x) and math.isfinite(anchor.y)

    def test_nan_width_counts_as_zero(self):
        anchor = compute_anchor("circle", Bounds(0, 0, math.nan, 100), Point(200, 50), "polyline")
        assert_point(anchor, 0, 50)

    def test_every_pair_registered(self):
        assert set(supported_pairs()) == set(ALL_PAIRS)


# ─── Boundary errors and helpers ──────────────────────────────────────────────


class TestBoundary:
    def test_unknown_shape(self):
        with pytest.raises(UnsupportedShapeKind):
            compute_anchor("triangle", SQUARE, Point(0, 0), "manhattan")

    def test_unknown_router(self):
        with pytest.raises(UnsupportedRouterKind):
            compute_anchor("circle", SQUARE, Point(0, 0), "curved")

    def test_wrong_type(self):
        with pytest.raises(UnsupportedShapeKind):
            compute_anchor(3, SQUARE, Point(0, 0), "manhattan")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            compute_anchor("circle", SQUARE, Point(0, 0), "curved")

    def test_names_are_case_insensitive(self):
        anchor = compute_anchor("Circle", SQUARE, Point(10, 90), "MANHATTAN")
        assert anchor == Point(50, 95)

    def test_anchor_kind(self):
        assert anchor_kind("hexagon", "manhattan") == "manhattan:hexagon"
        assert anchor_kind(ShapeKind.CIRCLE, RouterKind.POLYLINE) == "polyline:circle"

    def test_anchor_computer(self):
        computer = AnchorComputer("circle", "polyline")
        assert computer.kind == "polyline:circle"
        assert_point(computer.get_anchor(SQUARE, Point(50, -10)), 50, 5)
        assert "polyline:circle" in repr(computer)

    def test_snap_to_axis(self):
        assert snap_to_axis(1, 1) == (0.0, 1.0)
        assert snap_to_axis(-3, 1) == (-1.0, 0.0)
        assert snap_to_axis(0.5, -2) == (0.0, -1.0)
