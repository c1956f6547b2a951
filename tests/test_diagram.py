"""Tests for the diagram model and transition endpoint routing."""

from __future__ import annotations

import pytest

from shape_anchors.diagram import Diagram, RoutedTransition, Transition
from shape_anchors.errors import UnknownElement, UnsupportedRouterKind, UnsupportedShapeKind
from shape_anchors.geometry import Point, Size
from shape_anchors.nodes import build_node
from shape_anchors.types import RouterKind


def two_tasks() -> Diagram:
    diagram = Diagram()
    diagram.add_node(build_node("A", "task", Point(0, 0), Size(100, 60)))
    diagram.add_node(build_node("B", "task", Point(300, 0), Size(100, 60)))
    return diagram


def doc(**transition) -> dict:
    base = {"id": "t1", "source": "A", "target": "B"}
    base.update(transition)
    return {
        "nodes": [
            {"id": "A", "type": "task:node", "position": {"x": 0, "y": 0}, "size": {"width": 100, "height": 60}},
            {"id": "B", "type": "task:node", "position": {"x": 300, "y": 0}, "size": {"width": 100, "height": 60}},
        ],
        "transitions": [base],
    }


def assert_point(p: Point, x: float, y: float) -> None:
    assert p.x == pytest.approx(x), f"x: {p}"
    assert p.y == pytest.approx(y), f"y: {p}"


# ─── Graph structure ──────────────────────────────────────────────────────────


class TestStructure:
    def test_counts(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B"))
        diagram.add_transition(Transition("t2", "A", "B"))
        assert diagram.node_count() == 2
        assert diagram.edge_count() == 2
        assert {t.id for t in diagram.transitions()} == {"t1", "t2"}

    def test_node_lookup(self):
        diagram = two_tasks()
        assert diagram.node("B").position == Point(300, 0)
        assert [n.id for n in diagram.nodes()] == ["A", "B"]
        with pytest.raises(UnknownElement):
            diagram.node("C")

    def test_transition_to_unknown_node(self):
        with pytest.raises(UnknownElement, match="unknown node 'C'"):
            two_tasks().add_transition(Transition("t1", "A", "C"))

    def test_replace_node_keeps_transitions(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B"))
        diagram.replace_node(diagram.node("B").move_to(Point(300, 200)))
        assert diagram.edge_count() == 1
        assert diagram.node("B").position == Point(300, 200)

    def test_replace_unknown_node(self):
        with pytest.raises(UnknownElement):
            two_tasks().replace_node(build_node("Z", "task"))

    def test_port_lookup(self):
        diagram = two_tasks()
        assert diagram.port("A", "_right").id == "A_right"
        with pytest.raises(UnknownElement, match="Unknown port"):
            diagram.port("A", "middle")


# ─── Routing ──────────────────────────────────────────────────────────────────


class TestRoute:
    def test_anchor_toward_other_center(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B"))
        (routed,) = diagram.route()
        assert_point(routed.start, 100, 30)
        assert_point(routed.end, 300, 30)
        assert routed.router is RouterKind.MANHATTAN

    def test_source_port_wins(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B", source_port="bottom"))
        (routed,) = diagram.route()
        assert routed.start == Point(50, 60)
        assert_point(routed.end, 300, 30)

    def test_both_ports(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B", source_port="_top_right", target_port="top_left"))
        (routed,) = diagram.route()
        assert routed.start == Point(100, 0)
        assert routed.end == Point(300, 0)

    def test_routing_points_steer_anchors(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B", routing_points=[Point(200, 200)]))
        (routed,) = diagram.route()
        assert_point(routed.start, 50, 60)
        assert_point(routed.end, 350, 60)
        assert routed.waypoints() == [routed.start, Point(200, 200), routed.end]

    def test_unknown_port(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B", target_port="middle"))
        with pytest.raises(UnknownElement, match="unknown port 'middle'"):
            diagram.route()

    def test_route_follows_moved_node(self):
        diagram = two_tasks()
        diagram.add_transition(Transition("t1", "A", "B"))
        diagram.replace_node(diagram.node("B").move_to(Point(0, 300)))
        (routed,) = diagram.route()
        assert_point(routed.start, 50, 60)
        assert_point(routed.end, 50, 300)


# ─── Loading ──────────────────────────────────────────────────────────────────


class TestFromDict:
    def test_load_and_route(self):
        routed = Diagram.from_dict(doc(router="polyline")).route()
        assert len(routed) == 1
        assert isinstance(routed[0], RoutedTransition)
        assert routed[0].router is RouterKind.POLYLINE
        assert_point(routed[0].start, 100, 30)

    def test_task_id_field_names(self):
        data = doc()
        data["transitions"] = [{"id": "t9", "sourceTaskId": "A", "targetTaskId": "B", "sourcePort": "right"}]
        (routed,) = Diagram.from_dict(data).route()
        assert routed.id == "t9"
        assert routed.start == Point(100, 30)

    def test_generated_transition_id(self):
        data = doc()
        del data["transitions"][0]["id"]
        assert Diagram.from_dict(data).transitions()[0].id == "transition0"

    def test_routing_points(self):
        diagram = Diagram.from_dict(doc(routingPoints=[{"x": 200, "y": 200}]))
        assert diagram.transitions()[0].routing_points == [Point(200, 200)]

    def test_default_size(self):
        data = {"nodes": [{"id": "n", "type": "auto"}]}
        assert Diagram.from_dict(data).node("n").bounds.size == Size(80, 80)

    def test_to_dict(self):
        (routed,) = Diagram.from_dict(doc(sourcePort="bottom")).route()
        data = routed.to_dict()
        assert data["source"] == "A"
        assert data["router"] == "manhattan"
        assert data["start"] == {"x": 50, "y": 60}
        assert data["routingPoints"] == []

    def test_missing_node_id(self):
        with pytest.raises(ValueError, match="missing 'id'"):
            Diagram.from_dict({"nodes": [{"type": "task"}]})

    def test_missing_transition_source(self):
        data = doc()
        del data["transitions"][0]["source"]
        with pytest.raises(ValueError, match="sourceTaskId"):
            Diagram.from_dict(data)

    def test_unknown_type(self):
        with pytest.raises(UnsupportedShapeKind):
            Diagram.from_dict({"nodes": [{"id": "n", "type": "pool"}]})

    def test_unknown_router(self):
        with pytest.raises(UnsupportedRouterKind):
            Diagram.from_dict(doc(router="spline"))
