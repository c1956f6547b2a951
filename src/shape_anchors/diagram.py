"""Diagram: node models and transitions on a networkx multigraph.

This is the router-facing side of the engine: for every transition it picks
the two endpoints, either a port the transition is attached to or an anchor
computed toward the other end. Nothing here is persisted; a diagram is built
from a plain mapping, routed, and thrown away.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import networkx as nx

from shape_anchors.config import GeometryConfig
from shape_anchors.errors import UnknownElement
from shape_anchors.geometry.types import Point, Size
from shape_anchors.logging import get_logger
from shape_anchors.nodes import NodeModel, build_node
from shape_anchors.ports import Port
from shape_anchors.types import RouterKind

logger = get_logger(__name__)


@dataclass
class Transition:
    id: str
    source_id: str
    target_id: str
    router: RouterKind = RouterKind.MANHATTAN
    source_port: str | None = None
    target_port: str | None = None
    routing_points: list[Point] = field(default_factory=list)


@dataclass
class RoutedTransition:
    """Endpoints of a transition for one routing pass."""

    id: str
    source_id: str
    target_id: str
    router: RouterKind
    start: Point
    end: Point
    routing_points: list[Point] = field(default_factory=list)

    def waypoints(self) -> list[Point]:
        return [self.start, *self.routing_points, self.end]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "source": self.source_id,
            "target": self.target_id,
            "router": self.router.value,
            "start": {"x": self.start.x, "y": self.start.y},
            "end": {"x": self.end.x, "y": self.end.y},
            "routingPoints": [{"x": p.x, "y": p.y} for p in self.routing_points],
        }


class Diagram:
    """Nodes and transitions of one diagram.

    Wraps a networkx MultiDiGraph keyed by transition id, so parallel
    transitions between the same two nodes are kept apart.
    """

    def __init__(self, graph: nx.MultiDiGraph | None = None) -> None:
        self.graph: nx.MultiDiGraph = graph if graph is not None else nx.MultiDiGraph()

    @classmethod
    def from_dict(cls, data: dict, config: GeometryConfig | None = None) -> Diagram:
        """Build a diagram from ``{"nodes": [...], "transitions": [...]}``.

        Raises:
            UnsupportedShapeKind: On an unknown node type.
            UnsupportedRouterKind: On an unknown router kind.
            UnknownElement: When a transition references a missing node.
            ValueError: On missing required fields.
        """
        diagram = cls()
        for raw in data.get("nodes", []):
            node_id = _require(raw, "id", "node")
            position = _point(raw.get("position"))
            size = _size(raw.get("size"))
            diagram.add_node(build_node(node_id, _require(raw, "type", "node"), position, size, config=config))

        for index, raw in enumerate(data.get("transitions", [])):
            diagram.add_transition(
                Transition(
                    id=raw.get("id") or f"transition{index}",
                    source_id=raw.get("source") or _require(raw, "sourceTaskId", "transition"),
                    target_id=raw.get("target") or _require(raw, "targetTaskId", "transition"),
                    router=RouterKind.parse(raw.get("router", RouterKind.default())),
                    source_port=raw.get("sourcePort"),
                    target_port=raw.get("targetPort"),
                    routing_points=[_point(p) for p in raw.get("routingPoints", [])],
                )
            )
        return diagram

    def add_node(self, node: NodeModel) -> None:
        self.graph.add_node(node.id, data=node)

    def add_transition(self, transition: Transition) -> None:
        for node_id in (transition.source_id, transition.target_id):
            if node_id not in self.graph:
                raise UnknownElement(f"Transition '{transition.id}' references unknown node '{node_id}'")
        self.graph.add_edge(transition.source_id, transition.target_id, key=transition.id, data=transition)

    def node(self, node_id: str) -> NodeModel:
        if node_id not in self.graph:
            raise UnknownElement(f"Unknown node '{node_id}'")
        return self.graph.nodes[node_id]["data"]

    def port(self, node_id: str, suffix: str) -> Port:
        """Port *suffix* of node *node_id*; a leading underscore is ignored."""
        node = self.node(node_id)
        p = node.port(suffix)
        if p is None:
            raise UnknownElement(f"Unknown port '{suffix}' on '{node_id}'")
        return p

    def nodes(self) -> list[NodeModel]:
        return [attrs["data"] for _, attrs in self.graph.nodes(data=True)]

    def transitions(self) -> list[Transition]:
        return [attrs["data"] for _, _, attrs in self.graph.edges(data=True)]

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def replace_node(self, node: NodeModel) -> None:
        """Swap in a rebuilt node (after resize or move); transitions stay attached."""
        if node.id not in self.graph:
            raise UnknownElement(f"Unknown node '{node.id}'")
        self.graph.nodes[node.id]["data"] = node

    def route(self, config: GeometryConfig | None = None) -> list[RoutedTransition]:
        """Compute both endpoints of every transition."""
        return [self.route_transition(t, config) for t in self.transitions()]

    def route_transition(self, transition: Transition, config: GeometryConfig | None = None) -> RoutedTransition:
        source = self.node(transition.source_id)
        target = self.node(transition.target_id)

        source_port = self._port_anchor(source, transition.source_port, transition.id)
        target_port = self._port_anchor(target, transition.target_port, transition.id)

        if transition.routing_points:
            toward_target = transition.routing_points[0]
            toward_source = transition.routing_points[-1]
        else:
            toward_target = target_port or target.center
            toward_source = source_port or source.center

        start = source_port or source.anchor(toward_target, transition.router, config)
        end = target_port or target.anchor(toward_source, transition.router, config)
        logger.debug("routed %s: %s -> %s", transition.id, start, end)

        return RoutedTransition(
            id=transition.id,
            source_id=source.id,
            target_id=target.id,
            router=transition.router,
            start=start,
            end=end,
            routing_points=list(transition.routing_points),
        )

    @staticmethod
    def _port_anchor(node: NodeModel, suffix: str | None, transition_id: str) -> Point | None:
        if not suffix:
            return None
        anchor = node.absolute_port_anchor(suffix)
        if anchor is None:
            raise UnknownElement(f"Transition '{transition_id}' references unknown port '{suffix}' on '{node.id}'")
        return anchor


def _require(raw: dict, key: str, what: str):
    if key not in raw or raw[key] in (None, ""):
        raise ValueError(f"{what} entry is missing '{key}': {raw!r}")
    return raw[key]


def _point(raw: dict | None) -> Point | None:
    if raw is None:
        return None
    return Point(float(raw.get("x", 0.0)), float(raw.get("y", 0.0)))


def _size(raw: dict | None) -> Size | None:
    if raw is None:
        return None
    return Size(float(raw["width"]), float(raw["height"]))
