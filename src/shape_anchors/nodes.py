"""Node model builder.

Maps diagram node types onto an outline, a port layout and a default size,
and builds node models whose port sets are regenerated on every rebuild.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from shape_anchors.anchors import anchor_kind, compute_anchor
from shape_anchors.config import GeometryConfig, resolve_config
from shape_anchors.errors import UnsupportedShapeKind
from shape_anchors.geometry import constants
from shape_anchors.geometry.polygon import Polygon, outline
from shape_anchors.geometry.types import Bounds, Point, Size
from shape_anchors.ports import Port, generate_ports
from shape_anchors.types import PortVariant, RouterKind, ShapeKind


class NodeType(Enum):
    TASK = "task:node"
    DECISION = "decision:node"
    START = "start:node"
    END = "end:node"
    API = "api:node"
    DECISION_TABLE = "decisionTable:node"
    AUTO = "auto:node"
    SUB_PROCESS = "subProcess:node"

    @classmethod
    def parse(cls, value: NodeType | str) -> NodeType:
        """Resolve a member, a type id (``"api:node"``) or a name (``"sub_process"``)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key == member.value or key.lower() == member.name.lower():
                    return member
        raise UnsupportedShapeKind(value)


@dataclass
class NodeSpec:
    shape: ShapeKind
    variant: PortVariant
    default_size: Size
    rotation: float = constants.HEXAGON_BASELINE_ROTATION


NODE_SPECS: dict[NodeType, NodeSpec] = {
    NodeType.TASK: NodeSpec(ShapeKind.RECTANGLE, PortVariant.RECTANGLE, Size(120, 60)),
    NodeType.DECISION: NodeSpec(ShapeKind.DIAMOND, PortVariant.DIAMOND, Size(80, 80)),
    NodeType.START: NodeSpec(ShapeKind.RECTANGLE, PortVariant.ROUNDED, Size(100, 40)),
    NodeType.END: NodeSpec(ShapeKind.RECTANGLE, PortVariant.ROUNDED, Size(100, 40)),
    # Drawn and anchored on the baseline hexagon; only the port layout is rotated.
    NodeType.API: NodeSpec(ShapeKind.HEXAGON, PortVariant.HEXAGON_90, Size(100, 80)),
    NodeType.DECISION_TABLE: NodeSpec(ShapeKind.OCTAGON, PortVariant.OCTAGON, Size(120, 80)),
    NodeType.AUTO: NodeSpec(ShapeKind.CIRCLE, PortVariant.CIRCLE_8, Size(80, 80)),
    NodeType.SUB_PROCESS: NodeSpec(
        ShapeKind.HEXAGON, PortVariant.HEXAGON_180, Size(120, 80), constants.HEXAGON_SUBPROCESS_ROTATION
    ),
}


def node_spec(node_type: NodeType | str) -> NodeSpec:
    return NODE_SPECS[NodeType.parse(node_type)]


@dataclass
class NodeModel:
    """A positioned node and the ports it owns.

    Ports are node-local; ``absolute_port_anchor`` adds the node position.
    """

    id: str
    node_type: NodeType
    bounds: Bounds
    ports: list[Port] = field(default_factory=list)

    @property
    def spec(self) -> NodeSpec:
        return NODE_SPECS[self.node_type]

    @property
    def shape(self) -> ShapeKind:
        return self.spec.shape

    @property
    def position(self) -> Point:
        return Point(self.bounds.x, self.bounds.y)

    @property
    def center(self) -> Point:
        return self.bounds.center

    def anchor_kind(self, router: RouterKind | str = RouterKind.MANHATTAN) -> str:
        return anchor_kind(self.shape, router)

    def anchor(
        self,
        reference: Point,
        router: RouterKind | str = RouterKind.MANHATTAN,
        config: GeometryConfig | None = None,
    ) -> Point:
        """Boundary point toward *reference*, in canvas coordinates."""
        return compute_anchor(self.shape, self.bounds, reference, router, config=config)

    def port(self, suffix: str) -> Port | None:
        suffix = suffix.lstrip("_")
        for p in self.ports:
            if p.suffix == suffix:
                return p
        return None

    def absolute_port_anchor(self, suffix: str) -> Point | None:
        p = self.port(suffix)
        if p is None:
            return None
        return p.absolute_anchor(self.position)

    def outline(self, config: GeometryConfig | None = None) -> Polygon:
        cfg = resolve_config(config)
        return outline(
            self.shape,
            self.bounds,
            rotation=self.spec.rotation,
            radius_scale=cfg.radius_scale,
            cut=cfg.octagon_cut,
        )

    def resize(self, size: Size, config: GeometryConfig | None = None) -> NodeModel:
        """Rebuild with a new size; the port set is regenerated from scratch."""
        return build_node(self.id, self.node_type, self.position, size, config=config)

    def move_to(self, position: Point) -> NodeModel:
        return NodeModel(
            id=self.id,
            node_type=self.node_type,
            bounds=Bounds(position.x, position.y, self.bounds.width, self.bounds.height),
            ports=list(self.ports),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.node_type.value,
            "position": {"x": self.bounds.x, "y": self.bounds.y},
            "size": {"width": self.bounds.width, "height": self.bounds.height},
            "ports": [p.to_dict() for p in self.ports],
        }


def build_node(
    node_id: str,
    node_type: NodeType | str,
    position: Point | None = None,
    size: Size | None = None,
    *,
    config: GeometryConfig | None = None,
) -> NodeModel:
    """Build a node model with a fresh port set.

    Raises:
        UnsupportedShapeKind: If *node_type* is not a known node type.
    """
    kind = NodeType.parse(node_type)
    spec = NODE_SPECS[kind]
    if size is None:
        size = Size(spec.default_size.width, spec.default_size.height)
    bounds = Bounds.from_size(size, position)
    ports = generate_ports(spec.shape, size, node_id=node_id, variant=spec.variant, config=config)
    return NodeModel(id=node_id, node_type=kind, bounds=bounds, ports=ports)
