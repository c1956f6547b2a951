"""shape-anchors: anchor points and docking ports on diagram node outlines."""

from shape_anchors.anchors import AnchorComputer, anchor_kind, compute_anchor
from shape_anchors.config import GeometryConfig, get_geometry_config, set_geometry_config
from shape_anchors.diagram import Diagram, RoutedTransition, Transition
from shape_anchors.errors import (
    ShapeAnchorsError,
    UnknownElement,
    UnsupportedPortVariant,
    UnsupportedRouterKind,
    UnsupportedShapeKind,
)
from shape_anchors.geometry import Bounds, Point, Size
from shape_anchors.logging import set_log_level
from shape_anchors.nodes import NodeModel, NodeType, build_node
from shape_anchors.ports import Port, generate_ports
from shape_anchors.renderers import AsciiRenderer
from shape_anchors.types import PortKind, PortVariant, RouterKind, ShapeKind

__all__ = [
    "AnchorComputer",
    "Bounds",
    "Diagram",
    "GeometryConfig",
    "NodeModel",
    "NodeType",
    "Point",
    "Port",
    "PortKind",
    "PortVariant",
    "RoutedTransition",
    "RouterKind",
    "ShapeAnchorsError",
    "ShapeKind",
    "Size",
    "Transition",
    "UnknownElement",
    "UnsupportedPortVariant",
    "UnsupportedRouterKind",
    "UnsupportedShapeKind",
    "anchor_kind",
    "build_node",
    "compute_anchor",
    "generate_ports",
    "get_geometry_config",
    "preview_node",
    "set_geometry_config",
    "set_log_level",
]


def preview_node(
    node_type: NodeType | str,
    size: Size | None = None,
    reference: Point | None = None,
    router: RouterKind | str = RouterKind.MANHATTAN,
    unicode: bool = True,
) -> str:
    """Render a node of *node_type* placed at the origin as text.

    Args:
        node_type: Node type member, id (``"api:node"``) or name (``"api"``).
        size: Node size; the type's default size when None.
        reference: Optional reference point; its anchor is marked.
        router: Router kind used for the anchor.
        unicode: True for Unicode glyphs; False for ASCII.

    Raises:
        UnsupportedShapeKind: If *node_type* is unknown.
    """
    node = build_node("preview", node_type, size=size)
    return AsciiRenderer(unicode=unicode).render(node, reference, router)
