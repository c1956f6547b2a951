"""ASCII/Unicode preview of a node outline, its ports and an anchor."""

from __future__ import annotations

from shape_anchors.config import GeometryConfig
from shape_anchors.geometry.primitives import is_finite_point
from shape_anchors.geometry.types import Bounds, Point
from shape_anchors.nodes import NodeModel
from shape_anchors.renderers.canvas import Canvas
from shape_anchors.renderers.charset import CharSet
from shape_anchors.types import RouterKind, ShapeKind

# Cells of margin around the node so ports on the outline stay visible.
MARGIN_CELLS: int = 2


class AsciiRenderer:
    """Plots a node onto a character grid.

    Painting order: outline, center, ports, reference, anchor. Later marks
    overwrite earlier ones in the same cell.
    """

    def __init__(self, unicode: bool = True, scale: float = 2.0, config: GeometryConfig | None = None) -> None:
        self.charset = CharSet.Unicode if unicode else CharSet.Ascii
        self.scale = scale
        self.config = config

    def _viewport(self, node: NodeModel, reference: Point | None) -> Bounds:
        b = node.bounds
        pad_x = MARGIN_CELLS * self.scale
        pad_y = MARGIN_CELLS * 2 * self.scale
        left, top = b.x - pad_x, b.y - pad_y
        right, bottom = b.right() + pad_x, b.bottom() + pad_y
        if reference is not None and is_finite_point(reference):
            left, right = min(left, reference.x), max(right, reference.x)
            top, bottom = min(top, reference.y), max(bottom, reference.y)
        return Bounds(left, top, right - left, bottom - top)

    def render(
        self,
        node: NodeModel,
        reference: Point | None = None,
        router: RouterKind | str = RouterKind.MANHATTAN,
    ) -> str:
        canvas = Canvas(self._viewport(node, reference), self.scale, self.charset)
        glyphs = canvas.glyphs

        vertices = node.outline(self.config)
        corner = glyphs.outline if node.shape is ShapeKind.CIRCLE else glyphs.vertex
        canvas.polygon(vertices, glyphs.outline, corner)
        canvas.plot(node.center, glyphs.center)

        for port in node.ports:
            canvas.plot(port.absolute_anchor(node.position), glyphs.port)

        if reference is not None:
            canvas.plot(reference, glyphs.reference)
            canvas.plot(node.anchor(reference, router, self.config), glyphs.anchor)

        return canvas.to_string()
