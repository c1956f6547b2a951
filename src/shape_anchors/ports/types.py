"""Port types."""

from __future__ import annotations

from dataclasses import dataclass

from shape_anchors.geometry.types import Point, Size
from shape_anchors.types import PortKind

# Direction suffixes, principal ports first.
TOP = "top"
RIGHT = "right"
BOTTOM = "bottom"
LEFT = "left"
TOP_LEFT = "top_left"
TOP_RIGHT = "top_right"
BOTTOM_LEFT = "bottom_left"
BOTTOM_RIGHT = "bottom_right"

PRINCIPAL_SUFFIXES: tuple[str, ...] = (TOP, RIGHT, BOTTOM, LEFT)
DIAGONAL_SUFFIXES: tuple[str, ...] = (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)


@dataclass
class Port:
    """A docking box on a node's outline.

    Attributes:
        id: Owning node id plus direction suffix, e.g. ``"n1_top_left"``.
        kind: Port type, matching the owning node's outline.
        position: Top-left of the box in node-local coordinates.
        size: Box size; the box is centered on the anchor point.
        suffix: Direction suffix without the leading underscore.
    """

    id: str
    kind: PortKind
    position: Point
    size: Size
    suffix: str

    @property
    def anchor(self) -> Point:
        """Center of the port box, node-local."""
        return Point(self.position.x + self.size.width / 2, self.position.y + self.size.height / 2)

    def absolute_anchor(self, node_origin: Point) -> Point:
        return self.anchor + node_origin

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.kind.value,
            "position": {"x": self.position.x, "y": self.position.y},
            "size": {"width": self.size.width, "height": self.size.height},
        }


def port_id(node_id: str, suffix: str) -> str:
    return f"{node_id}_{suffix}"
