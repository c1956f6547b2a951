"""Shared type definitions for shape-anchors.

Enums used across geometry, anchors, ports and the node model.
"""

from __future__ import annotations

from enum import Enum

from shape_anchors.errors import UnsupportedPortVariant, UnsupportedRouterKind, UnsupportedShapeKind


def _lookup(enum_cls, value, error_cls):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_")
        for member in enum_cls:
            if key in (member.value, member.name.lower()):
                return member
    raise error_cls(value)


class ShapeKind(Enum):
    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    CIRCLE = "circle"
    HEXAGON = "hexagon"
    OCTAGON = "octagon"

    @classmethod
    def parse(cls, value: ShapeKind | str) -> ShapeKind:
        """Resolve an enum member or a case-insensitive name."""
        return _lookup(cls, value, UnsupportedShapeKind)


class RouterKind(Enum):
    MANHATTAN = "manhattan"  # orthogonal segments
    POLYLINE = "polyline"  # free-angle segments

    @classmethod
    def parse(cls, value: RouterKind | str) -> RouterKind:
        return _lookup(cls, value, UnsupportedRouterKind)

    @classmethod
    def default(cls) -> RouterKind:
        return cls.MANHATTAN


class PortKind(Enum):
    RECTANGULAR = "rectangular:port"
    HEXAGON = "hexagon:port"
    CIRCLE = "circle:port"
    DIAMOND = "diamond:port"
    OCTAGON = "octagon:port"


class PortVariant(Enum):
    """Port layouts. A shape kind may have more than one."""

    RECTANGLE = "rectangle"
    ROUNDED = "rounded"  # start/end nodes
    DIAMOND = "diamond"
    HEXAGON_90 = "hexagon_90"  # api nodes, 4 ports
    HEXAGON_180 = "hexagon_180"  # sub-process nodes, 8 ports
    CIRCLE_4 = "circle_4"
    CIRCLE_8 = "circle_8"
    OCTAGON = "octagon"

    @classmethod
    def parse(cls, value: PortVariant | str) -> PortVariant:
        return _lookup(cls, value, UnsupportedPortVariant)
