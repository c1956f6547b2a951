"""Port layout registry: pick the variant for a shape and build the port set."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from shape_anchors.config import GeometryConfig, resolve_config
from shape_anchors.errors import UnsupportedPortVariant
from shape_anchors.geometry.types import Point, Size
from shape_anchors.logging import get_logger
from shape_anchors.ports import generators
from shape_anchors.ports.types import Port, port_id
from shape_anchors.types import PortKind, PortVariant, ShapeKind

logger = get_logger(__name__)

AnchorLayout = Callable[[Size, GeometryConfig], generators.PortAnchors]


@dataclass
class VariantSpec:
    shape: ShapeKind
    port_kind: PortKind
    layout: AnchorLayout


_VARIANTS: dict[PortVariant, VariantSpec] = {
    PortVariant.RECTANGLE: VariantSpec(ShapeKind.RECTANGLE, PortKind.RECTANGULAR, generators.rectangle_anchors),
    PortVariant.ROUNDED: VariantSpec(ShapeKind.RECTANGLE, PortKind.RECTANGULAR, generators.rounded_anchors),
    PortVariant.DIAMOND: VariantSpec(ShapeKind.DIAMOND, PortKind.DIAMOND, generators.diamond_anchors),
    PortVariant.HEXAGON_90: VariantSpec(ShapeKind.HEXAGON, PortKind.HEXAGON, generators.hexagon_90_anchors),
    PortVariant.HEXAGON_180: VariantSpec(ShapeKind.HEXAGON, PortKind.HEXAGON, generators.hexagon_180_anchors),
    PortVariant.CIRCLE_4: VariantSpec(ShapeKind.CIRCLE, PortKind.CIRCLE, generators.circle_4_anchors),
    PortVariant.CIRCLE_8: VariantSpec(ShapeKind.CIRCLE, PortKind.CIRCLE, generators.circle_8_anchors),
    PortVariant.OCTAGON: VariantSpec(ShapeKind.OCTAGON, PortKind.OCTAGON, generators.octagon_anchors),
}

DEFAULT_VARIANTS: dict[ShapeKind, PortVariant] = {
    ShapeKind.RECTANGLE: PortVariant.RECTANGLE,
    ShapeKind.DIAMOND: PortVariant.DIAMOND,
    ShapeKind.CIRCLE: PortVariant.CIRCLE_8,
    ShapeKind.HEXAGON: PortVariant.HEXAGON_180,
    ShapeKind.OCTAGON: PortVariant.OCTAGON,
}


def variants_for(shape: ShapeKind | str) -> list[PortVariant]:
    kind = ShapeKind.parse(shape)
    return [variant for variant, spec in _VARIANTS.items() if spec.shape is kind]


def resolve_variant(shape: ShapeKind | str, variant: PortVariant | str | None = None) -> PortVariant:
    """Default variant for *shape*, or validate that *variant* belongs to it."""
    kind = ShapeKind.parse(shape)
    if variant is None:
        return DEFAULT_VARIANTS[kind]
    resolved = PortVariant.parse(variant)
    if _VARIANTS[resolved].shape is not kind:
        raise UnsupportedPortVariant(resolved.value, kind.value)
    return resolved


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def generate_ports(
    shape: ShapeKind | str,
    size: Size,
    *,
    node_id: str = "",
    variant: PortVariant | str | None = None,
    config: GeometryConfig | None = None,
) -> list[Port]:
    """Build the docking ports of a node.

    Args:
        shape: Outline kind of the node.
        size: Node size; ports are placed in node-local coordinates.
        node_id: Prefix of every port id (``f"{node_id}_{suffix}"``).
        variant: Port layout; defaults to the shape's default variant.
        config: Geometry overrides; defaults to the process-wide config.

    Returns:
        A new list of ports. Each box has ``config.port_size`` sides and is
        centered on its anchor.

    Raises:
        UnsupportedShapeKind: If *shape* is unknown.
        UnsupportedPortVariant: If *variant* is unknown or belongs to another shape.
    """
    resolved = resolve_variant(shape, variant)
    spec = _VARIANTS[resolved]
    cfg = resolve_config(config)

    clean = Size(_finite(size.width), _finite(size.height))
    if clean != size:
        logger.debug("non-finite node size %s for %r treated as zero", size, node_id)

    side = cfg.port_size
    half = side / 2
    return [
        Port(
            id=port_id(node_id, suffix),
            kind=spec.port_kind,
            position=anchor - Point(half, half),
            size=Size(side, side),
            suffix=suffix,
        )
        for suffix, anchor in spec.layout(clean, cfg)
    ]
