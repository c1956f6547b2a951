"""Port layout generator: named docking points around node outlines."""

from __future__ import annotations

from shape_anchors.ports.registry import (
    DEFAULT_VARIANTS,
    generate_ports,
    resolve_variant,
    variants_for,
)
from shape_anchors.ports.types import DIAGONAL_SUFFIXES, PRINCIPAL_SUFFIXES, Port, port_id

__all__ = [
    "DEFAULT_VARIANTS",
    "DIAGONAL_SUFFIXES",
    "PRINCIPAL_SUFFIXES",
    "Port",
    "generate_ports",
    "port_id",
    "resolve_variant",
    "variants_for",
]
