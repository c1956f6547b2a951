"""Anchor computer: boundary points for edges attached without a port."""

from __future__ import annotations

from shape_anchors.anchors.computers import nearest_edge, snap_to_axis
from shape_anchors.anchors.registry import (
    AnchorComputer,
    AnchorFunction,
    anchor_kind,
    compute_anchor,
    get_anchor_function,
    supported_pairs,
)

__all__ = [
    "AnchorComputer",
    "AnchorFunction",
    "anchor_kind",
    "compute_anchor",
    "get_anchor_function",
    "nearest_edge",
    "snap_to_axis",
    "supported_pairs",
]
