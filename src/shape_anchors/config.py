"""Centralized configuration for shape-anchors."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from shape_anchors.geometry import constants


@dataclass
class GeometryConfig:
    """Tunable geometry shared by anchor and port computation.

    Defaults come from ``geometry.constants`` so renderers reading the
    constants directly stay aligned with an unmodified config.
    """

    radius_scale: float = constants.RADIUS_SCALE
    port_size: float = constants.PORT_SIZE
    circle_port_inset: float = constants.CIRCLE_PORT_INSET
    octagon_cut: float = constants.OCTAGON_CUT
    octagon_port_inset: float = constants.OCTAGON_PORT_INSET

    def __post_init__(self) -> None:
        if self.radius_scale <= 0:
            raise ValueError(f"radius_scale must be positive, got {self.radius_scale}")
        if self.port_size < 0:
            raise ValueError(f"port_size must be non-negative, got {self.port_size}")


_GEOMETRY_CONFIG = GeometryConfig()


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)


def reset_geometry_config() -> None:
    set_geometry_config(GeometryConfig())


def resolve_config(config: GeometryConfig | None) -> GeometryConfig:
    """Return *config*, or a copy of the process-wide default."""
    return config if config is not None else get_geometry_config()
