"""Geometry value types shared by anchors, ports and renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    """A 2D point in canvas coordinates (y grows downwards)."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0)


@dataclass
class Size:
    width: float
    height: float


@dataclass
class Bounds:
    """Axis-aligned box: top-left corner plus size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Size, position: Point | None = None) -> Bounds:
        if position is None:
            position = Point.origin()
        return cls(position.x, position.y, size.width, size.height)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.safe_width / 2, self.y + self.safe_height / 2)

    @property
    def safe_width(self) -> float:
        return max(self.width, 0.0) if math.isfinite(self.width) else 0.0

    @property
    def safe_height(self) -> float:
        return max(self.height, 0.0) if math.isfinite(self.height) else 0.0

    def finite(self) -> Bounds:
        """Copy with NaN or infinite fields replaced by 0."""
        x, y, w, h = (v if math.isfinite(v) else 0.0 for v in (self.x, self.y, self.width, self.height))
        return Bounds(x, y, w, h)

    def right(self) -> float:
        return self.x + self.safe_width

    def bottom(self) -> float:
        return self.y + self.safe_height

    def radius(self, scale: float) -> float:
        """Inscribed radius times *scale*, the radius of circles and hexagons."""
        return min(self.safe_width / 2, self.safe_height / 2) * scale
