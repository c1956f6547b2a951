"""Canvas: 2D character grid mapped onto canvas coordinates."""

from __future__ import annotations

import math

from shape_anchors.geometry.primitives import is_finite_point
from shape_anchors.geometry.types import Bounds, Point
from shape_anchors.renderers.charset import CharSet, Glyphs


class Canvas:
    """A character grid covering *viewport*.

    One column spans ``scale`` units horizontally and one row spans
    ``2 * scale`` units, since terminal cells are about twice as tall as wide.
    """

    def __init__(self, viewport: Bounds, scale: float, charset: CharSet) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.viewport = viewport
        self.scale = scale
        self.charset = charset
        self.glyphs = Glyphs.for_charset(charset)
        self.width = int(math.ceil(viewport.safe_width / scale)) + 1
        self.height = int(math.ceil(viewport.safe_height / (2 * scale))) + 1
        self.cells: list[list[str]] = [[" "] * self.width for _ in range(self.height)]

    def cell_of(self, p: Point) -> tuple[int, int] | None:
        if not is_finite_point(p):
            return None
        col = int(round((p.x - self.viewport.x) / self.scale))
        row = int(round((p.y - self.viewport.y) / (2 * self.scale)))
        return col, row

    def get(self, col: int, row: int) -> str:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row][col]
        return " "

    def set(self, col: int, row: int, c: str) -> None:
        if 0 <= row < self.height and 0 <= col < self.width:
            self.cells[row][col] = c

    def plot(self, p: Point, c: str) -> None:
        cell = self.cell_of(p)
        if cell is not None:
            self.set(cell[0], cell[1], c)

    def line(self, a: Point, b: Point, c: str) -> None:
        """Sample the segment a-b once per cell, leaving marked cells alone."""
        start = self.cell_of(a)
        end = self.cell_of(b)
        if start is None or end is None:
            return
        steps = max(abs(end[0] - start[0]), abs(end[1] - start[1]), 1)
        for i in range(steps + 1):
            t = i / steps
            p = Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)
            cell = self.cell_of(p)
            if cell is not None and self.get(*cell) == " ":
                self.set(cell[0], cell[1], c)

    def polygon(self, vertices: list[Point], edge: str, corner: str) -> None:
        n = len(vertices)
        for i in range(n):
            self.line(vertices[i], vertices[(i + 1) % n], edge)
        for v in vertices:
            self.plot(v, corner)

    def to_string(self) -> str:
        lines = []
        for row in self.cells:
            line = "".join(row).rstrip()
            lines.append(line)
        out = "\n".join(lines)
        trimmed = out.rstrip("\n")
        return trimmed + "\n"
