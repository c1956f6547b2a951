"""Text renderers for previewing node geometry."""

from shape_anchors.renderers.ascii import AsciiRenderer
from shape_anchors.renderers.canvas import Canvas
from shape_anchors.renderers.charset import CharSet, Glyphs

__all__ = ["AsciiRenderer", "Canvas", "CharSet", "Glyphs"]
