"""Exceptions raised at the public boundary of shape-anchors.

Geometry itself never raises: degenerate inputs fall back to a well-defined
point. These errors cover integration mistakes only, such as a caller asking
for a shape, router or port variant the engine does not know.
"""

from __future__ import annotations


class ShapeAnchorsError(ValueError):
    """Base class for all shape-anchors errors."""


class UnsupportedShapeKind(ShapeAnchorsError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported shape kind: {value!r}")
        self.value = value


class UnsupportedRouterKind(ShapeAnchorsError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported router kind: {value!r}; use manhattan or polyline")
        self.value = value


class UnknownElement(ShapeAnchorsError):
    """A diagram references a node or port id that does not exist."""


class UnsupportedPortVariant(ShapeAnchorsError):
    def __init__(self, value: object, shape: object = None) -> None:
        if shape is None:
            message = f"Unsupported port variant: {value!r}"
        else:
            message = f"Port variant {value!r} does not apply to shape {shape!r}"
        super().__init__(message)
        self.value = value
        self.shape = shape
