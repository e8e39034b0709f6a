"""
Exceptions raised by the geometry analyzer.
"""


class GeometryError(RuntimeError):
    """Base class for geometry analysis errors."""


class NeverEnteredError(GeometryError):
    """The ray never intersects the detector envelope."""


class NoMaterialOnRayError(GeometryError):
    """The ray does not cross the requested material."""

    def __init__(self, code: int):
        super().__init__(f"No material {code} along this direction from the set point")
        self.code = code


class MissingGeometryError(GeometryError):
    """No geometry is loaded, or its top volume / bounding shape is unavailable."""


class UnresolvableMediumError(GeometryError):
    """A volume has no medium attached."""


class UnresolvableMaterialError(GeometryError):
    """A medium has no material attached."""
