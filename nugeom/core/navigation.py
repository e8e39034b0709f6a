"""
Navigation interface the analyzer needs from a detector geometry.

The analyzer never looks inside the scene: it only asks which volume holds a
point, how far the next boundary is along a direction, and what medium and
material a volume carries. Any geometry package can be plugged in by
subclassing :class:`Navigator`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import numpy as np

from .constants import UNBOUNDED_STEP, record_walk_event
from .data_classes import BoundingBox, Material, Medium
from .errors import UnresolvableMaterialError, UnresolvableMediumError

logger = logging.getLogger(__name__)


class Navigator:
    """Capability contract of a detector geometry.

    Volumes and media are opaque to the analyzer; only the materials returned
    by :meth:`get_material` must be :class:`~nugeom.core.data_classes.Material`
    instances.

    A navigator may cache its own cursor. One traversal at a time may use a
    given navigator; concurrent traversals need one navigator each.
    """

    #: Step reported when the ray crosses nothing from the queried point on
    unbounded_step = UNBOUNDED_STEP

    def find_node(self, point: np.ndarray) -> Optional[Any]:
        """Return the innermost volume containing ``point``, or None if outside."""
        raise NotImplementedError("find_node() must be implemented by subclasses.")

    def find_next_boundary(self, point: np.ndarray, direction: np.ndarray) -> float:
        """Distance to the next surface crossing, or ``unbounded_step``."""
        raise NotImplementedError("find_next_boundary() must be implemented by subclasses.")

    def is_entering(self, point: np.ndarray, direction: np.ndarray, step: float) -> bool:
        """Whether moving ``step`` from ``point`` lands in a different region.

        Returns False for coincident boundaries that do not change the
        region (the walker then keeps stepping).
        """
        raise NotImplementedError("is_entering() must be implemented by subclasses.")

    def get_medium(self, volume: Any) -> Optional[Medium]:
        raise NotImplementedError("get_medium() must be implemented by subclasses.")

    def get_material(self, medium: Any) -> Optional[Material]:
        raise NotImplementedError("get_material() must be implemented by subclasses.")

    def top_volume(self) -> Optional[Any]:
        raise NotImplementedError("top_volume() must be implemented by subclasses.")

    def get_volume(self, name: str) -> Optional[Any]:
        raise NotImplementedError("get_volume() must be implemented by subclasses.")

    def volumes(self) -> Iterable[Any]:
        raise NotImplementedError("volumes() must be implemented by subclasses.")

    def bounding_box(self, volume: Optional[Any] = None) -> Optional[BoundingBox]:
        """Axis-aligned box enclosing ``volume`` (the top volume by default)."""
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

    def volume_name(self, volume: Any) -> str:
        return str(getattr(volume, "name", volume))


def resolve_material(navigator: Navigator, volume: Any) -> Optional[Material]:
    """Material filling ``volume``, or None if its medium or material is missing.

    A missing medium or material means a malformed geometry; it is logged and
    counted, never raised.
    """
    medium = navigator.get_medium(volume)
    if medium is None:
        logger.warning("Volume %s has no medium", navigator.volume_name(volume))
        record_walk_event('unresolved_media')
        return None
    material = navigator.get_material(medium)
    if material is None:
        logger.warning("Medium %s of volume %s has no material",
                       getattr(medium, "name", medium), navigator.volume_name(volume))
        record_walk_event('unresolved_media')
        return None
    return material


def require_material(navigator: Navigator, volume: Any) -> Material:
    """Strict form of :func:`resolve_material` for scene checks.

    Raises
    ------
    UnresolvableMediumError
        If the volume has no medium.
    UnresolvableMaterialError
        If the medium has no material.
    """
    medium = navigator.get_medium(volume)
    if medium is None:
        raise UnresolvableMediumError(f"Volume {navigator.volume_name(volume)} has no medium")
    material = navigator.get_material(medium)
    if material is None:
        raise UnresolvableMaterialError(
            f"Medium {getattr(medium, 'name', medium)} of volume "
            f"{navigator.volume_name(volume)} has no material")
    return material
