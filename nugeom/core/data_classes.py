"""
Data classes for the detector geometry analyzer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np


class MaterialKind(Enum):
    SUBSTANCE = "substance"
    MIXTURE = "mixture"


@dataclass(frozen=True)
class Element:
    """Single constituent of a mixture.

    Attributes
    ----------
    a : float
        Atomic mass (g/mol); truncated to the mass number for identification.
    z : float
        Charge number.
    name : str
        Optional element symbol, for printing only.
    """

    a: float
    z: float
    name: str = ""


@dataclass
class Material:
    """Material filling a detector volume.

    A material is either a single substance with its own ``(a, z)`` or a
    mixture of elements. ``kind`` tells the two apart so the walker dispatches
    once per resolved material instead of inspecting types.
    """

    name: str
    density: float  # in the geometry's density units
    kind: MaterialKind = MaterialKind.SUBSTANCE
    a: float = 0.0
    z: float = 0.0
    elements: List[Element] = field(default_factory=list)

    @classmethod
    def substance(cls, name: str, a: float, z: float, density: float) -> "Material":
        return cls(name=name, density=density, kind=MaterialKind.SUBSTANCE, a=a, z=z)

    @classmethod
    def mixture(cls, name: str, elements: List[Element], density: float) -> "Material":
        if not elements:
            raise ValueError(f"Mixture {name!r} needs at least one element")
        return cls(name=name, density=density, kind=MaterialKind.MIXTURE, elements=list(elements))

    @property
    def is_mixture(self) -> bool:
        return self.kind is MaterialKind.MIXTURE


@dataclass
class Medium:
    """Tracking medium attached to a volume; holds the material."""

    name: str
    material: Optional[Material] = None


@dataclass
class BoundingBox:
    """Axis-aligned box given by its centre and half-lengths."""

    origin: np.ndarray
    half_lengths: np.ndarray

    def __post_init__(self):
        self.origin = np.asarray(self.origin, dtype=float)
        self.half_lengths = np.asarray(self.half_lengths, dtype=float)
        if np.any(self.half_lengths < 0.0):
            raise ValueError("Bounding box half-lengths must be non-negative")

    @property
    def lower(self) -> np.ndarray:
        return self.origin - self.half_lengths

    @property
    def upper(self) -> np.ndarray:
        return self.origin + self.half_lengths

    def face_center(self, axis: int, sign: int) -> np.ndarray:
        """Centre of the face normal to ``axis`` on the ``sign`` side."""
        center = self.origin.copy()
        center[axis] += sign * self.half_lengths[axis]
        return center

    def contains(self, point: np.ndarray, tolerance: float = 0.0) -> bool:
        point = np.asarray(point, dtype=float)
        return bool(np.all(np.abs(point - self.origin) <= self.half_lengths + tolerance))


@dataclass
class Ray:
    """Start point and unit direction of a neutrino-like ray.

    The direction is used as given; build the ray with ``from_momentum`` to
    normalise a momentum-like vector once.
    """

    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self):
        self.origin = np.asarray(self.origin, dtype=float)
        self.direction = np.asarray(self.direction, dtype=float)

    @classmethod
    def from_momentum(cls, position: np.ndarray, momentum: np.ndarray) -> "Ray":
        momentum = np.asarray(momentum, dtype=float)[:3]
        norm = np.linalg.norm(momentum)
        if norm == 0.0:
            raise ValueError("Momentum vector must be non-zero")
        return cls(np.asarray(position, dtype=float)[:3], momentum / norm)

    def point_at(self, distance: float) -> np.ndarray:
        return self.origin + distance * self.direction


@dataclass
class TraversalState:
    """Cursor of a single walk.

    Each walk owns one of these, so independent walks never share a current
    point.

    Attributes
    ----------
    position : np.ndarray
        Current point.
    direction : np.ndarray
        Fixed unit direction of the walk.
    entered : bool
        Whether the walk has been inside the envelope yet.
    n_steps : int
        Main-loop iterations done so far.
    entry_point : np.ndarray or None
        First point found inside the envelope.
    """

    position: np.ndarray
    direction: np.ndarray
    entered: bool = False
    n_steps: int = 0
    entry_point: Optional[np.ndarray] = None

    def __post_init__(self):
        self.position = np.array(self.position, dtype=float)
        self.direction = np.asarray(self.direction, dtype=float)

    def advance(self, step: float):
        self.position = self.position + step * self.direction


@dataclass(frozen=True)
class Segment:
    """Distance spent inside one material between two boundary crossings."""

    code: int
    length: float
    weight: float = 1.0

    @property
    def weighted_length(self) -> float:
        return self.length * self.weight


@dataclass
class VertexRecord:
    """A sampled interaction vertex, kept for export and plotting."""

    code: int
    position: np.ndarray
    ray_origin: np.ndarray
    direction: np.ndarray

    @property
    def depth(self) -> float:
        """Distance of the vertex from the ray origin along the direction."""
        return float(np.dot(self.position - self.ray_origin, self.direction))
