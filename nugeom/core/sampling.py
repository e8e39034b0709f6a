"""
Random sampling utilities for the Monte Carlo scans.

All functions take the generator explicitly, so scans are reproducible from
a seed and never touch numpy's global random state.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from .data_classes import BoundingBox


class BoxFace(NamedTuple):
    """One face of an axis-aligned box: the axis it is normal to and its side."""

    name: str
    axis: int
    sign: int


# Scan order of the bounding-box faces
BOX_FACES: List[BoxFace] = [
    BoxFace("TOP", 1, +1),
    BoxFace("BOTTOM", 1, -1),
    BoxFace("LEFT", 0, -1),
    BoxFace("RIGHT", 0, +1),
    BoxFace("BACK", 2, -1),
    BoxFace("FRONT", 2, +1),
]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the default random generator."""
    return np.random.default_rng(seed)


def draw_entropy(rng: np.random.Generator) -> int:
    """Draw one root seed from ``rng`` for a family of child streams."""
    return int(rng.integers(0, 2**62))


def child_streams(entropy: int, key: Tuple[int, ...], n: int) -> List[np.random.Generator]:
    """Independent generators ``0 .. n-1`` under ``key``.

    Stream ``i`` depends only on ``entropy``, ``key`` and ``i``, so the
    streams for ``n`` are the first ``n`` streams for any larger count.
    """
    sequence = np.random.SeedSequence(entropy, spawn_key=tuple(int(k) for k in key))
    return [np.random.default_rng(child) for child in sequence.spawn(n)]


def sample_point_on_face(box: BoundingBox, face: BoxFace, rng: np.random.Generator) -> np.ndarray:
    """Draw a point uniformly on one face of ``box``."""
    u = rng.random(3)
    point = box.lower + 2.0 * box.half_lengths * u
    point[face.axis] = box.face_center(face.axis, face.sign)[face.axis]
    return point


def sample_inward_direction(face: BoxFace, rng: np.random.Generator) -> np.ndarray:
    """Draw a unit direction pointing into the box through ``face``.

    The two tangential components are uniform in [-0.5, 0.5); the normal
    component has a uniform magnitude in [0, 1) and the inward sign.
    """
    while True:
        u = rng.random(3)
        direction = u - 0.5
        direction[face.axis] = -face.sign * u[face.axis]
        norm = np.linalg.norm(direction)
        if norm > 0.0:
            return direction / norm


def sample_fraction(rng: np.random.Generator) -> float:
    """Uniform number in [0, 1)."""
    return float(rng.random())


def sample_isotropic_direction(rng: np.random.Generator) -> np.ndarray:
    """Generate a random unit vector isotropically distributed on the sphere."""
    z = 2.0 * rng.random() - 1.0
    phi = 2.0 * np.pi * rng.random()
    r_xy = np.sqrt(max(0.0, 1.0 - z * z))
    return np.array([r_xy * np.cos(phi), r_xy * np.sin(phi), z], dtype=float)
