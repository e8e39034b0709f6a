"""
Simple Box Scenes for Testing and Debugging
===========================================

This module provides analytic detector geometries built from nested,
axis-aligned boxes. They implement the full ``Navigator`` interface, so they
can stand in for a real geometry package. These scenes are useful for:
- Checking path lengths against hand-computed values
- Debugging the boundary walker without geometry-package quirks
- Quick demonstrations of the analyzer

Containment is closed: a point on a face belongs to the box. Every boundary
step is pushed a small distance past the surface so the walker lands
strictly inside the next region.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..core.constants import UNBOUNDED_STEP
from ..core.data_classes import BoundingBox, Element, Material, Medium
from ..core.navigation import Navigator

# Distance pushed past a surface when reporting a boundary step
SURFACE_PUSH = 1.0e-9


@dataclass
class BoxVolume:
    """Axis-aligned box volume with optional daughters.

    Daughters must lie inside their mother and must not overlap each other;
    the first daughter containing a point wins on shared faces.
    """

    name: str
    box: BoundingBox
    medium: Optional[Medium] = None
    daughters: List["BoxVolume"] = field(default_factory=list)

    def add_daughter(self, daughter: "BoxVolume") -> "BoxVolume":
        self.daughters.append(daughter)
        return daughter

    def iter_tree(self) -> Iterator["BoxVolume"]:
        yield self
        for daughter in self.daughters:
            yield from daughter.iter_tree()


def ray_box_interval(
    box: BoundingBox,
    point: np.ndarray,
    direction: np.ndarray,
) -> Optional[Tuple[float, float]]:
    """Slab-method intersection of a ray with a box.

    Returns
    -------
    (t_near, t_far) or None
        Parameters of the entry and exit crossings along the line, or None
        if the ray misses the box or the box lies behind the point.
    """
    t_near = -np.inf
    t_far = np.inf
    lower = box.lower
    upper = box.upper

    for axis in range(3):
        d = direction[axis]
        if abs(d) < 1e-15:
            if point[axis] < lower[axis] or point[axis] > upper[axis]:
                return None
            continue
        t1 = (lower[axis] - point[axis]) / d
        t2 = (upper[axis] - point[axis]) / d
        if t1 > t2:
            t1, t2 = t2, t1
        t_near = max(t_near, t1)
        t_far = min(t_far, t2)
        if t_near > t_far:
            return None

    if t_far < 0.0:
        return None
    return float(t_near), float(t_far)


class BoxSceneNavigator(Navigator):
    """Navigator over a tree of :class:`BoxVolume`.

    Parameters
    ----------
    top : BoxVolume
        World volume; everything outside it is outside the detector.
    push : float
        Distance added to every finite boundary step.
    """

    def __init__(self, top: BoxVolume, push: float = SURFACE_PUSH):
        self._top = top
        self._push = push
        self._volumes = {volume.name: volume for volume in top.iter_tree()}

    def find_node(self, point: np.ndarray) -> Optional[BoxVolume]:
        point = np.asarray(point, dtype=float)
        if not self._top.box.contains(point):
            return None
        volume = self._top
        descended = True
        while descended:
            descended = False
            for daughter in volume.daughters:
                if daughter.box.contains(point):
                    volume = daughter
                    descended = True
                    break
        return volume

    def find_next_boundary(self, point: np.ndarray, direction: np.ndarray) -> float:
        point = np.asarray(point, dtype=float)
        direction = np.asarray(direction, dtype=float)
        volume = self.find_node(point)

        if volume is None:
            interval = ray_box_interval(self._top.box, point, direction)
            if interval is None:
                return self.unbounded_step
            return max(interval[0], 0.0) + self._push

        candidates = []
        interval = ray_box_interval(volume.box, point, direction)
        if interval is not None:
            candidates.append(interval[1])
        for daughter in volume.daughters:
            interval = ray_box_interval(daughter.box, point, direction)
            if interval is not None and interval[0] >= 0.0:
                candidates.append(interval[0])

        if not candidates:
            return self.unbounded_step
        return max(min(candidates), 0.0) + self._push

    def is_entering(self, point: np.ndarray, direction: np.ndarray, step: float) -> bool:
        point = np.asarray(point, dtype=float)
        landing = point + step * np.asarray(direction, dtype=float)
        return self.find_node(point) is not self.find_node(landing)

    def get_medium(self, volume: BoxVolume) -> Optional[Medium]:
        return volume.medium

    def get_material(self, medium: Medium) -> Optional[Material]:
        return medium.material

    def top_volume(self) -> BoxVolume:
        return self._top

    def get_volume(self, name: str) -> Optional[BoxVolume]:
        return self._volumes.get(name)

    def volumes(self) -> List[BoxVolume]:
        return list(self._volumes.values())

    def bounding_box(self, volume: Optional[BoxVolume] = None) -> Optional[BoundingBox]:
        volume = volume or self._top
        return volume.box


# =============================================================================
# Materials
# =============================================================================

def make_iron(density: float = 7.874) -> Material:
    return Material.substance("Iron", a=55.845, z=26, density=density)


def make_carbon(density: float = 2.0) -> Material:
    return Material.substance("Carbon", a=12.011, z=6, density=density)


def make_water(density: float = 1.0) -> Material:
    """Water as a mixture of hydrogen and oxygen (H listed twice)."""
    elements = [
        Element(a=1.008, z=1, name="H"),
        Element(a=1.008, z=1, name="H"),
        Element(a=15.999, z=8, name="O"),
    ]
    return Material.mixture("Water", elements, density=density)


def make_air(density: float = 1.205e-3) -> Material:
    elements = [
        Element(a=14.007, z=7, name="N"),
        Element(a=15.999, z=8, name="O"),
    ]
    return Material.mixture("Air", elements, density=density)


def _box(lower, upper) -> BoundingBox:
    lower = np.asarray(lower, dtype=float)
    upper = np.asarray(upper, dtype=float)
    return BoundingBox(origin=0.5 * (lower + upper), half_lengths=0.5 * (upper - lower))


def _volume(name: str, lower, upper, material: Optional[Material]) -> BoxVolume:
    medium = Medium(name=f"{name}_medium", material=material)
    return BoxVolume(name=name, box=_box(lower, upper), medium=medium)


# =============================================================================
# Scenes
# =============================================================================

def create_uniform_box_scene(
    size: float = 1.0,
    material: Optional[Material] = None,
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> BoxSceneNavigator:
    """Single homogeneous cube of side ``size``, which is also the world.

    Parameters
    ----------
    size : float
        Side length of the cube.
    material : Material, optional
        Filling; carbon with density 2.0 by default.
    center : tuple[float, float, float]
        Cube centre.
    """
    material = material or make_carbon()
    center = np.asarray(center, dtype=float)
    half = 0.5 * size
    world = _volume("Cube", center - half, center + half, material)
    return BoxSceneNavigator(world)


def create_two_slab_scene(
    density_a: float = 2.0,
    density_b: float = 1.0,
    transverse: float = 1.0,
) -> BoxSceneNavigator:
    """Two adjacent slabs along x filling the world.

    Slab A (iron) spans x in [0, 5] and slab B (carbon) spans x in [5, 10];
    both span [-transverse, transverse] in y and z. A ray along +x through
    the whole scene crosses 5 length units of each.
    """
    lower = (0.0, -transverse, -transverse)
    upper = (10.0, transverse, transverse)
    world = _volume("World", lower, upper, make_air())
    world.add_daughter(_volume("SlabA", lower, (5.0, transverse, transverse),
                               make_iron(density_a)))
    world.add_daughter(_volume("SlabB", (5.0, -transverse, -transverse), upper,
                               make_carbon(density_b)))
    return BoxSceneNavigator(world)


def create_mixture_scene(length: float = 4.0, density: float = 1.0) -> BoxSceneNavigator:
    """Water tank of the given length along x inside a larger air-filled world."""
    world = _volume("World", (-1.0, -2.0, -2.0), (length + 1.0, 2.0, 2.0), make_air())
    world.add_daughter(_volume("Tank", (0.0, -1.0, -1.0), (length, 1.0, 1.0),
                               make_water(density)))
    return BoxSceneNavigator(world)


def create_nested_scene() -> BoxSceneNavigator:
    """Detector hall with an iron shield that holds a water target.

    Layout along x: air [-10, -3], iron [-3, -1], water [-1, 1],
    iron [1, 3], air [3, 10].
    """
    world = _volume("Hall", (-10.0, -10.0, -10.0), (10.0, 10.0, 10.0), make_air())
    shield = world.add_daughter(_volume("Shield", (-3.0, -3.0, -3.0), (3.0, 3.0, 3.0),
                                        make_iron()))
    shield.add_daughter(_volume("Target", (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0), make_water()))
    return BoxSceneNavigator(world)


def print_scene_info(navigator: BoxSceneNavigator, name: str = "Scene") -> None:
    """Print the volume tree of a box scene.

    Parameters
    ----------
    navigator : BoxSceneNavigator
        Scene to describe.
    name : str, optional
        Name to display, by default "Scene"
    """
    print(f"\n{name} Information:")
    print(f"  Number of volumes: {len(navigator.volumes())}")
    for volume in navigator.volumes():
        lower, upper = volume.box.lower, volume.box.upper
        material = volume.medium.material if volume.medium is not None else None
        label = material.name if material is not None else "<none>"
        print(f"  {volume.name:<10s} [{label:<8s}] "
              f"min = ({lower[0]:.2f}, {lower[1]:.2f}, {lower[2]:.2f}), "
              f"max = ({upper[0]:.2f}, {upper[1]:.2f}, {upper[2]:.2f})")
