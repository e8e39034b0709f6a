"""
Shared fixtures: scripted one-dimensional navigator and box scenes.
"""

import numpy as np
import pytest

from nugeom.core.constants import reset_walk_stats
from nugeom.core.data_classes import Medium
from nugeom.core.navigation import Navigator
from nugeom.core.sampling import make_rng
from nugeom.testing import create_two_slab_scene, make_carbon, make_iron


class LineNavigator(Navigator):
    """Regions laid out along +x as half-open intervals [start, end).

    ``phantoms`` are extra surfaces reported by ``find_next_boundary`` that
    do not change the region, like coincident surfaces of a real geometry.
    Only rays moving towards +x ever reach a boundary.
    """

    def __init__(self, regions, phantoms=()):
        # regions: list of (start, end, name, medium)
        self.regions = list(regions)
        self.media = {name: medium for _, _, name, medium in self.regions}
        self.surfaces = sorted({r[0] for r in self.regions} | {r[1] for r in self.regions}
                               | set(phantoms))

    def find_node(self, point):
        x = point[0]
        for start, end, name, _ in self.regions:
            if start <= x < end:
                return name
        return None

    def find_next_boundary(self, point, direction):
        if direction[0] <= 0.0:
            return self.unbounded_step
        ahead = [s for s in self.surfaces if s > point[0]]
        if not ahead:
            return self.unbounded_step
        return (ahead[0] - point[0]) / direction[0]

    def is_entering(self, point, direction, step):
        landing = np.asarray(point) + step * np.asarray(direction)
        return self.find_node(point) != self.find_node(landing)

    def get_medium(self, volume):
        return self.media.get(volume)

    def get_material(self, medium):
        return medium.material

    def top_volume(self):
        return self.regions[0][2] if self.regions else None

    def get_volume(self, name):
        return name if name in self.media else None

    def volumes(self):
        return [name for _, _, name, _ in self.regions]

    def bounding_box(self, volume=None):
        return None


def medium_of(material):
    return Medium(name=f"{material.name}_medium", material=material)


@pytest.fixture(autouse=True)
def clean_walk_stats():
    reset_walk_stats()
    yield
    reset_walk_stats()


@pytest.fixture
def rng():
    return make_rng(20240601)


@pytest.fixture
def two_slab():
    return create_two_slab_scene()


@pytest.fixture
def iron_code():
    return 1000000000 + 26 * 10000 + 55 * 10


@pytest.fixture
def carbon_code():
    return 1000000000 + 6 * 10000 + 12 * 10


@pytest.fixture
def line_factory():
    return LineNavigator


@pytest.fixture
def slab_line():
    """Iron on [0, 5) and carbon on [5, 10), densities 2 and 1."""
    return LineNavigator([
        (0.0, 5.0, "A", medium_of(make_iron(2.0))),
        (5.0, 10.0, "B", medium_of(make_carbon(1.0))),
    ])
