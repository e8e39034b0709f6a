"""
Geometry analyzer driver.

``GeomAnalyzer`` binds a navigator to the analyzer settings (units,
weighting, scanner sizes, random generator) and owns the tables it hands
back. Each query overwrites its table in place and returns the same object,
so copy a table if you need to keep it across queries.

The analyzer is not thread-safe: run one query at a time per navigator.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .. import config
from .constants import METER
from .data_classes import Ray
from .errors import MissingGeometryError
from .identity import material_codes
from .max_path import estimate_max_path_lengths
from .navigation import Navigator, resolve_material
from .path_length import PathLengthTable, accumulate_path_lengths
from .sampling import make_rng
from .vertex import sample_vertex
from .weighting import WeightingPolicy

logger = logging.getLogger(__name__)


class GeomAnalyzer:
    """Path lengths, max path lengths and vertices for one detector geometry.

    Args:
        navigator: Geometry to analyze.
        rng: numpy random Generator (for reproducibility in tests).
             If None, creates a default unseeded generator.
        units: Length unit of the input geometry, e.g. ``CENTIMETER``.
    Raises:
        MissingGeometryError: If there is no navigator or no top volume.
    """

    def __init__(
        self,
        navigator: Navigator,
        rng: Optional[np.random.Generator] = None,
        units: float = config.DEFAULT_LENGTH_UNITS,
    ) -> None:
        logger.info("Initializing geometry analyzer")

        if navigator is None:
            logger.critical("Null geometry navigator! Aborting")
            raise MissingGeometryError("No geometry is loaded")
        self._navigator = navigator

        self._top_volume = navigator.top_volume()
        if self._top_volume is None:
            logger.critical("Could not get top volume!")
            raise MissingGeometryError("Geometry has no top volume")

        self._rng = rng or make_rng()
        self._scale = 1.0
        self._weighting = WeightingPolicy(with_density=config.WEIGHT_WITH_DENSITY)
        self._n_points = config.SCANNER_N_POINTS
        self._n_rays = config.SCANNER_N_RAYS
        self._vertex_step = config.VERTEX_STEP
        self.set_units(units)

        self._target_codes = self._build_list_of_target_nuclei()
        self._path_lengths = PathLengthTable(self._target_codes)
        self._max_path_lengths = PathLengthTable(self._target_codes)
        self._vertex = np.zeros(3)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    @property
    def rng(self) -> np.random.Generator:
        """Access the random number generator."""
        return self._rng

    @property
    def scale(self) -> float:
        """Factor converting geometry lengths to meters."""
        return self._scale

    @property
    def weight_with_density(self) -> bool:
        return self._weighting.with_density

    @property
    def top_volume(self):
        return self._top_volume

    def set_units(self, units: float) -> None:
        """Declare the length unit of the input geometry.

        Use one of the unit constants, e.g. ``set_units(CENTIMETER)``; path
        lengths are then reported in meters.
        """
        if units <= 0.0:
            raise ValueError(f"Length unit must be positive, got {units}")
        self._scale = units / METER
        logger.info("Geometry units scale factor: %g", self._scale)

    def set_top_volume_name(self, name: str) -> None:
        """Use a named volume as the top volume of the max path-length scan.

        Handy to generate events only in part of the detector. Unknown names
        are ignored with a warning.
        """
        volume = self._navigator.get_volume(name)
        if volume is None:
            logger.warning("Could not find volume: %s", name)
            logger.warning("Will not change the current top volume")
            return
        self._top_volume = volume
        logger.info("Geometry top volume name: %s", name)

    def set_weight_with_density(self, with_density: bool) -> None:
        self._weighting = WeightingPolicy(with_density=with_density)

    def set_scanner_n_points(self, n_points: int) -> None:
        if n_points < 1:
            raise ValueError("Number of scanner points must be positive")
        self._n_points = n_points

    def set_scanner_n_rays(self, n_rays: int) -> None:
        if n_rays < 1:
            raise ValueError("Number of scanner rays must be positive")
        self._n_rays = n_rays

    def set_vertex_step(self, step: float) -> None:
        if step <= 0.0:
            raise ValueError("Vertex step must be positive")
        self._vertex_step = step

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_of_target_nuclei(self) -> List[int]:
        """Identity codes of every material found in the geometry."""
        return list(self._target_codes)

    def compute_path_lengths(self, x: np.ndarray, p: np.ndarray) -> PathLengthTable:
        """Path length within each detector material for a neutrino from ``x`` along ``p``.

        ``x`` and ``p`` may be 3- or 4-vectors; only the spatial parts are
        used and ``p`` is normalised here.
        """
        logger.info("Computing path-lengths for the input neutrino")
        ray = Ray.from_momentum(x, p)
        return accumulate_path_lengths(
            self._navigator, ray, self._weighting,
            table=self._path_lengths, scale=self._scale,
            max_steps=config.MAX_WALK_STEPS,
        )

    def compute_max_path_lengths(self) -> PathLengthTable:
        """Maximum path length of every material over the detector bounding box."""
        box = self._navigator.bounding_box(self._top_volume)
        if box is None:
            logger.error("No bounding box for the top volume")
            self._max_path_lengths.set_all_to_zero()
            return self._max_path_lengths

        return estimate_max_path_lengths(
            self._navigator, self._target_codes,
            n_points=self._n_points, n_rays=self._n_rays,
            rng=self._rng, weighting=self._weighting, scale=self._scale,
            box=box, table=self._max_path_lengths,
            max_steps=config.SCANNER_MAX_STEPS, progress=config.SCANNER_PROGRESS,
        )

    def generate_vertex(self, x: np.ndarray, p: np.ndarray, target_code: int) -> np.ndarray:
        """Random vertex in material ``target_code`` for a neutrino from ``x`` along ``p``.

        Raises:
            NoMaterialOnRayError: If the ray does not cross the material.
        """
        self._vertex[:] = 0.0
        ray = Ray.from_momentum(x, p)
        vertex = sample_vertex(
            self._navigator, ray, target_code, rng=self._rng,
            weighting=self._weighting, step_size=self._vertex_step,
            max_steps=config.VERTEX_MAX_STEPS,
        )
        self._vertex[:] = vertex
        return self._vertex

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _build_list_of_target_nuclei(self) -> List[int]:
        codes: List[int] = []
        n_volumes = 0
        for volume in self._navigator.volumes():
            n_volumes += 1
            material = resolve_material(self._navigator, volume)
            if material is None:
                logger.warning("Skipping volume %s while listing target nuclei",
                               self._navigator.volume_name(volume))
                continue
            for code in material_codes(material):
                if code not in codes:
                    codes.append(code)
        logger.debug("Number of volumes found: %d", n_volumes)
        return codes
