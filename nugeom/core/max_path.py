"""
Maximum path-length estimation by scanning the detector bounding box.

For every material the scan shoots rays inwards from random points on the
six faces of the top volume's bounding box and keeps the largest weighted
path length seen. The result is a Monte Carlo estimate: it can only grow as
more rays are shot and is not a proven supremum.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np
from tqdm import tqdm

from .. import config
from .data_classes import BoundingBox
from .errors import NeverEnteredError
from .navigation import Navigator
from .path_length import PathLengthTable, scale_path_lengths
from .sampling import (
    BOX_FACES,
    child_streams,
    draw_entropy,
    make_rng,
    sample_inward_direction,
    sample_point_on_face,
)
from .walker import walk
from .weighting import DENSITY_WEIGHTED, WeightingPolicy

logger = logging.getLogger(__name__)


def max_path_length_for_code(
    navigator: Navigator,
    origin: np.ndarray,
    direction: np.ndarray,
    code: int,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    max_steps: int = config.SCANNER_MAX_STEPS,
) -> float:
    """Weighted path length of a single material along one scan ray.

    Returns 0.0 if the ray never enters the detector.
    """
    length = 0.0
    try:
        for segment in walk(navigator, origin, direction, weighting, max_steps=max_steps):
            if segment.code == code:
                length += segment.weighted_length
    except NeverEnteredError:
        return 0.0
    return length


def scan_material(
    navigator: Navigator,
    box: BoundingBox,
    code: int,
    n_points: int,
    n_rays: int,
    entropy: int,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    max_steps: int = config.SCANNER_MAX_STEPS,
) -> float:
    """Largest weighted path length of one material over a bounding-box scan.

    Every scan point has its own random stream keyed by ``(code, face, point)``
    and drawn from ``entropy``. The point comes first on that stream, then its
    rays, so a scan with more points or rays repeats every sample of a
    smaller one and the result never decreases.
    """
    max_path = 0.0
    for face_index, face in enumerate(BOX_FACES):
        logger.debug("Box surface scanned: [%s]", face.name)
        for point_rng in child_streams(entropy, (code, face_index), n_points):
            point = sample_point_on_face(box, face, point_rng)
            for _ in range(n_rays):
                direction = sample_inward_direction(face, point_rng)
                length = max_path_length_for_code(
                    navigator, point, direction, code, weighting, max_steps)
                if length > max_path:
                    max_path = length
    return max_path



def estimate_max_path_lengths(
    navigator: Navigator,
    codes: Iterable[int],
    n_points: int = config.SCANNER_N_POINTS,
    n_rays: int = config.SCANNER_N_RAYS,
    rng: Optional[np.random.Generator] = None,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    scale: float = 1.0,
    box: Optional[BoundingBox] = None,
    table: Optional[PathLengthTable] = None,
    max_steps: int = config.SCANNER_MAX_STEPS,
    progress: bool = False,
) -> PathLengthTable:
    """Estimate the maximum weighted path length of every material.

    Parameters
    ----------
    navigator : Navigator
        Geometry to scan.
    codes : iterable of int
        Material identity codes to scan, each one independently.
    n_points : int
        Random points drawn on each of the six bounding-box faces.
    n_rays : int
        Random inward directions drawn for each point.
    rng : np.random.Generator, optional
        Source of the one root seed the scan streams derive from; a fresh
        unseeded generator if None.
    weighting : WeightingPolicy
        Density weighting on or off.
    scale : float
        Length-unit scale factor applied to every entry at the end.
    box : BoundingBox, optional
        Box to scan. Asked from the navigator if None.
    table : PathLengthTable, optional
        Table to reset and refill.
    max_steps : int
        Walk safety bound for each scan ray.
    progress : bool
        Show a progress bar over the materials.

    Returns
    -------
    PathLengthTable
        Estimated maximum per material. All zero, with an error logged, if no
        bounding box is available.
    """
    codes = list(codes)
    if table is None:
        table = PathLengthTable(codes)
    table.set_all_to_zero()

    logger.info("Computing the maximum path lengths for all materials")

    if box is None:
        box = navigator.bounding_box() if navigator is not None else None
    if box is None:
        logger.error("No geometry bounding box available, max path lengths left at zero")
        return table

    rng = rng or make_rng()
    entropy = draw_entropy(rng)

    logger.info("Box dimensions : x = %g, y = %g, z = %g", *(2.0 * box.half_lengths))
    logger.info("Box origin     : x = %g, y = %g, z = %g", *box.origin)
    logger.info("Will generate [%d] random points on each box surface", n_points)
    logger.info("Will generate [%d] rays for each point", n_rays)

    for code in tqdm(codes, desc="Scanning materials", disable=not progress):
        logger.info("Calculating max path length for material: %d", code)
        max_path = scan_material(navigator, box, code, n_points, n_rays, entropy, weighting, max_steps)
        logger.info("Max path length found = %g", max_path)
        table.add_path_length(code, max_path)

    return scale_path_lengths(table, scale)
