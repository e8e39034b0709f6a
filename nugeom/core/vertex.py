"""
Interaction vertex generation along a ray.

The vertex is placed with probability proportional to density x length
inside the requested material. Two passes are made over the ray:

1. a boundary walk measures the total weighted length D of the material;
2. a fine fixed-step march from the envelope entry point locates the point
   where the running weighted length reaches a uniform draw in [0, D).

Boundary-to-boundary steps are too coarse to place a point inside a
segment, so the second pass trades speed for spatial resolution.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .. import config
from .data_classes import Ray, TraversalState
from .errors import NeverEnteredError, NoMaterialOnRayError
from .identity import material_codes
from .navigation import Navigator, resolve_material
from .sampling import make_rng, sample_fraction
from .walker import walk
from .weighting import DENSITY_WEIGHTED, WeightingPolicy

logger = logging.getLogger(__name__)


def weighted_length_in_material(
    navigator: Navigator,
    ray: Ray,
    code: int,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    state: Optional[TraversalState] = None,
    max_steps: Optional[int] = None,
) -> float:
    """Total weighted length of material ``code`` along the ray (0.0 if it misses)."""
    total = 0.0
    try:
        for segment in walk(navigator, ray.origin, ray.direction, weighting,
                            max_steps=max_steps, state=state):
            if segment.code == code:
                total += segment.weighted_length
    except NeverEnteredError:
        return 0.0
    return total


def march_to_weighted_distance(
    navigator: Navigator,
    start: np.ndarray,
    direction: np.ndarray,
    code: int,
    distance: float,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    step_size: float = config.VERTEX_STEP,
    max_steps: Optional[int] = None,
) -> Optional[np.ndarray]:
    """March in fixed increments until the weighted length of ``code`` reaches ``distance``.

    Each probe inside material ``code`` adds ``step_size * weight`` for the
    increment ahead of it. The probe at which the running total reaches
    ``distance`` is returned, so the march never goes past the target by a
    full increment.

    Whole increments can fall just short of the exact weighted length of a
    segment, so a draw near the end of the material may never be reached.
    The march then keeps going to the end of the envelope and falls back on
    the last probe that was inside material ``code``.

    Returns
    -------
    np.ndarray or None
        The located point, always inside material ``code``; None if no probe
        of the march lands in that material.
    """
    position = np.array(start, dtype=float)
    cumulative = 0.0
    last_in_target = None
    n_steps = 0

    while max_steps is None or n_steps < max_steps:
        n_steps += 1
        volume = navigator.find_node(position)

        if volume is None:
            break

        material = resolve_material(navigator, volume)
        if material is None:
            break
        multiplicity = material_codes(material).count(code)
        if multiplicity:
            last_in_target = position
            cumulative += multiplicity * step_size * weighting.weight(material)
            if cumulative >= distance:
                return position

        position = position + step_size * direction

    logger.debug("March ended short of the target (%g < %g)", cumulative, distance)
    return last_in_target



def sample_vertex(
    navigator: Navigator,
    ray: Ray,
    target_code: int,
    rng: Optional[np.random.Generator] = None,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    step_size: float = config.VERTEX_STEP,
    max_steps: Optional[int] = None,
) -> np.ndarray:
    """Generate a random vertex in material ``target_code`` along a ray.

    Parameters
    ----------
    navigator : Navigator
        Geometry to walk through.
    ray : Ray
        Start point and unit direction.
    target_code : int
        Identity code of the material to place the vertex in.
    rng : np.random.Generator, optional
        Source of the uniform draw; a fresh unseeded generator if None.
    weighting : WeightingPolicy
        Density weighting on or off. With it on, vertices follow density x length.
    step_size : float
        Increment of the locating march, in geometry length units.
    max_steps : int, optional
        Safety bound for both passes.

    Returns
    -------
    np.ndarray
        The vertex position, in geometry length units.

    Raises
    ------
    NoMaterialOnRayError
        If the ray does not cross the material.
    """
    logger.info("Generating vtx in material: %d along the input neutrino direction", target_code)

    state = TraversalState(position=ray.origin, direction=ray.direction)
    total = weighted_length_in_material(navigator, ray, target_code, weighting, state, max_steps)

    if total == 0.0:
        logger.error("No material selected along this direction from set point!")
        raise NoMaterialOnRayError(target_code)

    logger.debug("(Distance)x(Density) = %g", total)

    rng = rng or make_rng()
    distance = sample_fraction(rng) * total
    logger.debug("Random distance in selected material %g", distance)

    vertex = march_to_weighted_distance(
        navigator, state.entry_point, ray.direction, target_code, distance,
        weighting, step_size, max_steps)
    if vertex is None:
        raise NoMaterialOnRayError(target_code)

    logger.debug("Vertex = %s", vertex)
    return vertex
