"""
Boundary walker: steps a ray through the detector one region at a time.

The walker is the shared primitive behind path-length accumulation,
max-path-length scanning and vertex generation. It yields one
:class:`~nugeom.core.data_classes.Segment` per material crossed, computed
from the navigator's "next boundary" answers only; everything between two
boundaries is treated as a single homogeneous material.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import numpy as np

from .constants import DEBUG, NEVER_ENTER_THRESHOLD, record_walk_event
from .data_classes import Segment, TraversalState
from .errors import NeverEnteredError
from .identity import material_codes
from .navigation import Navigator, resolve_material
from .weighting import DENSITY_WEIGHTED, WeightingPolicy

logger = logging.getLogger(__name__)

# Coincident surfaces crossed before giving up on finding a new region
MAX_COINCIDENT_STEPS = 1000


def will_never_enter(step: float) -> bool:
    """Whether a boundary step is the navigator's "nothing ahead" answer.

    Navigators report an enormous step (1e30) when the trajectory crosses no
    surface at all from the current point.
    """
    if step > NEVER_ENTER_THRESHOLD:
        logger.info("Current step is dr = %g: this trajectory isn't entering the detector", step)
        return True
    return False


def distance_to_next_region(navigator: Navigator, state: TraversalState) -> float:
    """Distance from the current point to where the ray enters a new region.

    Coincident surfaces that leave the ray in the same region are stepped
    over and their (usually zero) lengths added up, so no zero-length segment
    is produced for them.
    """
    position = state.position
    direction = state.direction
    step = navigator.find_next_boundary(position, direction)
    total = step
    n_coincident = 0
    while total <= NEVER_ENTER_THRESHOLD and not navigator.is_entering(position, direction, total):
        n_coincident += 1
        if n_coincident > MAX_COINCIDENT_STEPS:
            logger.warning("Gave up after %d coincident boundaries at %s",
                           MAX_COINCIDENT_STEPS, position + total * direction)
            break
        step = navigator.find_next_boundary(position + total * direction, direction)
        total += step
        if DEBUG:
            logger.debug("Stepping...dr = %g", step)
    return total


def walk(
    navigator: Navigator,
    origin: np.ndarray,
    direction: np.ndarray,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    max_steps: Optional[int] = None,
    state: Optional[TraversalState] = None,
) -> Iterator[Segment]:
    """Yield the material segments crossed by a ray.

    Parameters
    ----------
    navigator : Navigator
        Geometry to walk through.
    origin : np.ndarray
        Start point.
    direction : np.ndarray
        Unit direction. It is used as given, never renormalised.
    weighting : WeightingPolicy
        Sets the weight carried by each segment.
    max_steps : int, optional
        Bound on the number of regions visited. None walks until the ray
        leaves the envelope.
    state : TraversalState, optional
        Cursor to use; pass one in to read the entry point afterwards.

    Yields
    ------
    Segment
        One per crossed substance, or one per element of a crossed mixture.
        Every element of a mixture gets the full crossing length, not a
        share of it. This is a known approximation kept on purpose.

    Raises
    ------
    NeverEnteredError
        If the ray misses the envelope altogether. Nothing is yielded first.
    """
    if state is None:
        state = TraversalState(position=origin, direction=direction)
    record_walk_event('total_walks')

    while True:
        if max_steps is not None and state.n_steps >= max_steps:
            logger.warning("Walk stopped after %d steps at %s", max_steps, state.position)
            record_walk_event('step_limit_hits')
            return
        state.n_steps += 1

        if DEBUG:
            logger.debug("Position = %s, entered = %s", state.position, state.entered)

        volume = navigator.find_node(state.position)

        if volume is None:
            if state.entered:
                return
            step = distance_to_next_region(navigator, state)
            if will_never_enter(step):
                record_walk_event('never_entered')
                raise NeverEnteredError(
                    f"Ray from {origin} along {direction} never enters the detector")
            state.advance(step)
            continue

        if not state.entered:
            state.entered = True
            state.entry_point = state.position.copy()

        material = resolve_material(navigator, volume)
        if material is None:
            # Same as being outside; the envelope was already entered
            return

        weight = weighting.weight(material)
        step = distance_to_next_region(navigator, state)
        if step > NEVER_ENTER_THRESHOLD:
            logger.warning("No boundary ahead inside volume %s, stopping walk",
                           navigator.volume_name(volume))
            return

        for code in material_codes(material):
            if DEBUG:
                logger.debug("Material %s: code = %d, step = %g", material.name, code, step)
            yield Segment(code=code, length=step, weight=weight)

        state.advance(step)
