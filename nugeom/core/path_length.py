"""
Path-length tables and per-ray accumulation.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .data_classes import Ray
from .errors import NeverEnteredError
from .navigation import Navigator
from .walker import walk
from .weighting import DENSITY_WEIGHTED, WeightingPolicy

logger = logging.getLogger(__name__)


class PathLengthTable(dict):
    """Material identity code -> accumulated (weighted) path length.

    The keys are the identity codes present in the geometry. Looking up a
    code that is not in the table gives 0.0.
    """

    def __init__(self, codes: Iterable[int] = ()):
        super().__init__((code, 0.0) for code in codes)

    def __missing__(self, code: int) -> float:
        return 0.0

    def set_all_to_zero(self):
        for code in self:
            dict.__setitem__(self, code, 0.0)

    def add_path_length(self, code: int, length: float):
        if code not in self:
            logger.debug("Adding code %d, unknown to this table", code)
        dict.__setitem__(self, code, self[code] + length)

    def scale_path_length(self, code: int, scale: float):
        if code in self:
            dict.__setitem__(self, code, self[code] * scale)

    def scale_all(self, scale: float):
        for code in list(self):
            self.scale_path_length(code, scale)

    def is_empty(self) -> bool:
        """True if every entry is zero."""
        return all(length == 0.0 for length in self.values())

    def summary(self) -> str:
        lines = ["Path lengths:"]
        for code, length in self.items():
            lines.append(f"  code = {code:<12d} -> path length = {length:.6g}")
        return "\n".join(lines)


def scale_path_lengths(table: PathLengthTable, scale: float) -> PathLengthTable:
    """Convert every entry of ``table`` in place with the length-unit factor."""
    logger.debug("Scaling path-lengths (scale = %g)", scale)
    table.scale_all(scale)
    return table


def accumulate_path_lengths(
    navigator: Navigator,
    ray: Ray,
    weighting: WeightingPolicy = DENSITY_WEIGHTED,
    table: Optional[PathLengthTable] = None,
    codes: Iterable[int] = (),
    scale: float = 1.0,
    max_steps: Optional[int] = None,
) -> PathLengthTable:
    """Path length within each detector material along a single ray.

    Parameters
    ----------
    navigator : Navigator
        Geometry to walk through.
    ray : Ray
        Start point and unit direction.
    weighting : WeightingPolicy
        Density weighting on or off.
    table : PathLengthTable, optional
        Table to reset and refill. A new one keyed by ``codes`` otherwise.
    codes : iterable of int
        Identity codes of the geometry, used only when ``table`` is None.
    scale : float
        Length-unit scale factor applied to every entry at the end.
    max_steps : int, optional
        Walk safety bound.

    Returns
    -------
    PathLengthTable
        ``table`` (or the new table), all zero if the ray misses the detector.
    """
    if table is None:
        table = PathLengthTable(codes)
    table.set_all_to_zero()

    logger.debug("Input ray: x = %s, direction = %s", ray.origin, ray.direction)

    try:
        for segment in walk(navigator, ray.origin, ray.direction, weighting, max_steps=max_steps):
            table.add_path_length(segment.code, segment.weighted_length)
    except NeverEnteredError:
        return table

    return scale_path_lengths(table, scale)
