"""
Path-length weighting policy.
"""

from __future__ import annotations

from dataclasses import dataclass

from .data_classes import Material


@dataclass(frozen=True)
class WeightingPolicy:
    """Decides whether path lengths are scaled by the material density.

    With density weighting on, a path length becomes length x density (an
    areal density), which is what the interaction probability scales with.
    """

    with_density: bool = True

    def weight(self, material: Material) -> float:
        if self.with_density:
            return material.density
        return 1.0


DENSITY_WEIGHTED = WeightingPolicy(with_density=True)
UNWEIGHTED = WeightingPolicy(with_density=False)
