"""
Detector Geometry Analyzer
==========================

This package walks straight rays through a detector geometry and reports,
for every target material, the distance (optionally x density) a neutrino
would travel through it. It also estimates the largest such path length over
the detector and places random interaction vertices along a ray.

Modules:
--------
- config: Configurable analyzer parameters
- core.constants: Length units, sentinels and walk statistics
- core.data_classes: Data structures (Material, Ray, Segment, BoundingBox)
- core.identity: Material identity codes
- core.navigation: Navigator interface a geometry must implement
- core.walker: Ray boundary walker
- core.path_length: Path-length accumulation
- core.max_path: Maximum path-length estimation
- core.vertex: Interaction vertex generation
- core.analyzer: GeomAnalyzer driver
- core.io_utils: Data export utilities
- testing: Analytic box scenes and validation
- plotting: Result figures
- runner: Command-line demo run
"""

from . import config
from .core.constants import *
from .core.data_classes import (
    MaterialKind,
    Element,
    Material,
    Medium,
    BoundingBox,
    Ray,
    Segment,
    VertexRecord,
)
from .core.errors import (
    GeometryError,
    NeverEnteredError,
    NoMaterialOnRayError,
    MissingGeometryError,
)
from .core.identity import ion_pdg_code, target_code, material_codes
from .core.weighting import WeightingPolicy, DENSITY_WEIGHTED, UNWEIGHTED
from .core.navigation import Navigator
from .core.walker import walk
from .core.path_length import PathLengthTable, accumulate_path_lengths
from .core.max_path import estimate_max_path_lengths
from .core.vertex import sample_vertex
from .core.analyzer import GeomAnalyzer
from .core.io_utils import export_path_lengths_to_csv, export_vertices_to_csv

__version__ = "1.0.0"
__all__ = [
    # Config module
    "config",
    # Constants
    "METER",
    "CENTIMETER",
    "MILLIMETER",
    "UNBOUNDED_STEP",
    "DEBUG",
    # Data classes
    "MaterialKind",
    "Element",
    "Material",
    "Medium",
    "BoundingBox",
    "Ray",
    "Segment",
    "VertexRecord",
    # Errors
    "GeometryError",
    "NeverEnteredError",
    "NoMaterialOnRayError",
    "MissingGeometryError",
    # Identity
    "ion_pdg_code",
    "target_code",
    "material_codes",
    # Weighting
    "WeightingPolicy",
    "DENSITY_WEIGHTED",
    "UNWEIGHTED",
    # Navigation
    "Navigator",
    # Walker
    "walk",
    # Path lengths
    "PathLengthTable",
    "accumulate_path_lengths",
    "estimate_max_path_lengths",
    # Vertices
    "sample_vertex",
    # Analyzer
    "GeomAnalyzer",
    # IO
    "export_path_lengths_to_csv",
    "export_vertices_to_csv",
]
