"""
Core modules of the detector geometry analyzer.

This subpackage holds the traversal engine:
- constants: length units, navigation sentinels and walk statistics
- data_classes: data structures (Material, Ray, Segment, BoundingBox, ...)
- errors: exception hierarchy
- identity: material identity codes
- weighting: density weighting policy
- navigation: navigator capability contract
- walker: ray boundary walker
- path_length: path-length tables and accumulation
- max_path: maximum path-length estimation
- vertex: interaction vertex generation
- sampling: random sampling helpers
- analyzer: GeomAnalyzer driver
- io_utils: CSV export
"""

# Constants
from .constants import (
    METER,
    KILOMETER,
    CENTIMETER,
    MILLIMETER,
    MICROMETER,
    UNBOUNDED_STEP,
    NEVER_ENTER_THRESHOLD,
    DEBUG,
    WALK_STATS,
    reset_walk_stats,
    print_walk_stats,
)

# Data classes
from .data_classes import (
    MaterialKind,
    Element,
    Material,
    Medium,
    BoundingBox,
    Ray,
    TraversalState,
    Segment,
    VertexRecord,
)

# Errors
from .errors import (
    GeometryError,
    NeverEnteredError,
    NoMaterialOnRayError,
    MissingGeometryError,
    UnresolvableMediumError,
    UnresolvableMaterialError,
)

# Identity codes
from .identity import (
    ion_pdg_code,
    ion_mass_number,
    ion_charge,
    target_code,
    material_codes,
)

# Weighting
from .weighting import WeightingPolicy, DENSITY_WEIGHTED, UNWEIGHTED

# Navigation
from .navigation import Navigator, resolve_material, require_material

# Walker
from .walker import walk, will_never_enter, distance_to_next_region

# Path lengths
from .path_length import (
    PathLengthTable,
    scale_path_lengths,
    accumulate_path_lengths,
)

# Max path lengths
from .max_path import (
    max_path_length_for_code,
    scan_material,
    estimate_max_path_lengths,
)

# Vertices
from .vertex import (
    weighted_length_in_material,
    march_to_weighted_distance,
    sample_vertex,
)

# Sampling
from .sampling import (
    BoxFace,
    BOX_FACES,
    make_rng,
    draw_entropy,
    child_streams,
    sample_point_on_face,
    sample_inward_direction,
    sample_fraction,
    sample_isotropic_direction,
)

# Analyzer
from .analyzer import GeomAnalyzer

# IO
from .io_utils import (
    export_path_lengths_to_csv,
    load_path_lengths_from_csv,
    export_vertices_to_csv,
)

__all__ = [
    # Constants
    'METER',
    'KILOMETER',
    'CENTIMETER',
    'MILLIMETER',
    'MICROMETER',
    'UNBOUNDED_STEP',
    'NEVER_ENTER_THRESHOLD',
    'DEBUG',
    'WALK_STATS',
    'reset_walk_stats',
    'print_walk_stats',
    # Data classes
    'MaterialKind',
    'Element',
    'Material',
    'Medium',
    'BoundingBox',
    'Ray',
    'TraversalState',
    'Segment',
    'VertexRecord',
    # Errors
    'GeometryError',
    'NeverEnteredError',
    'NoMaterialOnRayError',
    'MissingGeometryError',
    'UnresolvableMediumError',
    'UnresolvableMaterialError',
    # Identity
    'ion_pdg_code',
    'ion_mass_number',
    'ion_charge',
    'target_code',
    'material_codes',
    # Weighting
    'WeightingPolicy',
    'DENSITY_WEIGHTED',
    'UNWEIGHTED',
    # Navigation
    'Navigator',
    'resolve_material',
    'require_material',
    # Walker
    'walk',
    'will_never_enter',
    'distance_to_next_region',
    # Path lengths
    'PathLengthTable',
    'scale_path_lengths',
    'accumulate_path_lengths',
    # Max path lengths
    'max_path_length_for_code',
    'scan_material',
    'estimate_max_path_lengths',
    # Vertices
    'weighted_length_in_material',
    'march_to_weighted_distance',
    'sample_vertex',
    # Sampling
    'BoxFace',
    'BOX_FACES',
    'make_rng',
    'draw_entropy',
    'child_streams',
    'sample_point_on_face',
    'sample_inward_direction',
    'sample_fraction',
    'sample_isotropic_direction',
    # Analyzer
    'GeomAnalyzer',
    # IO
    'export_path_lengths_to_csv',
    'load_path_lengths_from_csv',
    'export_vertices_to_csv',
]
