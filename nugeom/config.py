"""
Configuration settings for the detector geometry analyzer.

This module collects the tunable defaults of the analyzer. Users can modify
these values, or pass overrides to ``GeomAnalyzer`` and the scan functions,
without changing the core code.
"""

from __future__ import annotations

# =============================================================================
# Geometry Units
# =============================================================================

# Length unit of the input geometry; path lengths are reported in meters
DEFAULT_LENGTH_UNITS = 1.0  # meter

# Weight path lengths with the material density
WEIGHT_WITH_DENSITY = True

# =============================================================================
# Max Path-Length Scanner
# =============================================================================

# Random points generated on each bounding-box face
SCANNER_N_POINTS = 200

# Random rays generated for each point
SCANNER_N_RAYS = 200

# Regions visited by a single scan ray before it is cut short
SCANNER_MAX_STEPS = 100

# Show a progress bar while scanning materials
SCANNER_PROGRESS = False

# =============================================================================
# Boundary Walker / Vertex Generation
# =============================================================================

# Regions visited by a single walk before it is cut short (None = unbounded)
MAX_WALK_STEPS = 100000

# Fixed increment of the vertex-locating march (geometry length units)
VERTEX_STEP = 0.001

# Increments of the vertex-locating march before it is cut short (None = unbounded)
VERTEX_MAX_STEPS = 10000000

# =============================================================================
# Demo Run
# =============================================================================

DEFAULT_N_RAYS = 100
DEFAULT_SEED = 12345

# Output directories
DATA_OUTPUT_DIR = "Data"
FIGURES_OUTPUT_DIR = "Figures"

# Output file names
PATH_LENGTHS_CSV = "path_lengths.csv"
MAX_PATH_LENGTHS_CSV = "max_path_lengths.csv"
VERTICES_CSV = "vertices.csv"
PATH_LENGTHS_FIGURE = "path_lengths.png"
VERTEX_FIGURE = "vertex_depths.png"

# Plot DPI settings
PLOT_DPI = 300
QUICK_PLOT_DPI = 150
