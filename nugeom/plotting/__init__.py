"""
Plotting subpackage for detector geometry analysis.

This subpackage provides visualization tools for:
- Path-length and max path-length tables
- Sampled interaction vertices

Example usage:
    from nugeom.plotting import plot_path_lengths, print_statistics

    plot_path_lengths(table, max_table, save_path='Figures/path_lengths.png')
    print_statistics(table, max_table)
"""

from .results import (
    plot_path_lengths,
    plot_vertex_depths,
    print_statistics,
)

__all__ = [
    "plot_path_lengths",
    "plot_vertex_depths",
    "print_statistics",
]
