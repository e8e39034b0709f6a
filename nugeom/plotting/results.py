"""
Analysis results visualization.

This module provides visualization functions for path-length tables and
sampled interaction vertices, plus a printed statistical summary.
"""

from __future__ import annotations

from typing import List, Mapping, Optional

import numpy as np
import matplotlib.pyplot as plt

from .. import config
from ..core.data_classes import VertexRecord
from ..core.identity import ion_charge, ion_mass_number


def _code_label(code: int) -> str:
    return f"Z={ion_charge(code)}, A={ion_mass_number(code)}"


def plot_path_lengths(
    table: Mapping[int, float],
    max_table: Optional[Mapping[int, float]] = None,
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Bar chart of the path length in each material.

    Parameters
    ----------
    table : Mapping[int, float]
        Path lengths of a single ray (or averaged over rays).
    max_table : Mapping[int, float], optional
        Maximum path lengths, drawn next to ``table`` when given.
    save_path : str, optional
        Path for saving the figure.
    show : bool
        Whether to open the figure window.
    """
    if not table:
        print("[warning] No path lengths to visualize.")
        return None

    codes = list(table)
    x = np.arange(len(codes))
    width = 0.4 if max_table is not None else 0.8

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(x, [table[c] for c in codes], width=width, color='steelblue', alpha=0.8,
           label='Path length')
    if max_table is not None:
        ax.bar(x + width, [max_table.get(c, 0.0) for c in codes], width=width,
               color='darkorange', alpha=0.8, label='Max path length')
        ax.set_xticks(x + width / 2)
    else:
        ax.set_xticks(x)
    ax.set_xticklabels([_code_label(c) for c in codes], rotation=30, ha='right')
    ax.set_ylabel('Path length x density')
    ax.set_title('Path Length per Target Material')
    ax.legend()
    ax.grid(True, axis='y', alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=config.PLOT_DPI, bbox_inches='tight')
        print(f"[info] Saved path-length chart to {save_path}")

    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig


def plot_vertex_depths(
    records: List[VertexRecord],
    bins: int = 50,
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Histogram of vertex depths along their rays, one series per material.

    Parameters
    ----------
    records : List[VertexRecord]
        Sampled vertices.
    bins : int
        Number of histogram bins.
    save_path : str, optional
        Path for saving the figure.
    show : bool
        Whether to open the figure window.
    """
    if not records:
        print("[warning] No vertices to visualize.")
        return None

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    # Depth histogram per material
    ax1 = axes[0]
    for code in sorted({r.code for r in records}):
        depths = np.array([r.depth for r in records if r.code == code])
        ax1.hist(depths, bins=bins, alpha=0.6, label=_code_label(code))
    ax1.set_xlabel('Depth along ray')
    ax1.set_ylabel('Count')
    ax1.set_title('Vertex Depth Distribution')
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    # Vertex positions projected on x-y
    ax2 = axes[1]
    positions = np.array([r.position for r in records])
    codes = np.array([r.code for r in records])
    scatter = ax2.scatter(positions[:, 0], positions[:, 1], c=codes, cmap='viridis',
                          s=10, alpha=0.6)
    ax2.set_xlabel('x')
    ax2.set_ylabel('y')
    ax2.set_title('Vertex Positions (x-y projection)')
    ax2.axis('equal')
    ax2.grid(True, alpha=0.3)
    plt.colorbar(scatter, ax=ax2, label='Material code')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=config.PLOT_DPI, bbox_inches='tight')
        print(f"[info] Saved vertex visualization to {save_path}")

    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig


def print_statistics(
    table: Mapping[int, float],
    max_table: Optional[Mapping[int, float]] = None,
    records: Optional[List[VertexRecord]] = None,
):
    """Print statistical summary of an analysis run.

    Parameters
    ----------
    table : Mapping[int, float]
        Accumulated path lengths.
    max_table : Mapping[int, float], optional
        Maximum path lengths.
    records : List[VertexRecord], optional
        Sampled vertices.
    """
    if not table:
        print("\n[Statistics] No path lengths to display.")
        return

    print("\n" + "=" * 60)
    print("PATH LENGTH STATISTICS")
    print("=" * 60)
    print(f"Target materials: {len(table)}")
    for code, length in table.items():
        line = f"  {code:<12d} ({_code_label(code):<14s}) path = {length:.6g}"
        if max_table is not None:
            line += f", max = {max_table.get(code, 0.0):.6g}"
        print(line)

    if records:
        depths = np.array([r.depth for r in records])
        print()
        print(f"Vertices sampled: {len(records)}")
        print(f"  Depth mean: {np.mean(depths):.4f}, Std: {np.std(depths):.4f}")
        print(f"  Depth range: [{np.min(depths):.4f}, {np.max(depths):.4f}]")
    print("=" * 60 + "\n")
