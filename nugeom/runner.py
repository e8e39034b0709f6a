"""
Detector Geometry Analyzer Runner Module

This module provides the main analysis runner function that can be called
from scripts or imported directly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from . import config
from .core.analyzer import GeomAnalyzer
from .core.constants import print_walk_stats, reset_walk_stats
from .core.data_classes import VertexRecord
from .core.errors import NoMaterialOnRayError
from .core.io_utils import export_path_lengths_to_csv, export_vertices_to_csv
from .core.navigation import Navigator
from .core.path_length import PathLengthTable
from .core.sampling import make_rng, sample_isotropic_direction
from .plotting import plot_path_lengths, plot_vertex_depths, print_statistics
from .testing.simple_scene import (
    create_mixture_scene,
    create_nested_scene,
    create_two_slab_scene,
    create_uniform_box_scene,
)

SCENES = {
    'cube': create_uniform_box_scene,
    'two_slab': create_two_slab_scene,
    'mixture': create_mixture_scene,
    'nested': create_nested_scene,
}


def sample_ray_through_box(navigator: Navigator, rng: np.random.Generator) -> Tuple[np.ndarray, np.ndarray]:
    """Draw a ray that starts outside the detector and crosses its bounding box.

    The ray passes through a uniform point of the box along an isotropic
    direction, starting two box diagonals back from that point.
    """
    box = navigator.bounding_box()
    target = box.lower + 2.0 * box.half_lengths * rng.random(3)
    direction = sample_isotropic_direction(rng)
    distance = 4.0 * float(np.linalg.norm(box.half_lengths))
    return target - distance * direction, direction


def choose_target(table: PathLengthTable, rng: np.random.Generator) -> Optional[int]:
    """Pick a material code with probability proportional to its path length."""
    codes = [code for code, length in table.items() if length > 0.0]
    if not codes:
        return None
    weights = np.array([table[code] for code in codes])
    return int(rng.choice(codes, p=weights / weights.sum()))


def run_full_analysis(
    output_dir: Optional[Path] = None,
    scene: str = 'two_slab',
    n_rays: Optional[int] = None,
    seed: Optional[int] = None,
    compute_max: bool = True,
    save_results: bool = True,
    generate_plots: bool = True,
) -> Tuple[PathLengthTable, PathLengthTable, List[VertexRecord]]:
    """Run the complete geometry analysis on one of the built-in scenes.

    This is the main entry point for running analyses. It handles:
    1. Building the scene and the analyzer
    2. Accumulating path lengths over random rays
    3. Sampling one vertex per ray in a material chosen by path length
    4. Estimating the maximum path lengths
    5. Exporting results and generating plots

    Parameters
    ----------
    output_dir : Path, optional
        Directory for output files (Data/, Figures/). If None, uses current working directory.
    scene : str
        Name of the built-in scene, one of ``SCENES``.
    n_rays : int, optional
        Number of random rays. If None, uses config default.
    seed : int, optional
        Random seed. If None, uses config default.
    compute_max : bool
        Whether to run the max path-length scan.
    save_results : bool
        Whether to save results to CSV files.
    generate_plots : bool
        Whether to generate visualization plots.

    Returns
    -------
    mean_table : PathLengthTable
        Path lengths averaged over the rays.
    max_table : PathLengthTable
        Maximum path lengths (all zero if not computed).
    vertices : List[VertexRecord]
        Sampled vertices.
    """
    if output_dir is None:
        output_dir = Path.cwd()
    else:
        output_dir = Path(output_dir)

    if n_rays is None:
        n_rays = config.DEFAULT_N_RAYS
    if seed is None:
        seed = config.DEFAULT_SEED

    if scene not in SCENES:
        raise ValueError(f"Unknown scene {scene!r}, choose from {sorted(SCENES)}")

    rng = make_rng(seed)
    navigator = SCENES[scene]()
    analyzer = GeomAnalyzer(navigator, rng=rng)
    codes = analyzer.list_of_target_nuclei()

    print("\n" + "=" * 70)
    print("GEOMETRY ANALYSIS CONFIGURATION")
    print("=" * 70)
    print(f"Scene: {scene}")
    print(f"Target materials: {codes}")
    print(f"Rays: {n_rays}")
    print(f"Seed: {seed}")
    print(f"Weight with density: {analyzer.weight_with_density}")
    print("=" * 70 + "\n")

    reset_walk_stats()

    # Path lengths and vertices
    print(f"[info] Tracing {n_rays} rays...")
    mean_table = PathLengthTable(codes)
    vertices: List[VertexRecord] = []
    n_missed = 0
    for _ in range(n_rays):
        origin, direction = sample_ray_through_box(navigator, rng)
        table = analyzer.compute_path_lengths(origin, direction)
        if table.is_empty():
            n_missed += 1
            continue
        for code, length in table.items():
            mean_table.add_path_length(code, length / n_rays)

        code = choose_target(table, rng)
        try:
            vertex = analyzer.generate_vertex(origin, direction, code)
        except NoMaterialOnRayError as e:
            print(f"[warning] {e}")
            continue
        vertices.append(VertexRecord(code=code, position=vertex.copy(),
                                     ray_origin=origin, direction=direction))
    print(f"[info] Rays missing the detector: {n_missed}")

    # Max path lengths
    if compute_max:
        max_table = analyzer.compute_max_path_lengths()
    else:
        max_table = PathLengthTable(codes)

    print_statistics(mean_table, max_table if compute_max else None, vertices)
    print_walk_stats()

    # Save results
    if save_results:
        data_dir = output_dir / config.DATA_OUTPUT_DIR
        export_path_lengths_to_csv(mean_table, filename=str(data_dir / config.PATH_LENGTHS_CSV))
        if compute_max:
            export_path_lengths_to_csv(max_table, filename=str(data_dir / config.MAX_PATH_LENGTHS_CSV))
        export_vertices_to_csv(vertices, filename=str(data_dir / config.VERTICES_CSV))

    # Generate plots
    if generate_plots:
        print("[info] Generating visualizations...")
        figures_dir = output_dir / config.FIGURES_OUTPUT_DIR
        figures_dir.mkdir(parents=True, exist_ok=True)
        plot_path_lengths(mean_table, max_table if compute_max else None,
                          save_path=str(figures_dir / config.PATH_LENGTHS_FIGURE), show=False)
        plot_vertex_depths(vertices, save_path=str(figures_dir / config.VERTEX_FIGURE), show=False)
        print("[info] Visualization complete!")

    return mean_table, max_table, vertices


def main(argv: Optional[List[str]] = None):
    """Command-line entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Run detector geometry analysis")
    parser.add_argument("-s", "--scene", choices=sorted(SCENES), default='two_slab',
                        help="Built-in scene to analyze")
    parser.add_argument("-n", "--rays", type=int, default=None,
                        help="Number of random rays")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed")
    parser.add_argument("--scan-points", type=int, default=None,
                        help="Scanner points per bounding-box face")
    parser.add_argument("--scan-rays", type=int, default=None,
                        help="Scanner rays per face point")
    parser.add_argument("--no-max", action="store_true",
                        help="Skip the max path-length scan")
    parser.add_argument("--no-save", action="store_true",
                        help="Don't save results to CSV")
    parser.add_argument("--no-plot", action="store_true",
                        help="Don't generate visualization plots")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Output directory for results and figures")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show analyzer log messages")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.scan_points is not None:
        config.SCANNER_N_POINTS = args.scan_points
    if args.scan_rays is not None:
        config.SCANNER_N_RAYS = args.scan_rays

    run_full_analysis(
        output_dir=args.output_dir,
        scene=args.scene,
        n_rays=args.rays,
        seed=args.seed,
        compute_max=not args.no_max,
        save_results=not args.no_save,
        generate_plots=not args.no_plot,
    )


if __name__ == "__main__":
    main()
