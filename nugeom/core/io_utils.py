"""
Data export utilities for the detector geometry analyzer.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Mapping

from .data_classes import VertexRecord
from .identity import ion_charge, ion_mass_number


def export_path_lengths_to_csv(table: Mapping[int, float], filename: str = "path_lengths.csv"):
    """Export a path-length table to a CSV file.

    Parameters
    ----------
    table : Mapping[int, float]
        Material identity code -> path length, e.g. a ``PathLengthTable``.
    filename : str
        Output CSV filename.
    """
    if not table:
        print("[warning] No path lengths to export.")
        return

    output_path = Path(filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    headers = [
        'code',
        'mass_number',
        'charge',
        'path_length',
    ]

    with open(filename, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(headers)
        for code, length in table.items():
            writer.writerow([code, ion_mass_number(code), ion_charge(code), length])

    print(f"[info] Path lengths exported to {filename}")
    print(f"[info] Materials: {len(table)}, non-zero: {sum(1 for v in table.values() if v > 0.0)}")


def load_path_lengths_from_csv(filename: str) -> dict:
    """Read back a table written by :func:`export_path_lengths_to_csv`."""
    table = {}
    with open(filename, 'r', newline='', encoding='utf-8') as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            table[int(row['code'])] = float(row['path_length'])
    return table


def export_vertices_to_csv(records: List[VertexRecord], filename: str = "vertices.csv"):
    """Export sampled vertices to a CSV file.

    Parameters
    ----------
    records : List[VertexRecord]
        Vertices generated by the analyzer.
    filename : str
        Output CSV filename.
    """
    if not records:
        print("[warning] No vertices to export.")
        return

    output_path = Path(filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    headers = [
        'vertex_id',
        'code',
        'vertex_x',
        'vertex_y',
        'vertex_z',
        'origin_x',
        'origin_y',
        'origin_z',
        'direction_x',
        'direction_y',
        'direction_z',
        'depth',
    ]

    with open(filename, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(headers)

        for idx, record in enumerate(records, start=1):
            row = [idx, record.code]
            row.extend(float(v) for v in record.position)
            row.extend(float(v) for v in record.ray_origin)
            row.extend(float(v) for v in record.direction)
            row.append(record.depth)
            writer.writerow(row)

    print(f"[info] Vertices exported to {filename}")
    print(f"[info] Total vertices: {len(records)}")
