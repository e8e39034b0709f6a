"""
Length units, navigation sentinels and walk diagnostics.
"""

# Length units, expressed in meters
METER = 1.0
KILOMETER = 1.0e3
CENTIMETER = 1.0e-2
MILLIMETER = 1.0e-3
MICROMETER = 1.0e-6

# Step returned by a navigator when the ray crosses nothing from here on
UNBOUNDED_STEP = 1.0e30

# Any step above this is read as "will never enter the detector"
NEVER_ENTER_THRESHOLD = 9.99e29

# Debug flag
DEBUG = False

# Global statistics for walk anomaly monitoring
WALK_STATS = {
    'total_walks': 0,
    'never_entered': 0,
    'unresolved_media': 0,
    'step_limit_hits': 0,
}


def reset_walk_stats():
    """Reset walk statistics counters."""
    for key in WALK_STATS:
        WALK_STATS[key] = 0


def record_walk_event(key: str):
    """Increment one walk statistics counter."""
    WALK_STATS[key] += 1


def print_walk_stats():
    """Print statistics about walk anomalies.

    A non-zero count of unresolved media or step-limit hits points at a
    malformed geometry (volumes without media, surfaces the navigator never
    reports as crossed).
    """
    stats = WALK_STATS
    total = stats['total_walks']

    if total == 0:
        print("No walks recorded.")
        return

    print("\n" + "=" * 60)
    print("BOUNDARY WALK STATISTICS")
    print("=" * 60)
    print(f"Total walks:               {total:,}")
    print(f"Never entered envelope:    {stats['never_entered']:,} "
          f"({100 * stats['never_entered'] / total:.2f}%)")
    print(f"Unresolved medium/material:{stats['unresolved_media']:,} "
          f"({100 * stats['unresolved_media'] / total:.2f}%)")
    print(f"Stopped at step limit:     {stats['step_limit_hits']:,} "
          f"({100 * stats['step_limit_hits'] / total:.2f}%)")
    print("=" * 60)

    if stats['unresolved_media'] > 0 or stats['step_limit_hits'] > 0:
        print("WARNING: geometry anomalies detected")
        print("   - Check that every volume has a medium and a material")
        print("   - Check for surfaces the navigator never reports as entered")
    else:
        print("Geometry walks look clean")
    print()
