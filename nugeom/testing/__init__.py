"""
Testing subpackage for the detector geometry analyzer.

This subpackage provides tools for testing and debugging the analyzer:
- Simple analytic box scenes implementing the Navigator interface
- Validation functions

Example usage:
    from nugeom.testing import create_two_slab_scene, run_quick_test

    # Create a scene with known path lengths
    navigator = create_two_slab_scene()

    # Run the self-checks
    success = run_quick_test()
"""

from .simple_scene import (
    SURFACE_PUSH,
    BoxVolume,
    BoxSceneNavigator,
    ray_box_interval,
    make_iron,
    make_carbon,
    make_water,
    make_air,
    create_uniform_box_scene,
    create_two_slab_scene,
    create_mixture_scene,
    create_nested_scene,
    print_scene_info,
)

from .validation import (
    validate_scene,
    validate_analyzer_module,
    run_quick_test,
)

__all__ = [
    # Simple scenes
    "SURFACE_PUSH",
    "BoxVolume",
    "BoxSceneNavigator",
    "ray_box_interval",
    "make_iron",
    "make_carbon",
    "make_water",
    "make_air",
    "create_uniform_box_scene",
    "create_two_slab_scene",
    "create_mixture_scene",
    "create_nested_scene",
    "print_scene_info",
    # Validation
    "validate_scene",
    "validate_analyzer_module",
    "run_quick_test",
]
