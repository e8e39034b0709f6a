"""
Material identity codes.

Every nuclide/element is named by the ion code ``10LZZZAAAI`` used by
neutrino event generators: ``1000000000 + Z*10000 + A*10``.
"""

from __future__ import annotations

from typing import List, Union

from .data_classes import Element, Material, MaterialKind

ION_CODE_BASE = 1000000000


def ion_pdg_code(a: int, z: int) -> int:
    """Return the ion code for mass number ``a`` and charge ``z``."""
    return ION_CODE_BASE + z * 10000 + a * 10


def ion_mass_number(code: int) -> int:
    """Mass number A encoded in an ion code."""
    return (code // 10) % 1000


def ion_charge(code: int) -> int:
    """Charge number Z encoded in an ion code."""
    return (code // 10000) % 1000


def target_code(item: Union[Material, Element]) -> int:
    """Identity code of a substance or of a single mixture element.

    The atomic mass is truncated to an integer mass number, so e.g. iron
    (A = 55.85) maps to A = 55.
    """
    return ion_pdg_code(int(item.a), int(item.z))


def material_codes(material: Material) -> List[int]:
    """Identity codes contributed by a material, in element order.

    A substance contributes its own code; a mixture contributes one code per
    element (duplicates kept, they are summed by the caller).
    """
    if material.kind is MaterialKind.MIXTURE:
        return [target_code(element) for element in material.elements]
    return [target_code(material)]
