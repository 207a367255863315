# File: src/container_configurator/assembly/variants.py

"""Wall variant resolution.

Resolves which variant is active on a face (absence means Base), performs
validated immutable updates of the assignment mapping, and owns the fixed
``(face, variant) -> part key`` table the rendering side uses to pick which
mesh to show.

The roof never carries a Window or Door.
"""

import logging
from typing import Dict, List, Tuple

from src.container_configurator.config.catalog import (
    BASE_PARTS,
    WALL_FACES,
    Face,
    FaceVariant,
)

from .assembly_types import Assignments
from .errors import InvalidFaceForVariantError

logger = logging.getLogger(__name__)


# =============================================================================
# Part Keys
# =============================================================================

_PART_SUFFIX = {
    FaceVariant.BASE: "V1",
    FaceVariant.WINDOW: "Window",
    FaceVariant.DOOR: "Door",
}

PART_KEYS: Dict[Tuple[Face, FaceVariant], str] = {
    (face, variant): f"Wall_{face.value.capitalize()}_{suffix}"
    for face in WALL_FACES
    for variant, suffix in _PART_SUFFIX.items()
}
PART_KEYS[(Face.ROOF, FaceVariant.BASE)] = "Roof_V1"


def part_key(face: Face, variant: FaceVariant) -> str:
    """Renderable part identifier for ``variant`` on ``face``.

    Raises:
        InvalidFaceForVariantError: For Window/Door on the roof.
    """
    try:
        return PART_KEYS[(face, variant)]
    except KeyError:
        raise InvalidFaceForVariantError(face.value, variant.value) from None


# =============================================================================
# Resolution
# =============================================================================


def resolve_variant(assignments: Assignments, unit_id: int, face: Face) -> FaceVariant:
    """Assigned variant for ``(unit_id, face)``, Base when unassigned."""
    return assignments.get((unit_id, face), FaceVariant.BASE)


def assign_variant(
    assignments: Assignments,
    unit_id: int,
    face: Face,
    variant: FaceVariant,
) -> Dict[Tuple[int, Face], FaceVariant]:
    """Return a copy of ``assignments`` with ``(unit_id, face)`` set to ``variant``.

    The input mapping is never modified.

    Raises:
        InvalidFaceForVariantError: If ``face`` is the roof and ``variant`` is
            not Base.
    """
    if face is Face.ROOF and variant is not FaceVariant.BASE:
        logger.warning(f"Refused {variant.value} on roof of unit {unit_id}")
        raise InvalidFaceForVariantError(face.value, variant.value)

    updated = dict(assignments)
    updated[(unit_id, face)] = variant
    return updated


def drop_unit(assignments: Assignments, unit_id: int) -> Dict[Tuple[int, Face], FaceVariant]:
    """Return a copy of ``assignments`` without any entry for ``unit_id``."""
    return {key: variant for key, variant in assignments.items() if key[0] != unit_id}


# =============================================================================
# Read Models
# =============================================================================


def active_parts(assignments: Assignments, unit_id: int) -> Dict[Face, str]:
    """Part key currently shown on each of the five faces of a unit."""
    return {face: part_key(face, resolve_variant(assignments, unit_id, face)) for face in Face}


def visible_parts(assignments: Assignments, unit_id: int) -> List[str]:
    """Every part key to render for a unit: fixed parts then one per face."""
    return list(BASE_PARTS) + list(active_parts(assignments, unit_id).values())


def wall_modifications(assignments: Assignments, unit_id: int) -> List[Tuple[Face, FaceVariant]]:
    """Non-Base walls of a unit, in wall order."""
    modifications = []
    for face in WALL_FACES:
        variant = resolve_variant(assignments, unit_id, face)
        if variant is not FaceVariant.BASE:
            modifications.append((face, variant))
    return modifications
