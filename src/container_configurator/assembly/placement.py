# File: src/container_configurator/assembly/placement.py

"""Adjacency placement of new units.

A new unit attached to ``face`` of an anchor is centred at

    anchor.position + offset(face) + normal(face) * dimension_along(face) / 2

which puts it flush against the anchor's outer boundary along that axis.
All measurements are in metres.
"""

from typing import Tuple

from src.container_configurator.config.catalog import (
    FACE_AXIS,
    FACE_NORMALS,
    UNIT_DIMENSIONS,
    Face,
    UnitDimensions,
    face_offset,
)

from .assembly_types import Unit

# Keeps long chains of additions free of float noise
_PRECISION = 9


def dimension_along(face: Face, dimensions: UnitDimensions = UNIT_DIMENSIONS) -> float:
    """Width for left/right, depth for front/back, height for the roof."""
    return dimensions.along(FACE_AXIS[face])


def place_adjacent(
    anchor: Unit,
    face: Face,
    dimensions: UnitDimensions = UNIT_DIMENSIONS,
) -> Tuple[float, float, float]:
    """Compute the center of a unit attached to ``face`` of ``anchor``.

    Args:
        anchor: Existing unit to attach to.
        face: Any face, including the roof (stacking).
        dimensions: Unit dimensions, defaults to the catalog's.

    Returns:
        (x, y, z) of the new unit's center.
    """
    offset = face_offset(face, dimensions)
    normal = FACE_NORMALS[face]
    half = dimension_along(face, dimensions) / 2

    return tuple(
        round(p + o + n * half, _PRECISION) + 0.0
        for p, o, n in zip(anchor.position, offset, normal)
    )
