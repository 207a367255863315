# File: src/container_configurator/assembly/registry.py

"""Assembly registry: the set of placed units and their wall variants.

The registry is the only mutation path for units and assignments. Commands
that target a face check the selection controller first and raise before
touching anything, so a failed command never leaves partial state.

Usage:
    from src.container_configurator.assembly import AssemblyRegistry, SelectionController

    selection = SelectionController()
    registry = AssemblyRegistry(selection)
    ...
    new_id = registry.add_unit(anchor_id, Face.RIGHT)
"""

import itertools
import logging
from typing import Dict, Optional, Tuple

from src.container_configurator.config.catalog import (
    INITIAL_UNIT_POSITION,
    Face,
    FaceVariant,
    UnitDimensions,
    UNIT_DIMENSIONS,
)

from .assembly_types import Selection, Unit, UnitRemoved
from .errors import NoFaceSelectedError, UnknownUnitError
from .placement import place_adjacent
from .selection import SelectionController
from .variants import assign_variant, drop_unit

logger = logging.getLogger(__name__)


class AssemblyRegistry:
    """Owns units and per-unit, per-face variant assignments.

    Args:
        selection: Controller consulted by face-targeted commands and notified
            of removals.
        seed_initial_unit: Start with one unit at the origin.
        dimensions: Unit dimensions used for placement.
    """

    def __init__(
        self,
        selection: SelectionController,
        seed_initial_unit: bool = True,
        dimensions: UnitDimensions = UNIT_DIMENSIONS,
    ) -> None:
        self._selection = selection
        self._dimensions = dimensions
        self._units: Dict[int, Unit] = {}
        self._assignments: Dict[Tuple[int, Face], FaceVariant] = {}
        self._ids = itertools.count(1)

        if seed_initial_unit:
            self._insert(INITIAL_UNIT_POSITION)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def units(self) -> Tuple[Unit, ...]:
        """Units in insertion order."""
        return tuple(self._units.values())

    @property
    def assignments(self) -> Dict[Tuple[int, Face], FaceVariant]:
        """Copy of the current assignments."""
        return dict(self._assignments)

    @property
    def selection(self) -> Selection:
        return self._selection.current

    def has_unit(self, unit_id: int) -> bool:
        return unit_id in self._units

    def get_unit(self, unit_id: int) -> Unit:
        """Return the unit with ``unit_id``.

        Raises:
            UnknownUnitError: If no such unit exists.
        """
        try:
            return self._units[unit_id]
        except KeyError:
            raise UnknownUnitError(unit_id) from None

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def add_unit(self, anchor_unit_id: int, face: Face) -> int:
        """Attach a new unit to ``face`` of the anchor.

        The current selection must be exactly that unit and face.

        Returns:
            The new unit's id.

        Raises:
            NoFaceSelectedError: If the selection is not UnitAndFace(anchor, face).
            UnknownUnitError: If the anchor is not part of the assembly.
        """
        self._require_face_selected(anchor_unit_id, face, "add a unit")
        anchor = self.get_unit(anchor_unit_id)

        position = place_adjacent(anchor, face, self._dimensions)
        unit = self._insert(position)
        logger.info(f"Added unit {unit.id} at {list(position)} on {face.value} of unit {anchor.id}")
        return unit.id

    def remove_unit(self, unit_id: Optional[int]) -> bool:
        """Delete a unit and all its assignments.

        No-op for ids that are not in the assembly.

        Returns:
            True if a unit was removed.
        """
        if unit_id not in self._units:
            logger.debug(f"Remove ignored, unit {unit_id} not in assembly")
            return False

        del self._units[unit_id]
        self._assignments = drop_unit(self._assignments, unit_id)
        logger.info(f"Removed unit {unit_id}")

        self._selection.dispatch(UnitRemoved(unit_id))
        return True

    def set_wall_variant(self, unit_id: int, face: Face, variant: FaceVariant) -> None:
        """Assign ``variant`` to ``face`` of a unit.

        Raises:
            NoFaceSelectedError: If the selection is not UnitAndFace(unit, face).
            UnknownUnitError: If the unit is not part of the assembly.
            InvalidFaceForVariantError: For Window/Door on the roof.
        """
        self._require_face_selected(unit_id, face, "change a wall")
        self.get_unit(unit_id)
        self._assignments = assign_variant(self._assignments, unit_id, face, variant)
        logger.info(f"Unit {unit_id} {face.value} wall set to {variant.value}")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _insert(self, position) -> Unit:
        unit = Unit(id=next(self._ids), position=tuple(position))
        self._units[unit.id] = unit
        return unit

    def _require_face_selected(self, unit_id: int, face: Face, action: str) -> None:
        current = self._selection.current
        if current != Selection.unit_and_face(unit_id, face):
            raise NoFaceSelectedError(
                action,
                {"selection": current.to_dict(), "unit_id": unit_id, "face": face.value},
            )
