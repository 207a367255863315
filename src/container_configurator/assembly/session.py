# File: src/container_configurator/assembly/session.py

"""Command surface for one configurator session.

Wires a SelectionController and an AssemblyRegistry together and exposes the
commands a UI issues (select, add, remove, set wall variant, price) plus the
read models it renders from (selection status, per-unit render state, export
report). Commands run to completion one at a time; a failing command raises
a ConfiguratorError and leaves the session unchanged.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from src.container_configurator.config.catalog import (
    HIGHLIGHT_COLORS,
    Face,
    FaceVariant,
)

from .assembly_types import BackgroundClick, PointerHit, Selection, Unit
from .errors import NoFaceSelectedError
from .pricing import price_breakdown, total_price
from .registry import AssemblyRegistry
from .report import AssemblyReport, build_report
from .selection import SelectionController
from .variants import active_parts, resolve_variant, visible_parts

logger = logging.getLogger(__name__)


class ConfiguratorSession:
    """One user's assembly and selection.

    Args:
        seed_initial_unit: Start with one unit at the origin.
    """

    def __init__(self, seed_initial_unit: bool = True) -> None:
        self.selection = SelectionController()
        self.registry = AssemblyRegistry(self.selection, seed_initial_unit=seed_initial_unit)

    @property
    def current_selection(self) -> Selection:
        return self.selection.current

    @property
    def units(self) -> List[Unit]:
        return list(self.registry.units)

    # -------------------------------------------------------------------------
    # Selection commands
    # -------------------------------------------------------------------------

    def pointer_hit(self, unit_id: int, face: Optional[Face] = None) -> Selection:
        """Pointer landed on ``unit_id``, optionally on one of its faces.

        Raises:
            UnknownUnitError: If the unit is not part of the assembly.
        """
        self.registry.get_unit(unit_id)
        return self.selection.dispatch(PointerHit(unit_id, face))

    def select_unit(self, unit_id: int) -> Selection:
        """Hit on a unit's body (no face)."""
        return self.pointer_hit(unit_id)

    def select_face(self, unit_id: int, face: Face) -> Selection:
        """Hit on a face. Only drills into the face once the unit is selected."""
        return self.pointer_hit(unit_id, face)

    def background_click(self) -> Selection:
        return self.selection.dispatch(BackgroundClick())

    def deselect_all(self) -> Selection:
        return self.background_click()

    # -------------------------------------------------------------------------
    # Assembly commands
    # -------------------------------------------------------------------------

    def add_unit(self) -> int:
        """Attach a new unit to the selected face.

        Raises:
            NoFaceSelectedError: If no face is selected.
        """
        current = self.selection.current
        if not current.has_face:
            raise NoFaceSelectedError("add a unit", {"selection": current.to_dict()})
        return self.registry.add_unit(current.unit_id, current.face)

    def remove_unit(self) -> Optional[int]:
        """Remove the selected unit. No-op when nothing is selected.

        Returns:
            Id of the removed unit, or None.
        """
        unit_id = self.selection.current.unit_id
        if unit_id is None:
            return None
        return unit_id if self.registry.remove_unit(unit_id) else None

    def set_wall_variant(self, variant: FaceVariant, face: Optional[Face] = None) -> None:
        """Assign ``variant`` to the selected face.

        Args:
            variant: Variant to apply.
            face: Face being changed; must match the selected face. Defaults
                to the selected face.

        Raises:
            NoFaceSelectedError: If no face, or a different face, is selected.
            InvalidFaceForVariantError: For Window/Door on the roof.
        """
        current = self.selection.current
        if not current.has_face:
            raise NoFaceSelectedError("change a wall", {"selection": current.to_dict()})
        self.registry.set_wall_variant(current.unit_id, face or current.face, variant)

    def get_total_price(self) -> int:
        return total_price(self.registry.units, self.registry.assignments)

    def get_price_breakdown(self) -> Dict[str, Any]:
        return price_breakdown(self.registry.units, self.registry.assignments)

    # -------------------------------------------------------------------------
    # Read models
    # -------------------------------------------------------------------------

    def selection_status(self) -> Dict[str, Any]:
        """What the control panel shows and which actions are enabled."""
        current = self.selection.current
        face = current.face
        current_variant = None
        if face is not None and face.is_wall:
            current_variant = resolve_variant(self.registry.assignments, current.unit_id, face).value

        return {
            "selection": current.to_dict(),
            "can_add_unit": current.has_face,
            "can_remove_unit": not current.is_none,
            "variant_picker_enabled": face is not None and face.is_wall,
            "roof_selected": face is Face.ROOF,
            "current_variant": current_variant,
        }

    def render_state(self) -> List[Dict[str, Any]]:
        """Per-unit parts and highlight colours for the rendering adapter."""
        assignments = self.registry.assignments
        current = self.selection.current
        state = []

        for unit in self.registry.units:
            parts = active_parts(assignments, unit.id)
            highlights = {}
            if current.references(unit.id):
                highlights = {part: HIGHLIGHT_COLORS["unit"] for part in visible_parts(assignments, unit.id)}
                if current.face is not None:
                    highlights[parts[current.face]] = HIGHLIGHT_COLORS["face"]

            state.append({
                "unit_id": unit.id,
                "position": list(unit.position),
                "faces": {face.value: key for face, key in parts.items()},
                "visible_parts": visible_parts(assignments, unit.id),
                "highlights": highlights,
            })
        return state

    def report(self, generated_at: Optional[datetime] = None) -> AssemblyReport:
        return build_report(self.registry.units, self.registry.assignments, generated_at)
