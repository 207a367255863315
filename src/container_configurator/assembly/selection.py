# File: src/container_configurator/assembly/selection.py

"""Selection state machine.

States: nothing selected, a unit selected as a whole, or a face of the
selected unit. Pointer selection is a two-step protocol: the first hit on a
unit selects the unit regardless of which face was hit; a further hit on a
face of the same unit selects that face. Clicking the background clears the
selection, and so does removal of the selected unit.

Events that match no transition leave the state unchanged.
"""

import logging
from typing import Union

from .assembly_types import (
    BackgroundClick,
    PointerHit,
    Selection,
    UnitRemoved,
)

logger = logging.getLogger(__name__)

SelectionEvent = Union[PointerHit, BackgroundClick, UnitRemoved]


class SelectionController:
    """Tracks the current selection and applies events to it."""

    def __init__(self) -> None:
        self._current = Selection.none()

    @property
    def current(self) -> Selection:
        return self._current

    def dispatch(self, event: SelectionEvent) -> Selection:
        """Apply ``event`` and return the resulting selection.

        Args:
            event: PointerHit, BackgroundClick or UnitRemoved.

        Returns:
            The selection after the transition (unchanged for no-op events).
        """
        if isinstance(event, PointerHit):
            new = self._on_pointer_hit(event)
        elif isinstance(event, BackgroundClick):
            new = Selection.none()
        elif isinstance(event, UnitRemoved):
            new = Selection.none() if self._current.references(event.unit_id) else self._current
        else:
            raise TypeError(f"Unsupported selection event: {type(event).__name__}")

        if new != self._current:
            logger.debug(f"Selection {self._current.to_dict()} -> {new.to_dict()} on {event}")
            self._current = new
        else:
            logger.debug(f"Ignored {event}")
        return self._current

    def _on_pointer_hit(self, event: PointerHit) -> Selection:
        # First hit on a unit always selects the unit as a whole
        if not self._current.references(event.unit_id):
            return Selection.unit_only(event.unit_id)

        # Same unit already selected: drill into the face, if one was hit
        if event.face is None:
            return self._current
        return Selection.unit_and_face(event.unit_id, event.face)

    def reset(self) -> Selection:
        """Clear the selection (same as a background click)."""
        return self.dispatch(BackgroundClick())
