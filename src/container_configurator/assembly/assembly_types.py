# File: src/container_configurator/assembly/assembly_types.py

"""Data models for the container assembly.

Defines the core types shared by the selection controller, the registry and
the read models. Positions are world XYZ in metres (Y up).

Key Types:
    Unit: A placed container with a fixed position
    Selection: Current user focus (nothing, a unit, or a face of a unit)
    PointerHit / BackgroundClick / UnitRemoved: Events fed to the controller
    Assignments: (unit id, face) -> FaceVariant mapping
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from src.container_configurator.config.catalog import Face, FaceVariant, Vector3


Assignments = Mapping[Tuple[int, Face], FaceVariant]


# =============================================================================
# Enumerations
# =============================================================================


class SelectionKind(Enum):
    """Which of the three selection states is active."""

    NONE = "none"
    """Nothing selected."""

    UNIT_ONLY = "unit"
    """A unit is selected as a whole."""

    UNIT_AND_FACE = "unit_and_face"
    """A specific face of the selected unit is selected."""


# =============================================================================
# Data Models
# =============================================================================


@dataclass(frozen=True)
class Unit:
    """A placed container.

    Attributes:
        id: Registry-issued identifier, never reused.
        position: World XYZ of the unit's center. Set once at creation.
    """

    id: int
    position: Vector3

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "position": list(self.position)}


@dataclass(frozen=True)
class Selection:
    """Current user focus.

    Use the ``none``/``unit_only``/``unit_and_face`` constructors rather than
    building instances by hand so ``unit_id``/``face`` always agree with
    ``kind``.
    """

    kind: SelectionKind = SelectionKind.NONE
    unit_id: Optional[int] = None
    face: Optional[Face] = None

    @classmethod
    def none(cls) -> "Selection":
        return cls()

    @classmethod
    def unit_only(cls, unit_id: int) -> "Selection":
        return cls(SelectionKind.UNIT_ONLY, unit_id)

    @classmethod
    def unit_and_face(cls, unit_id: int, face: Face) -> "Selection":
        return cls(SelectionKind.UNIT_AND_FACE, unit_id, face)

    @property
    def is_none(self) -> bool:
        return self.kind is SelectionKind.NONE

    @property
    def has_face(self) -> bool:
        return self.kind is SelectionKind.UNIT_AND_FACE

    def references(self, unit_id: int) -> bool:
        """True if this selection points at ``unit_id`` (with or without a face)."""
        return not self.is_none and self.unit_id == unit_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "unit_id": self.unit_id,
            "face": self.face.value if self.face else None,
        }


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class PointerHit:
    """The pointer landed on a unit.

    Attributes:
        unit_id: Unit that was hit.
        face: Face that was hit, or None when the hit part is not a face
            (chassis, floor).
    """

    unit_id: int
    face: Optional[Face] = None


@dataclass(frozen=True)
class BackgroundClick:
    """The pointer did not hit any unit."""


@dataclass(frozen=True)
class UnitRemoved:
    """Emitted by the registry after a unit has been deleted."""

    unit_id: int


__all__ = [
    "Assignments",
    "BackgroundClick",
    "Face",
    "FaceVariant",
    "PointerHit",
    "Selection",
    "SelectionKind",
    "Unit",
    "UnitRemoved",
]
