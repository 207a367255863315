# File: src/container_configurator/config/catalog.py

"""
Geometry and price catalog for the Container Configurator.

Static configuration shared by every other module: unit dimensions, the five
attachment faces with their offsets and outward normals, the variant price
table and the part keys the rendering side needs. All dimensions are in
metres, all prices in roubles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


Vector3 = Tuple[float, float, float]


# =============================================================================
# Enumerations
# =============================================================================


class Face(Enum):
    """Attachment/customization surface of a unit."""

    FRONT = "front"
    """+Z wall."""

    BACK = "back"
    """-Z wall."""

    LEFT = "left"
    """-X wall."""

    RIGHT = "right"
    """+X wall."""

    ROOF = "roof"
    """+Y top. Units can be stacked here but it carries no variant."""

    @property
    def is_wall(self) -> bool:
        return self is not Face.ROOF


class FaceVariant(Enum):
    """Customization applied to a wall face."""

    BASE = "Base"
    WINDOW = "Window"
    DOOR = "Door"

    @classmethod
    def parse(cls, value) -> "FaceVariant":
        """Accept an enum, its value or name, or the legacy ``V1`` alias for Base."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        if text.upper() == "V1":
            return cls.BASE
        for variant in cls:
            if text.lower() in (variant.value.lower(), variant.name.lower()):
                return variant
        raise ValueError(f"Unsupported face variant: {value}")


# =============================================================================
# Dimensions
# =============================================================================


@dataclass(frozen=True)
class UnitDimensions:
    """Outer dimensions of a single modular unit."""

    width: float
    height: float
    depth: float

    def along(self, axis: str) -> float:
        """Return the dimension measured along ``width``/``height``/``depth``."""
        return getattr(self, axis)


UNIT_DIMENSIONS = UnitDimensions(width=6.0, height=2.5, depth=2.5)

WALL_FACES: Tuple[Face, ...] = (Face.FRONT, Face.BACK, Face.LEFT, Face.RIGHT)

# Dimension measured along each face's axis
FACE_AXIS: Dict[Face, str] = {
    Face.FRONT: "depth",
    Face.BACK: "depth",
    Face.LEFT: "width",
    Face.RIGHT: "width",
    Face.ROOF: "height",
}

FACE_NORMALS: Dict[Face, Vector3] = {
    Face.FRONT: (0.0, 0.0, 1.0),
    Face.BACK: (0.0, 0.0, -1.0),
    Face.RIGHT: (1.0, 0.0, 0.0),
    Face.LEFT: (-1.0, 0.0, 0.0),
    Face.ROOF: (0.0, 1.0, 0.0),
}


def face_offset(face: Face, dimensions: UnitDimensions = UNIT_DIMENSIONS) -> Vector3:
    """Vector from a unit's center to the center of ``face``."""
    half = dimensions.along(FACE_AXIS[face]) / 2
    return tuple(n * half for n in FACE_NORMALS[face])


FACE_OFFSETS: Dict[Face, Vector3] = {face: face_offset(face) for face in Face}

INITIAL_UNIT_POSITION: Vector3 = (0.0, 0.0, 0.0)


# =============================================================================
# Prices
# =============================================================================

CURRENCY = "RUB"

BASE_UNIT_PRICE = 100000
ROOF_PRICE = 0

PRICE_TABLE: Dict[FaceVariant, int] = {
    FaceVariant.BASE: 0,
    FaceVariant.WINDOW: 15000,
    FaceVariant.DOOR: 20000,
}


@dataclass(frozen=True)
class VariantOption:
    """One entry of the wall variant picker."""

    variant: FaceVariant
    label: str
    preview_image: str

    @property
    def surcharge(self) -> int:
        return PRICE_TABLE[self.variant]


VARIANT_OPTIONS: Tuple[VariantOption, ...] = (
    VariantOption(FaceVariant.BASE, "Base", "/previews/base.jpg"),
    VariantOption(FaceVariant.WINDOW, "With window", "/previews/window.jpg"),
    VariantOption(FaceVariant.DOOR, "With door", "/previews/door.jpg"),
)


# =============================================================================
# Rendering keys
# =============================================================================

# Parts shown regardless of wall variants
BASE_PARTS: Tuple[str, ...] = ("Container_Base", "Floor_V1")

HIGHLIGHT_COLORS: Dict[str, str] = {
    "unit": "#3399ff",
    "face": "#ff4f4f",
}
