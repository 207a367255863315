# File: src/container_configurator/assembly/__init__.py

"""Container assembly core.

Selection state machine, adjacency placement, wall variant resolution,
pricing and the registry that owns placed units. Rendering, asset loading
and file encoding live outside this package.

Usage:
    from src.container_configurator.assembly import ConfiguratorSession, Face

    session = ConfiguratorSession()
    session.select_unit(1)
    session.select_face(1, Face.RIGHT)
    new_id = session.add_unit()
    price = session.get_total_price()
"""

from .assembly_types import (
    Assignments,
    BackgroundClick,
    Face,
    FaceVariant,
    PointerHit,
    Selection,
    SelectionKind,
    Unit,
    UnitRemoved,
)

from .errors import (
    ConfiguratorError,
    InvalidFaceForVariantError,
    NoFaceSelectedError,
    UnknownUnitError,
)

from .selection import SelectionController
from .placement import dimension_along, place_adjacent

from .variants import (
    PART_KEYS,
    active_parts,
    assign_variant,
    part_key,
    resolve_variant,
    visible_parts,
    wall_modifications,
)

from .pricing import price_breakdown, price_in_thousands, total_price, unit_price
from .registry import AssemblyRegistry
from .report import AssemblyReport, UnitEntry, build_report
from .session import ConfiguratorSession

__all__ = [
    # Types
    "Assignments",
    "BackgroundClick",
    "Face",
    "FaceVariant",
    "PointerHit",
    "Selection",
    "SelectionKind",
    "Unit",
    "UnitRemoved",
    # Errors
    "ConfiguratorError",
    "InvalidFaceForVariantError",
    "NoFaceSelectedError",
    "UnknownUnitError",
    # Selection / placement
    "SelectionController",
    "dimension_along",
    "place_adjacent",
    # Variants
    "PART_KEYS",
    "active_parts",
    "assign_variant",
    "part_key",
    "resolve_variant",
    "visible_parts",
    "wall_modifications",
    # Pricing
    "price_breakdown",
    "price_in_thousands",
    "total_price",
    "unit_price",
    # Registry / session
    "AssemblyRegistry",
    "ConfiguratorSession",
    # Export
    "AssemblyReport",
    "UnitEntry",
    "build_report",
]
