# File: src/container_configurator/assembly/pricing.py

"""Price computation over the whole assembly.

total = sum over units of (BASE_UNIT_PRICE + surcharge of each of the four
walls). The roof never contributes. An empty assembly costs 0.
"""

from typing import Any, Dict, Iterable

from src.container_configurator.config.catalog import (
    BASE_UNIT_PRICE,
    PRICE_TABLE,
    WALL_FACES,
)

from .assembly_types import Assignments, Unit
from .variants import resolve_variant


def unit_price(unit_id: int, assignments: Assignments) -> int:
    """Base price plus wall surcharges for a single unit."""
    return BASE_UNIT_PRICE + sum(
        PRICE_TABLE[resolve_variant(assignments, unit_id, face)] for face in WALL_FACES
    )


def total_price(units: Iterable[Unit], assignments: Assignments) -> int:
    """Price of the whole assembly."""
    return sum(unit_price(unit.id, assignments) for unit in units)


def price_breakdown(units: Iterable[Unit], assignments: Assignments) -> Dict[str, Any]:
    """Per-unit price lines plus the total.

    Returns:
        Dict with ``units`` (id, base, per-wall surcharges, subtotal) and
        ``total``.
    """
    lines = []
    for unit in units:
        walls = {
            face.value: PRICE_TABLE[resolve_variant(assignments, unit.id, face)]
            for face in WALL_FACES
        }
        lines.append({
            "unit_id": unit.id,
            "base": BASE_UNIT_PRICE,
            "walls": walls,
            "subtotal": BASE_UNIT_PRICE + sum(walls.values()),
        })

    return {
        "units": lines,
        "total": sum(line["subtotal"] for line in lines),
    }


def price_in_thousands(amount: int) -> int:
    """Whole thousands, as shown under the total (115000 -> 115)."""
    return amount // 1000
