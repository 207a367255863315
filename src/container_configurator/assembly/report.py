# File: src/container_configurator/assembly/report.py

"""Assembly scheme export.

Builds the logical content of the downloadable assembly scheme: unit count,
total price, generation timestamp and one entry per unit with its position
and non-default walls. ``to_text`` renders the human-readable scheme,
``to_dict`` the JSON form.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from src.container_configurator.config.catalog import CURRENCY, Face, FaceVariant

from .assembly_types import Assignments, Unit
from .pricing import total_price
from .variants import wall_modifications


def _format_amount(amount: int) -> str:
    # Space grouping: 115000 -> "115 000"
    return f"{amount:,}".replace(",", " ")


def _format_coord(value: float) -> str:
    return f"{value:g}"


@dataclass
class UnitEntry:
    """One unit in the scheme.

    Attributes:
        id: Unit id.
        position: Center XYZ in metres.
        modifications: Non-Base walls in wall order.
    """

    id: int
    position: Tuple[float, float, float]
    modifications: List[Tuple[Face, FaceVariant]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "position": list(self.position),
            "walls": {face.value: variant.value for face, variant in self.modifications},
        }


@dataclass
class AssemblyReport:
    """Logical content of an exported assembly scheme."""

    unit_count: int
    total_price: int
    generated_at: datetime
    units: List[UnitEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_units": self.unit_count,
            "total_price": self.total_price,
            "currency": CURRENCY,
            "generated_at": self.generated_at.isoformat(),
            "units": [entry.to_dict() for entry in self.units],
        }

    def to_text(self) -> str:
        lines = [
            "Container assembly scheme",
            "",
            f"Total units: {self.unit_count}",
            f"Total price: {_format_amount(self.total_price)} {CURRENCY}",
            f"Generated: {self.generated_at.strftime('%d.%m.%Y, %H:%M:%S')}",
            "",
            "Assembly details:",
        ]
        for entry in self.units:
            position = ", ".join(_format_coord(v) for v in entry.position)
            line = f"Unit {entry.id}: position [{position}]"
            if entry.modifications:
                walls = ", ".join(f"{face.value}={variant.value}" for face, variant in entry.modifications)
                line += f"; walls: {walls}"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def suggested_filename(self) -> str:
        return f"assembly-scheme-{int(self.generated_at.timestamp() * 1000)}.txt"


def build_report(
    units: Iterable[Unit],
    assignments: Assignments,
    generated_at: Optional[datetime] = None,
) -> AssemblyReport:
    """Snapshot the assembly into an AssemblyReport.

    Args:
        units: Units in the assembly.
        assignments: Current variant assignments.
        generated_at: Timestamp to stamp the report with, defaults to now.
    """
    units = list(units)
    return AssemblyReport(
        unit_count=len(units),
        total_price=total_price(units, assignments),
        generated_at=generated_at or datetime.now(),
        units=[
            UnitEntry(unit.id, unit.position, wall_modifications(assignments, unit.id))
            for unit in units
        ],
    )
