from typing import Dict, Any

from src.container_configurator.assembly import ConfiguratorSession, Unit, wall_modifications
from src.container_configurator.config import CURRENCY
from src.container_configurator.assembly.pricing import price_in_thousands

def serialize_unit(unit: Unit) -> Dict[str, Any]:
    """
    Serialize a Unit to a dictionary.
    """
    return {
        "id": unit.id,
        "position": list(unit.position)
    }

def serialize_walls(session: ConfiguratorSession) -> Dict[str, Dict[str, str]]:
    """
    Non-default walls per unit, keyed by unit id as a string.
    Units with only Base walls are omitted.
    """
    assignments = session.registry.assignments
    walls = {}
    for unit in session.units:
        modifications = wall_modifications(assignments, unit.id)
        if modifications:
            walls[str(unit.id)] = {face.value: variant.value for face, variant in modifications}
    return walls

def serialize_session_state(session_id: str, session: ConfiguratorSession) -> Dict[str, Any]:
    """
    Serialize the full state of a session for the SessionState response model.
    """
    return {
        "session_id": session_id,
        "units": [serialize_unit(unit) for unit in session.units],
        "walls": serialize_walls(session),
        "status": session.selection_status(),
        "total_price": session.get_total_price()
    }

def serialize_price(session: ConfiguratorSession) -> Dict[str, Any]:
    """
    Serialize the price with its per-unit breakdown.
    """
    breakdown = session.get_price_breakdown()
    return {
        "total": breakdown["total"],
        "thousands": price_in_thousands(breakdown["total"]),
        "currency": CURRENCY,
        "units": breakdown["units"]
    }
