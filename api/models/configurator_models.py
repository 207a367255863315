from pydantic import BaseModel, Field, field_validator
from typing import List, Dict, Any, Optional

from src.container_configurator.assembly import Face, FaceVariant

class PointerHitInput(BaseModel):
    """A pointer hit reported by the rendering adapter."""
    unit_id: int = Field(description="Unit the pointer landed on")
    face: Optional[Face] = Field(
        default=None,
        description="Face that was hit, omitted for non-face parts (chassis, floor)"
    )

class SelectUnitInput(BaseModel):
    """Select a unit as a whole."""
    unit_id: int = Field(description="Unit to select")

class SelectFaceInput(BaseModel):
    """Select a face of an already selected unit."""
    unit_id: int = Field(description="Unit owning the face")
    face: Face = Field(description="Face to select")

class WallVariantInput(BaseModel):
    """Change the variant of the selected wall."""
    variant: FaceVariant = Field(description="Base, Window or Door")
    face: Optional[Face] = Field(
        default=None,
        description="Face being changed, defaults to the selected face"
    )

    @field_validator('variant', mode='before')
    @classmethod
    def parse_variant(cls, v: Any) -> FaceVariant:
        """Accept enum values, names and the legacy V1 alias."""
        return FaceVariant.parse(v)

class UnitModel(BaseModel):
    """A placed unit."""
    id: int
    position: List[float] = Field(min_length=3, max_length=3)

class SelectionModel(BaseModel):
    """Current selection."""
    kind: str = Field(description="none, unit or unit_and_face")
    unit_id: Optional[int] = None
    face: Optional[str] = None

class SelectionStatusModel(BaseModel):
    """Selection plus which panel actions are enabled."""
    selection: SelectionModel
    can_add_unit: bool
    can_remove_unit: bool
    variant_picker_enabled: bool
    roof_selected: bool
    current_variant: Optional[str] = None

class SessionState(BaseModel):
    """Full state of a configurator session."""
    session_id: str = Field(description="Unique session identifier")
    units: List[UnitModel]
    walls: Dict[str, Dict[str, str]] = Field(
        default={},
        description="Non-default walls per unit id"
    )
    status: SelectionStatusModel
    total_price: int

class AddUnitResult(BaseModel):
    """Outcome of an add-unit command."""
    unit: UnitModel
    total_price: int

class RemoveUnitResult(BaseModel):
    """Outcome of a remove-unit command."""
    removed_unit_id: Optional[int] = Field(
        default=None,
        description="Removed unit, null when nothing was selected"
    )
    total_price: int

class PriceModel(BaseModel):
    """Total price with per-unit breakdown."""
    total: int
    thousands: int
    currency: str
    units: List[Dict[str, Any]]

class RenderUnitModel(BaseModel):
    """Per-unit data for the rendering adapter."""
    unit_id: int
    position: List[float]
    faces: Dict[str, str]
    visible_parts: List[str]
    highlights: Dict[str, str]
