from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from typing import Dict, List, Any

from api.models.configurator_models import (
    AddUnitResult,
    PointerHitInput,
    PriceModel,
    RemoveUnitResult,
    RenderUnitModel,
    SelectFaceInput,
    SelectUnitInput,
    SessionState,
    WallVariantInput,
)
from api.utils.errors import ResourceNotFoundError, handle_exception
from api.utils.serialization import (
    serialize_price,
    serialize_session_state,
    serialize_unit,
)
from api.utils.sessions import SessionStore, get_store
from src.container_configurator.assembly import ConfiguratorSession

# Set up logging
import logging
logger = logging.getLogger("container_configurator.api")

router = APIRouter()

# Handlers are async and never await while touching a session, so commands
# for a session are processed one at a time on the event loop.

def _get_session(store: SessionStore, session_id: str) -> ConfiguratorSession:
    session = store.get(session_id)
    if session is None:
        logger.warning(f"Session not found: {session_id}")
        raise ResourceNotFoundError("session", session_id)
    return session

@router.post("", response_model=SessionState, status_code=status.HTTP_201_CREATED)
async def create_session(store: SessionStore = Depends(get_store)):
    """
    Start a new configurator session.

    The session begins with a single unit at the origin and nothing selected.
    """
    session_id = store.create()
    return serialize_session_state(session_id, store.get(session_id))

@router.get("", response_model=List[str])
async def list_sessions(store: SessionStore = Depends(get_store)):
    """List ids of the sessions currently held in memory."""
    return store.list_ids()

@router.get("/{session_id}", response_model=SessionState)
async def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    """Get units, walls, selection status and total price of a session."""
    try:
        session = _get_session(store, session_id)
        return serialize_session_state(session_id, session)
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.delete("/{session_id}", response_model=Dict[str, str])
async def delete_session(session_id: str, store: SessionStore = Depends(get_store)):
    """Discard a session."""
    try:
        if not store.delete(session_id):
            raise ResourceNotFoundError("session", session_id)
        return {"status": "deleted", "session_id": session_id}
    except Exception as e:
        raise handle_exception(e, "session", session_id)

# =============================================================================
# Selection
# =============================================================================

@router.post("/{session_id}/pointer", response_model=SessionState)
async def pointer_hit(session_id: str, hit: PointerHitInput, store: SessionStore = Depends(get_store)):
    """
    Report a pointer hit on a unit.

    The first hit on a unit selects the whole unit; a further hit on a face of
    the selected unit selects that face.
    """
    try:
        session = _get_session(store, session_id)
        session.pointer_hit(hit.unit_id, hit.face)
        return serialize_session_state(session_id, session)
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.post("/{session_id}/background-click", response_model=SessionState)
async def background_click(session_id: str, store: SessionStore = Depends(get_store)):
    """Report a click that did not hit any unit. Clears the selection."""
    try:
        session = _get_session(store, session_id)
        session.background_click()
        return serialize_session_state(session_id, session)
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.post("/{session_id}/select-unit", response_model=SessionState)
async def select_unit(session_id: str, body: SelectUnitInput, store: SessionStore = Depends(get_store)):
    """Select a unit as a whole."""
    try:
        session = _get_session(store, session_id)
        session.select_unit(body.unit_id)
        return serialize_session_state(session_id, session)
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.post("/{session_id}/select-face", response_model=SessionState)
async def select_face(session_id: str, body: SelectFaceInput, store: SessionStore = Depends(get_store)):
    """Select a face. Only takes effect once its unit is selected."""
    try:
        session = _get_session(store, session_id)
        session.select_face(body.unit_id, body.face)
        return serialize_session_state(session_id, session)
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.post("/{session_id}/deselect", response_model=SessionState)
async def deselect_all(session_id: str, store: SessionStore = Depends(get_store)):
    """Clear the selection."""
    try:
        session = _get_session(store, session_id)
        session.deselect_all()
        return serialize_session_state(session_id, session)
    except Exception as e:
        raise handle_exception(e, "session", session_id)

# =============================================================================
# Assembly commands
# =============================================================================

@router.post("/{session_id}/units", response_model=AddUnitResult, status_code=status.HTTP_201_CREATED)
async def add_unit(session_id: str, store: SessionStore = Depends(get_store)):
    """
    Attach a new unit to the selected wall or roof.

    Returns 409 when no face is selected.
    """
    try:
        session = _get_session(store, session_id)
        unit_id = session.add_unit()
        unit = session.registry.get_unit(unit_id)
        return {"unit": serialize_unit(unit), "total_price": session.get_total_price()}
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.delete("/{session_id}/units", response_model=RemoveUnitResult)
async def remove_unit(session_id: str, store: SessionStore = Depends(get_store)):
    """Remove the selected unit. Does nothing when nothing is selected."""
    try:
        session = _get_session(store, session_id)
        removed = session.remove_unit()
        return {"removed_unit_id": removed, "total_price": session.get_total_price()}
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.put("/{session_id}/walls", response_model=SessionState)
async def set_wall_variant(session_id: str, body: WallVariantInput, store: SessionStore = Depends(get_store)):
    """
    Change the variant of the selected wall.

    Returns 409 when no matching face is selected and 400 for a window or door
    on the roof.
    """
    try:
        session = _get_session(store, session_id)
        session.set_wall_variant(body.variant, body.face)
        return serialize_session_state(session_id, session)
    except Exception as e:
        raise handle_exception(e, "session", session_id)

# =============================================================================
# Read models
# =============================================================================

@router.get("/{session_id}/price", response_model=PriceModel)
async def get_price(session_id: str, store: SessionStore = Depends(get_store)):
    """Total price with per-unit breakdown."""
    try:
        return serialize_price(_get_session(store, session_id))
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.get("/{session_id}/render", response_model=List[RenderUnitModel])
async def get_render_state(session_id: str, store: SessionStore = Depends(get_store)):
    """Per-unit part keys and highlight colours for the renderer."""
    try:
        return _get_session(store, session_id).render_state()
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.get("/{session_id}/report", response_model=Dict[str, Any])
async def get_report(session_id: str, store: SessionStore = Depends(get_store)):
    """Assembly scheme as JSON."""
    try:
        return _get_session(store, session_id).report().to_dict()
    except Exception as e:
        raise handle_exception(e, "session", session_id)

@router.get("/{session_id}/report.txt", response_class=PlainTextResponse)
async def get_report_text(session_id: str, store: SessionStore = Depends(get_store)):
    """Assembly scheme as a downloadable text file."""
    try:
        report = _get_session(store, session_id).report()
        return PlainTextResponse(
            report.to_text(),
            headers={"Content-Disposition": f'attachment; filename="{report.suggested_filename()}"'}
        )
    except Exception as e:
        raise handle_exception(e, "session", session_id)
