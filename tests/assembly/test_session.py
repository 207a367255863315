# File: tests/assembly/test_session.py

"""Tests for the configurator session command surface.

Tests cover:
- Two-step selection through select_unit/select_face
- add_unit / remove_unit / set_wall_variant against the current selection
- Unknown unit handling
- Selection status and render state read models
- End-to-end pricing scenario
"""

import pytest

from src.container_configurator.assembly import (
    ConfiguratorSession,
    Face,
    FaceVariant,
    InvalidFaceForVariantError,
    NoFaceSelectedError,
    Selection,
    UnknownUnitError,
)
from src.container_configurator.config import BASE_UNIT_PRICE, HIGHLIGHT_COLORS


def _select_face(session, unit_id, face):
    session.select_unit(unit_id)
    session.select_face(unit_id, face)


class TestSelectionCommands:
    """Selection through the command surface."""

    def test_select_face_first_selects_unit(self, session):
        assert session.select_face(1, Face.FRONT) == Selection.unit_only(1)
        assert session.select_face(1, Face.FRONT) == Selection.unit_and_face(1, Face.FRONT)

    def test_select_unknown_unit(self, session):
        with pytest.raises(UnknownUnitError):
            session.select_unit(99)
        with pytest.raises(UnknownUnitError):
            session.select_face(99, Face.ROOF)
        with pytest.raises(UnknownUnitError):
            session.pointer_hit(99, Face.LEFT)
        assert session.current_selection.is_none

    def test_deselect_all(self, session):
        _select_face(session, 1, Face.LEFT)
        assert session.deselect_all().is_none
        # Idempotent
        assert session.deselect_all().is_none

    def test_background_click(self, session):
        session.select_unit(1)
        assert session.background_click().is_none


class TestAssemblyCommands:
    """add_unit, remove_unit, set_wall_variant."""

    def test_add_unit_without_face(self, session):
        with pytest.raises(NoFaceSelectedError):
            session.add_unit()
        session.select_unit(1)
        with pytest.raises(NoFaceSelectedError):
            session.add_unit()
        assert len(session.units) == 1

    def test_add_unit_on_selected_face(self, session):
        _select_face(session, 1, Face.RIGHT)
        new_id = session.add_unit()
        assert session.registry.get_unit(new_id).position == pytest.approx((6.0, 0.0, 0.0))

    def test_remove_selected_unit(self, session):
        _select_face(session, 1, Face.ROOF)
        top = session.add_unit()
        _select_face(session, top, Face.FRONT)

        assert session.remove_unit() == top
        assert [unit.id for unit in session.units] == [1]
        assert session.current_selection.is_none

    def test_remove_with_nothing_selected(self, session):
        assert session.remove_unit() is None
        assert len(session.units) == 1

    def test_set_wall_variant_uses_selected_face(self, session):
        _select_face(session, 1, Face.BACK)
        session.set_wall_variant(FaceVariant.WINDOW)
        assert session.registry.assignments == {(1, Face.BACK): FaceVariant.WINDOW}

    def test_set_wall_variant_face_mismatch(self, session):
        _select_face(session, 1, Face.BACK)
        with pytest.raises(NoFaceSelectedError):
            session.set_wall_variant(FaceVariant.WINDOW, Face.FRONT)

    def test_set_wall_variant_without_face(self, session):
        session.select_unit(1)
        with pytest.raises(NoFaceSelectedError):
            session.set_wall_variant(FaceVariant.DOOR)

    def test_roof_variant_refused(self, session):
        _select_face(session, 1, Face.ROOF)
        with pytest.raises(InvalidFaceForVariantError):
            session.set_wall_variant(FaceVariant.DOOR)
        assert session.registry.assignments == {}

    def test_pricing_scenario(self, session):
        _select_face(session, 1, Face.FRONT)
        session.set_wall_variant(FaceVariant.WINDOW)
        _select_face(session, 1, Face.RIGHT)
        second = session.add_unit()
        _select_face(session, second, Face.LEFT)
        session.set_wall_variant(FaceVariant.DOOR)

        assert session.get_total_price() == 2 * BASE_UNIT_PRICE + 15000 + 20000
        assert session.get_price_breakdown()["total"] == session.get_total_price()


class TestSelectionStatus:
    """Tests for selection_status."""

    def test_nothing_selected(self, session):
        status = session.selection_status()
        assert status["selection"]["kind"] == "none"
        assert status["can_add_unit"] is False
        assert status["can_remove_unit"] is False
        assert status["variant_picker_enabled"] is False
        assert status["current_variant"] is None

    def test_unit_selected(self, session):
        session.select_unit(1)
        status = session.selection_status()
        assert status["can_add_unit"] is False
        assert status["can_remove_unit"] is True

    def test_wall_selected(self, session):
        _select_face(session, 1, Face.LEFT)
        session.set_wall_variant(FaceVariant.DOOR)
        status = session.selection_status()
        assert status["can_add_unit"] is True
        assert status["variant_picker_enabled"] is True
        assert status["roof_selected"] is False
        assert status["current_variant"] == "Door"

    def test_roof_selected(self, session):
        _select_face(session, 1, Face.ROOF)
        status = session.selection_status()
        assert status["can_add_unit"] is True
        assert status["variant_picker_enabled"] is False
        assert status["roof_selected"] is True
        assert status["current_variant"] is None


class TestRenderState:
    """Tests for render_state."""

    def test_unselected_unit_has_no_highlights(self, session):
        state = session.render_state()
        assert len(state) == 1
        assert state[0]["unit_id"] == 1
        assert state[0]["highlights"] == {}
        assert state[0]["faces"]["front"] == "Wall_Front_V1"

    def test_unit_highlight(self, session):
        session.select_unit(1)
        highlights = session.render_state()[0]["highlights"]
        assert set(highlights) == set(session.render_state()[0]["visible_parts"])
        assert set(highlights.values()) == {HIGHLIGHT_COLORS["unit"]}

    def test_face_highlight_follows_variant(self, session):
        _select_face(session, 1, Face.FRONT)
        session.set_wall_variant(FaceVariant.WINDOW)
        unit_state = session.render_state()[0]
        assert unit_state["faces"]["front"] == "Wall_Front_Window"
        assert unit_state["highlights"]["Wall_Front_Window"] == HIGHLIGHT_COLORS["face"]
        assert unit_state["highlights"]["Wall_Back_V1"] == HIGHLIGHT_COLORS["unit"]

    def test_only_selected_unit_highlighted(self, session):
        _select_face(session, 1, Face.ROOF)
        session.add_unit()
        first, second = session.render_state()
        assert first["highlights"]["Roof_V1"] == HIGHLIGHT_COLORS["face"]
        assert second["highlights"] == {}
        assert second["position"] == pytest.approx([0.0, 2.5, 0.0])


def test_unseeded_session_prices_zero():
    session = ConfiguratorSession(seed_initial_unit=False)
    assert session.units == []
    assert session.get_total_price() == 0
