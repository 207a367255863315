# File: tests/assembly/test_variants.py

"""Tests for wall variant resolution.

Tests cover:
- Default Base resolution for missing entries
- Immutable assignment updates
- Roof refusal for Window/Door
- Part key table and per-unit visible parts
- Non-default wall listing
- Variant parsing (legacy V1 alias)
"""

import pytest

from src.container_configurator.assembly import (
    PART_KEYS,
    Face,
    FaceVariant,
    InvalidFaceForVariantError,
    active_parts,
    assign_variant,
    part_key,
    resolve_variant,
    visible_parts,
    wall_modifications,
)
from src.container_configurator.assembly.variants import drop_unit


# =============================================================================
# Resolution
# =============================================================================


class TestResolveVariant:
    """Tests for resolve_variant."""

    @pytest.mark.parametrize("face", list(Face))
    def test_missing_entry_is_base(self, face):
        assert resolve_variant({}, 1, face) is FaceVariant.BASE

    def test_assigned_entry(self):
        assignments = {(1, Face.LEFT): FaceVariant.DOOR}
        assert resolve_variant(assignments, 1, Face.LEFT) is FaceVariant.DOOR
        assert resolve_variant(assignments, 2, Face.LEFT) is FaceVariant.BASE
        assert resolve_variant(assignments, 1, Face.RIGHT) is FaceVariant.BASE


class TestAssignVariant:
    """Tests for assign_variant."""

    def test_returns_new_mapping(self):
        original = {(1, Face.FRONT): FaceVariant.WINDOW}
        updated = assign_variant(original, 1, Face.BACK, FaceVariant.DOOR)

        assert updated == {
            (1, Face.FRONT): FaceVariant.WINDOW,
            (1, Face.BACK): FaceVariant.DOOR,
        }
        assert original == {(1, Face.FRONT): FaceVariant.WINDOW}

    def test_overwrite(self):
        updated = assign_variant({(1, Face.FRONT): FaceVariant.WINDOW}, 1, Face.FRONT, FaceVariant.BASE)
        assert updated[(1, Face.FRONT)] is FaceVariant.BASE

    @pytest.mark.parametrize("variant", [FaceVariant.WINDOW, FaceVariant.DOOR])
    @pytest.mark.parametrize("assignments", [
        {},
        {(1, Face.FRONT): FaceVariant.WINDOW},
        {(1, Face.ROOF): FaceVariant.BASE, (2, Face.LEFT): FaceVariant.DOOR},
    ])
    @pytest.mark.parametrize("unit_id", [1, 2, 99])
    def test_roof_refused(self, assignments, unit_id, variant):
        before = dict(assignments)
        with pytest.raises(InvalidFaceForVariantError) as exc_info:
            assign_variant(assignments, unit_id, Face.ROOF, variant)
        assert exc_info.value.code == "invalid_face_for_variant"
        assert assignments == before

    def test_roof_base_allowed(self):
        updated = assign_variant({}, 1, Face.ROOF, FaceVariant.BASE)
        assert updated == {(1, Face.ROOF): FaceVariant.BASE}

    def test_drop_unit(self):
        assignments = {
            (1, Face.FRONT): FaceVariant.WINDOW,
            (2, Face.FRONT): FaceVariant.DOOR,
        }
        assert drop_unit(assignments, 1) == {(2, Face.FRONT): FaceVariant.DOOR}
        assert len(assignments) == 2


# =============================================================================
# Part keys
# =============================================================================


class TestPartKeys:
    """Tests for the (face, variant) -> part key table."""

    def test_wall_keys(self):
        assert part_key(Face.FRONT, FaceVariant.BASE) == "Wall_Front_V1"
        assert part_key(Face.BACK, FaceVariant.WINDOW) == "Wall_Back_Window"
        assert part_key(Face.LEFT, FaceVariant.DOOR) == "Wall_Left_Door"
        assert part_key(Face.RIGHT, FaceVariant.BASE) == "Wall_Right_V1"

    def test_roof_key(self):
        assert part_key(Face.ROOF, FaceVariant.BASE) == "Roof_V1"

    def test_roof_window_has_no_key(self):
        with pytest.raises(InvalidFaceForVariantError):
            part_key(Face.ROOF, FaceVariant.WINDOW)

    def test_table_size(self):
        # 4 walls x 3 variants + roof base
        assert len(PART_KEYS) == 13

    def test_active_parts(self):
        assignments = {(1, Face.FRONT): FaceVariant.WINDOW}
        parts = active_parts(assignments, 1)
        assert parts == {
            Face.FRONT: "Wall_Front_Window",
            Face.BACK: "Wall_Back_V1",
            Face.LEFT: "Wall_Left_V1",
            Face.RIGHT: "Wall_Right_V1",
            Face.ROOF: "Roof_V1",
        }

    def test_visible_parts(self):
        parts = visible_parts({(1, Face.LEFT): FaceVariant.DOOR}, 1)
        assert parts[:2] == ["Container_Base", "Floor_V1"]
        assert "Wall_Left_Door" in parts
        assert "Wall_Left_V1" not in parts
        assert "Roof_V1" in parts
        assert len(parts) == 7


class TestWallModifications:
    """Tests for wall_modifications."""

    def test_lists_only_non_base_walls_in_order(self):
        assignments = {
            (1, Face.RIGHT): FaceVariant.DOOR,
            (1, Face.FRONT): FaceVariant.WINDOW,
            (1, Face.BACK): FaceVariant.BASE,
            (2, Face.LEFT): FaceVariant.DOOR,
        }
        assert wall_modifications(assignments, 1) == [
            (Face.FRONT, FaceVariant.WINDOW),
            (Face.RIGHT, FaceVariant.DOOR),
        ]

    def test_empty(self):
        assert wall_modifications({}, 1) == []


class TestFaceVariantParse:
    """Tests for FaceVariant.parse."""

    @pytest.mark.parametrize("text, expected", [
        ("Base", FaceVariant.BASE),
        ("V1", FaceVariant.BASE),
        ("window", FaceVariant.WINDOW),
        ("DOOR", FaceVariant.DOOR),
        (FaceVariant.DOOR, FaceVariant.DOOR),
    ])
    def test_parse(self, text, expected):
        assert FaceVariant.parse(text) is expected

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            FaceVariant.parse("Balcony")
