# File: tests/core/test_shell_plan.py

"""Tests for the pure shell planner and its JSON serialization."""

import dataclasses
import json

import pytest

from building_shell_generator.config.shell import ShellParameters
from building_shell_generator.core.errors import InvalidDimension
from building_shell_generator.core.json_schemas import (
    deserialize_shell_plan,
    serialize_shell_plan,
    shell_plan_to_dict,
    validate_shell_plan,
)
from building_shell_generator.core.shell_plan import build_shell_plan
from building_shell_generator.geometry.openings import OpeningType

MM = 1 / 304.8


@pytest.fixture
def full_plan():
    return build_shell_plan(
        ShellParameters(),
        top_level_elevation=4000 * MM,
        wall_thickness=200 * MM,
        roof_thickness=400 * MM,
    )


# =============================================================================
# build_shell_plan
# =============================================================================


class TestBuildShellPlan:
    """Tests for build_shell_plan."""

    def test_walls_only(self):
        plan = build_shell_plan(ShellParameters.walls_only())

        assert len(plan.outline) == 5
        assert len(plan.walls) == 4
        assert plan.openings == []
        assert plan.roof_profile is None
        assert plan.roof_extrusion is None

    def test_outline_in_internal_units(self, full_plan):
        assert full_plan.outline[2].x == pytest.approx(5000 * MM)
        assert full_plan.outline[2].y == pytest.approx(2500 * MM)

    def test_openings(self, full_plan):
        kinds = [o.opening_type for o in full_plan.openings]
        assert kinds.count(OpeningType.DOOR) == 1
        assert kinds.count(OpeningType.WINDOW) == 3
        for opening in full_plan.openings[1:]:
            assert opening.sill_height == pytest.approx(800 * MM)

    def test_roof_over_east_wall(self, full_plan):
        profile = full_plan.roof_profile
        east = full_plan.walls[1]

        assert profile.corner1.x == pytest.approx(east.start.x)
        assert profile.corner1.y == pytest.approx(east.start.y - 100 * MM)
        assert profile.corner2.y == pytest.approx(east.end.y + 100 * MM)
        assert profile.ridge.z - profile.corner1.z == pytest.approx(1500 * MM)

    def test_roof_rests_on_top_level(self, full_plan):
        profile = full_plan.roof_profile
        assert profile.corner1.z == pytest.approx(4000 * MM + profile.elevation_correction)

    def test_roof_extrusion_spans_length(self, full_plan):
        extrusion = full_plan.roof_extrusion
        assert extrusion.start == pytest.approx(-100 * MM)
        assert extrusion.end == pytest.approx(10100 * MM)

    def test_roof_requires_top_level_elevation(self):
        with pytest.raises(InvalidDimension):
            build_shell_plan(ShellParameters(), top_level_elevation=None)

    @pytest.mark.parametrize("elevation", [float("nan"), float("inf")])
    def test_non_finite_top_level_elevation_raises(self, elevation):
        with pytest.raises(InvalidDimension) as exc_info:
            build_shell_plan(ShellParameters(), top_level_elevation=elevation)
        assert exc_info.value.name == "top_level_elevation"

    @pytest.mark.parametrize("roof_height", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_roof_height_raises(self, roof_height):
        with pytest.raises(InvalidDimension) as exc_info:
            build_shell_plan(ShellParameters(roof_height=roof_height), top_level_elevation=10.0)
        assert exc_info.value.name == "roof_height"

    def test_non_finite_roof_height_ignored_without_roof(self):
        plan = build_shell_plan(ShellParameters(roof_height=float("nan"), include_roof=False))
        assert not plan.has_roof

    def test_plan_is_immutable(self, full_plan):
        with pytest.raises(dataclasses.FrozenInstanceError):
            full_plan.roof_profile = None

    def test_negative_thickness_raises(self):
        with pytest.raises(InvalidDimension):
            build_shell_plan(ShellParameters.walls_only(), wall_thickness=-1.0)

    def test_invalid_footprint_raises(self):
        with pytest.raises(InvalidDimension):
            build_shell_plan(ShellParameters.walls_only(width=0))

    def test_metadata(self, full_plan):
        assert full_plan.metadata["units"] == "millimeters"
        assert full_plan.metadata["length"] == 10000.0
        assert full_plan.metadata["include_roof"] is True

    def test_idempotent(self):
        args = dict(top_level_elevation=13.0, wall_thickness=0.6, roof_thickness=1.3)
        assert build_shell_plan(ShellParameters(), **args) == build_shell_plan(ShellParameters(), **args)


# =============================================================================
# JSON serialization
# =============================================================================


class TestShellPlanJSON:
    """Tests for shell plan serialization and validation."""

    def test_serialized_enums_are_values(self, full_plan):
        data = json.loads(serialize_shell_plan(full_plan))
        assert data["openings"][0]["opening_type"] == "door"
        assert data["outline"][0] == {"x": full_plan.outline[0].x, "y": full_plan.outline[0].y, "z": 0.0}

    def test_deserialize_preserves_plan(self, full_plan):
        restored = deserialize_shell_plan(serialize_shell_plan(full_plan))

        assert restored.outline == full_plan.outline
        assert restored.walls == full_plan.walls
        assert restored.openings == full_plan.openings
        assert restored.roof_profile == full_plan.roof_profile
        assert restored.roof_extrusion == full_plan.roof_extrusion

    def test_walls_only_plan_has_null_roof(self):
        data = shell_plan_to_dict(build_shell_plan(ShellParameters.walls_only()))
        assert data["roof_profile"] is None
        assert deserialize_shell_plan(json.dumps(data)).roof_profile is None

    def test_valid_plan(self, full_plan):
        is_valid, errors = validate_shell_plan(full_plan)
        assert is_valid, errors

    def test_open_outline_invalid(self, full_plan):
        data = shell_plan_to_dict(full_plan)
        data["outline"][4] = {"x": 0.0, "y": 0.0, "z": 0.0}

        is_valid, errors = validate_shell_plan(data)
        assert not is_valid
        assert "outline is not closed" in errors

    def test_missing_fields(self):
        is_valid, errors = validate_shell_plan("{}")
        assert not is_valid
        assert "Missing required field: outline" in errors
        assert "Missing required field: walls" in errors

    def test_invalid_json(self):
        is_valid, errors = validate_shell_plan("{not json")
        assert not is_valid
        assert errors[0].startswith("Invalid JSON")

    def test_roof_parts_must_pair(self, full_plan):
        data = shell_plan_to_dict(full_plan)
        data["roof_extrusion"] = None

        is_valid, errors = validate_shell_plan(data)
        assert not is_valid
