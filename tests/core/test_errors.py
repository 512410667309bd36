# File: tests/core/test_errors.py

"""Tests for the error hierarchy and its serialized form."""

import pytest

from building_shell_generator.core import errors
from building_shell_generator.core.errors import (
    DegenerateProfile,
    FamilyTypeNotFound,
    GeometryError,
    HostLookupError,
    HostOperationError,
    InvalidDimension,
    LevelNotFound,
    ShellGeneratorError,
)


class TestErrorHierarchy:
    """Tests for error classes, codes and payloads."""

    @pytest.mark.parametrize("error,parent", [
        (InvalidDimension("length", 0), GeometryError),
        (DegenerateProfile("eave line has zero length"), GeometryError),
        (LevelNotFound("Level 2"), HostLookupError),
        (FamilyTypeNotFound("OST_Doors", "0915 x 2134mm", "M_Single-Flush"), HostLookupError),
        (HostOperationError("create_wall[0]", RuntimeError("boom")), ShellGeneratorError),
    ])
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, ShellGeneratorError)

    def test_invalid_dimension_payload(self):
        error = InvalidDimension("width", -1.0)

        assert error.name == "width"
        assert error.value == -1.0
        assert error.to_dict()["code"] == "invalid_dimension"
        assert error.to_dict()["extra"] == {"name": "width"}

    def test_level_not_found_payload(self):
        data = LevelNotFound("Level 2").to_dict()
        assert data["code"] == "level_not_found"
        assert data["extra"] == {"level_name": "Level 2"}

    def test_family_type_not_found_message(self):
        error = FamilyTypeNotFound("OST_Roofs", "Generic - 400mm", "Basic Roof")
        assert "Generic - 400mm" in str(error)
        assert error.category == "OST_Roofs"

    def test_host_operation_keeps_cause(self):
        cause = RuntimeError("host refused")
        error = HostOperationError("create_extrusion_roof", cause)

        assert error.cause is cause
        assert "host refused" in error.detail

    def test_code_is_class_attribute(self):
        assert errors.DegenerateProfile.code == "degenerate_profile"
