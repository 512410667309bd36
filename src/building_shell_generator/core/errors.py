# File: building_shell_generator/core/errors.py

"""
Exception hierarchy for the Building Shell Generator.

Geometry errors are raised by the pure geometry core before any host
mutation. Host lookup errors are raised by the shell command before a
transaction is opened. Host operation errors wrap failures raised by the
host while the transaction is open; the transaction is rolled back.
"""

from typing import Any, Dict, Optional


class ShellGeneratorError(Exception):
    """
    Base class for all errors raised by this package.

    Attributes:
        code: Stable machine-readable error code
        extra: Optional additional error context
    """
    code = "shell_generator_error"

    def __init__(self, detail: str, extra: Optional[Dict[str, Any]] = None):
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"detail": self.detail, "code": self.code}
        if self.extra:
            data["extra"] = self.extra
        return data


# =============================================================================
# Geometry
# =============================================================================

class GeometryError(ShellGeneratorError):
    """Invalid input to the geometry core."""
    code = "geometry_error"


class InvalidDimension(GeometryError):
    """A length, width or offset is non-positive or not finite."""
    code = "invalid_dimension"

    def __init__(self, name: str, value: Any, extra: Optional[Dict[str, Any]] = None):
        self.name = name
        self.value = value
        super().__init__(f"Invalid dimension '{name}': {value!r}", {"name": name, **(extra or {})})


class DegenerateProfile(GeometryError):
    """The eave line has zero length, so no gable can be built over it."""
    code = "degenerate_profile"


# =============================================================================
# Host
# =============================================================================

class HostLookupError(ShellGeneratorError):
    """A named host element could not be resolved."""
    code = "host_lookup_error"


class LevelNotFound(HostLookupError):
    """No level with the requested name exists in the document."""
    code = "level_not_found"

    def __init__(self, level_name: str):
        self.level_name = level_name
        super().__init__(f"Level '{level_name}' not found", {"level_name": level_name})


class FamilyTypeNotFound(HostLookupError):
    """No family type matches the requested category, type and family names."""
    code = "family_type_not_found"

    def __init__(self, category: str, type_name: str, family_name: str):
        self.category = category
        self.type_name = type_name
        self.family_name = family_name
        super().__init__(
            f"Family type '{type_name}' of family '{family_name}' "
            f"not found in category {category}",
            {"category": category, "type_name": type_name, "family_name": family_name},
        )


class HostOperationError(ShellGeneratorError):
    """A host creation call failed while the transaction was open."""
    code = "host_operation_error"

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Host operation '{operation}' failed: {cause}", {"operation": operation})
