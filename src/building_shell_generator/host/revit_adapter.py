# File: building_shell_generator/host/revit_adapter.py
"""
Revit API implementation of HostAdapter.

This module isolates all Revit-specific API calls behind the HostAdapter
interface, keeping the rest of the package testable without a Revit
environment. All Revit imports are conditional; constructing the adapter
outside Revit raises RuntimeError.

Usage (inside Revit via pyRevit or Rhino.Inside.Revit only):
    from building_shell_generator.host.revit_adapter import RevitHostAdapter
    from building_shell_generator.commands.create_shell import CreateShellCommand

    adapter = RevitHostAdapter(doc)
    result = CreateShellCommand(ShellParameters(), adapter).execute()
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

from building_shell_generator.geometry.primitives import Line3D, Point3D
from building_shell_generator.geometry.roof import GableProfile, RoofExtrusion
from building_shell_generator.host.adapter import HostAdapter, LevelInfo

logger = logging.getLogger(__name__)

# =============================================================================
# Conditional Revit Imports
# =============================================================================

REVIT_AVAILABLE = False
REVIT_ERROR: Optional[str] = None

try:
    import clr
    clr.AddReference("RevitAPI")
    from Autodesk.Revit.DB import (
        BuiltInCategory,
        BuiltInParameter,
        CurveArray,
        ElementTypeGroup,
        FamilySymbol,
        FilteredElementCollector,
        Level,
        Line,
        RoofType,
        Transaction,
        Wall,
        WallType,
        XYZ,
    )
    from Autodesk.Revit.DB.Structure import StructuralType
    REVIT_AVAILABLE = True
except ImportError as e:
    REVIT_ERROR = str(e)
except Exception as e:
    REVIT_ERROR = str(e)


# =============================================================================
# Revit Category Mapping
# =============================================================================

CATEGORY_MAP: Dict[str, Any] = {}
if REVIT_AVAILABLE:
    CATEGORY_MAP = {
        "OST_Doors": BuiltInCategory.OST_Doors,
        "OST_Windows": BuiltInCategory.OST_Windows,
        "OST_Roofs": BuiltInCategory.OST_Roofs,
    }

# Initial height for new walls; replaced by the top level constraint
_PLACEHOLDER_WALL_HEIGHT = 10.0


def _to_xyz(point: Point3D):
    return XYZ(point.x, point.y, point.z)


# =============================================================================
# Adapter
# =============================================================================

class RevitHostAdapter(HostAdapter):
    """HostAdapter backed by a Revit Document.

    Args:
        doc: Revit Document to modify
        view: View that owns the roof reference plane. Defaults to the
              document's active view.

    Raises:
        RuntimeError: If the Revit API cannot be imported
    """

    def __init__(self, doc: Any, view: Optional[Any] = None) -> None:
        if not REVIT_AVAILABLE:
            raise RuntimeError(f"Revit API not available: {REVIT_ERROR}")
        self._doc = doc
        self._view = view

    @property
    def host_name(self) -> str:
        return "Revit"

    # -------------------------------------------------------------------------
    # Lookups and queries
    # -------------------------------------------------------------------------

    def find_level(self, name: str) -> Optional[LevelInfo]:
        for level in FilteredElementCollector(self._doc).OfClass(Level):
            if level.Name == name:
                return LevelInfo(handle=level, name=level.Name, elevation=level.Elevation)
        logger.debug("No level named '%s'", name)
        return None

    def resolve_family_type(
        self, category: str, type_name: str, family_name: str
    ) -> Optional[Any]:
        # Roof types are system family types, not FamilySymbols
        if category == "OST_Roofs":
            collector = FilteredElementCollector(self._doc).OfClass(RoofType)
        else:
            collector = FilteredElementCollector(self._doc).OfClass(FamilySymbol)
            if category in CATEGORY_MAP:
                collector = collector.OfCategory(CATEGORY_MAP[category])

        for element_type in collector:
            if element_type.Name == type_name and element_type.FamilyName == family_name:
                return element_type
        return None

    def default_wall_type(self) -> Any:
        type_id = self._doc.GetDefaultElementTypeId(ElementTypeGroup.WallType)
        return self._doc.GetElement(type_id)

    def type_thickness(self, type_handle: Any) -> float:
        if isinstance(type_handle, WallType):
            return type_handle.Width
        structure = type_handle.GetCompoundStructure()
        if structure is None:
            return 0.0
        return structure.GetWidth()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self, name: str):
        t = Transaction(self._doc, name)
        t.Start()
        try:
            yield t
        except Exception:
            if t.HasStarted():
                t.RollBack()
            logger.warning("Rolled back transaction '%s'", name)
            raise
        t.Commit()

    def create_wall(self, centerline: Line3D, wall_type: Any, base_level: LevelInfo) -> Any:
        curve = Line.CreateBound(_to_xyz(centerline.start), _to_xyz(centerline.end))
        return Wall.Create(
            self._doc,
            curve,
            wall_type.Id,
            base_level.handle.Id,
            _PLACEHOLDER_WALL_HEIGHT,
            0.0,
            False,
            False,
        )

    def set_wall_top_level(self, wall: Any, top_level: LevelInfo) -> None:
        wall.get_Parameter(BuiltInParameter.WALL_HEIGHT_TYPE).Set(top_level.handle.Id)

    def create_hosted_instance(
        self, location: Point3D, type_handle: Any, host_wall: Any, level: LevelInfo
    ) -> Any:
        # FamilySymbol.Activate() must run inside the open transaction
        if not type_handle.IsActive:
            type_handle.Activate()
            self._doc.Regenerate()
        return self._doc.Create.NewFamilyInstance(
            _to_xyz(location),
            type_handle,
            host_wall,
            level.handle,
            StructuralType.NonStructural,
        )

    def set_sill_height(self, instance: Any, sill_height: float) -> None:
        instance.get_Parameter(BuiltInParameter.INSTANCE_SILL_HEIGHT_PARAM).Set(sill_height)

    def create_extrusion_roof(
        self,
        profile: GableProfile,
        extrusion: RoofExtrusion,
        level: LevelInfo,
        roof_type: Any,
    ) -> Any:
        curves = CurveArray()
        for edge in profile.profile_lines():
            curves.Append(Line.CreateBound(_to_xyz(edge.start), _to_xyz(edge.end)))

        # Plane normal is cross(free - bubble, Z); order the ends so it
        # matches the extrusion direction
        bubble, free = profile.corner1, profile.corner2
        nx = free.y - bubble.y
        ny = -(free.x - bubble.x)
        dx, dy, _ = extrusion.direction
        if nx * dx + ny * dy < 0:
            bubble, free = free, bubble

        view = self._view or self._doc.ActiveView
        plane = self._doc.Create.NewReferencePlane(
            _to_xyz(bubble), _to_xyz(free), XYZ(0, 0, 1), view
        )
        return self._doc.Create.NewExtrusionRoof(
            curves, plane, level.handle, roof_type, extrusion.start, extrusion.end
        )
