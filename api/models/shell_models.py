# File: api/models/shell_models.py
from pydantic import BaseModel, Field, model_validator
from typing import List, Dict, Any, Optional, Tuple, Literal


class Point3D(BaseModel):
    """3D point coordinates in internal units (feet)."""
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")
    z: float = Field(description="Z coordinate")


class LineModel(BaseModel):
    """Wall centerline."""
    start: Point3D
    end: Point3D


class OpeningModel(BaseModel):
    """Door or window placement on a wall centerline."""
    opening_type: Literal["door", "window"] = Field(
        description="Type of opening (door or window)"
    )
    wall_index: int = Field(description="Index of the host wall in outline order", ge=0)
    location: Point3D
    sill_height: Optional[float] = Field(
        default=None,
        description="Sill height in internal units (windows only)"
    )


class RoofProfileModel(BaseModel):
    """Gable profile: eave corners and ridge."""
    corner1: Point3D
    corner2: Point3D
    ridge: Point3D
    slope_angle: float = Field(description="Roof pitch in radians")
    elevation_correction: float


class RoofExtrusionModel(BaseModel):
    """Roof extents measured from the profile plane."""
    direction: Tuple[float, float, float]
    start: float
    end: float


class ShellPlanRequest(BaseModel):
    """Input data model for shell planning.

    Footprint dimensions are validated by the geometry core, so that
    non-positive values are reported with the same error codes the
    host command uses.
    """
    length: float = Field(default=10000.0, description="Footprint extent along X in display units")
    width: float = Field(default=5000.0, description="Footprint extent along Y in display units")
    roof_height: float = Field(default=1500.0, description="Eave-to-ridge rise in display units")
    sill_height: float = Field(default=800.0, description="Window sill height in display units")
    units: Literal["millimeters", "meters", "feet", "inches", "mm", "m", "ft", "in"] = Field(
        default="millimeters",
        description="Display units of the dimensions above"
    )
    include_openings: bool = Field(default=True, description="Place a door and three windows")
    include_roof: bool = Field(default=True, description="Add a gable roof")
    top_level_elevation: Optional[float] = Field(
        default=None,
        description="Top level elevation in internal units (feet); required for the roof"
    )
    wall_thickness: float = Field(default=0.0, description="Wall thickness in internal units", ge=0)
    roof_thickness: float = Field(default=0.0, description="Roof thickness in internal units", ge=0)

    @model_validator(mode='after')
    def validate_roof_inputs(self) -> 'ShellPlanRequest':
        """A roof cannot be planned without the level it rests on."""
        if self.include_roof and self.top_level_elevation is None:
            raise ValueError("top_level_elevation is required when include_roof is true")
        return self


class ShellPlanResponse(BaseModel):
    """Complete shell geometry."""
    outline: List[Point3D]
    walls: List[LineModel]
    openings: List[OpeningModel] = Field(default=[])
    roof_profile: Optional[RoofProfileModel] = None
    roof_extrusion: Optional[RoofExtrusionModel] = None
    metadata: Dict[str, Any] = Field(default={})
