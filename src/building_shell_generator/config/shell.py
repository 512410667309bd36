# File: building_shell_generator/config/shell.py

"""Default parameters for the generated building shell.

Dimensions are stored in display units (see ``units``) and converted to
internal units by the planner. Family and type names match the metric
Revit project template; override them for other templates.
"""

from dataclasses import dataclass, asdict, field, fields
from typing import Any, Dict, Union

from .units import DisplayUnits, get_project_units, parse_units


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_LENGTH = 10000.0
DEFAULT_WIDTH = 5000.0
DEFAULT_ROOF_HEIGHT = 1500.0
DEFAULT_SILL_HEIGHT = 800.0

DEFAULT_LEVEL_BASE_NAME = "Level"

DOOR_CATEGORY = "OST_Doors"
WINDOW_CATEGORY = "OST_Windows"
ROOF_CATEGORY = "OST_Roofs"


def level_name(base_name: str, index: int) -> str:
    """Build a level name from its base name and numeric suffix ("Level 1")."""
    return f"{base_name} {index}"


@dataclass
class ShellParameters:
    """
    Everything the shell command needs from its caller.

    Attributes:
        length: Footprint extent along X, in ``units``
        width: Footprint extent along Y, in ``units``
        roof_height: Rise from eave to ridge, in ``units``
        sill_height: Window sill height above the base level, in ``units``
        units: Display units of the dimensions above; defaults to the
            current project units
        level_base_name: Shared prefix of the two level names
        base_level_index: Suffix of the level the walls stand on
        top_level_index: Suffix of the level the walls run up to
        door_type / door_family: Door family type to insert
        window_type / window_family: Window family type to insert
        roof_type / roof_family: Roof type used for the extrusion roof
        include_openings: Insert one door and three windows
        include_roof: Extrude a gable roof over the shell
    """
    length: float = DEFAULT_LENGTH
    width: float = DEFAULT_WIDTH
    roof_height: float = DEFAULT_ROOF_HEIGHT
    sill_height: float = DEFAULT_SILL_HEIGHT
    units: Union[DisplayUnits, str] = field(default_factory=get_project_units)
    level_base_name: str = DEFAULT_LEVEL_BASE_NAME
    base_level_index: int = 1
    top_level_index: int = 2
    door_type: str = "0915 x 2134mm"
    door_family: str = "M_Single-Flush"
    window_type: str = "0915 x 1830mm"
    window_family: str = "M_Fixed"
    roof_type: str = "Generic - 400mm"
    roof_family: str = "Basic Roof"
    include_openings: bool = True
    include_roof: bool = True

    def __post_init__(self) -> None:
        self.units = parse_units(self.units)

    @property
    def base_level_name(self) -> str:
        return level_name(self.level_base_name, self.base_level_index)

    @property
    def top_level_name(self) -> str:
        return level_name(self.level_base_name, self.top_level_index)

    @classmethod
    def walls_only(cls, **overrides: Any) -> "ShellParameters":
        """Parameters for a shell without openings or roof."""
        overrides.setdefault("include_openings", False)
        overrides.setdefault("include_roof", False)
        return cls(**overrides)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShellParameters":
        """
        Build parameters from a plain dict, ignoring unknown keys.

        Raises:
            ValueError: If ``units`` is not a supported unit
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["units"] = self.units.value
        return data
