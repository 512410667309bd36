# File: scripts/gh_shell_creator.py
"""Building Shell Creator for Grasshopper.

Creates a rectangular single-story building shell in the active Revit
document through Rhino.Inside.Revit: four walls between two levels, an
optional door and three windows, and an optional gable roof.

Key Features:
1. Fail-Fast Lookups
   - Levels are found by base name plus suffix ("Level 1", "Level 2")
   - Door, window and roof types are found by type and family name
   - Any missing level or type stops the component before Revit is modified

2. Single Transaction
   - All walls, openings and the roof are created in one transaction
   - A failing Revit call rolls everything back

3. Plan Output
   - The computed geometry is returned as JSON, even when run=False,
     so the shell can be previewed before it is built

Environment:
    Rhino 8
    Grasshopper
    Python component (CPython 3)
    Rhino.Inside.Revit

Dependencies:
    - Grasshopper: Component framework and runtime messages
    - RhinoInside.Revit: Revit document access (conditional)
    - building_shell_generator.commands.create_shell: CreateShellCommand
    - building_shell_generator.host.revit_adapter: RevitHostAdapter

Usage:
    1. Set footprint 'length' and 'width' in millimeters
    2. Optionally set 'roof_height', 'sill_height' and 'level_base_name'
    3. Toggle 'include_openings' and 'include_roof'
    4. Set 'run' to True to build the shell in Revit

Input Requirements:
    Length (length) - float: footprint extent along X, mm. Default 10000
    Width (width) - float: footprint extent along Y, mm. Default 5000
    Roof Height (roof_height) - float: eave-to-ridge rise, mm. Default 1500
    Sill Height (sill_height) - float: window sill height, mm. Default 800
    Level Base Name (level_base_name) - str: level name prefix. Default "Level"
    Include Openings (include_openings) - bool. Default True
    Include Roof (include_roof) - bool. Default True
    Run (run) - bool: create elements in Revit when True

Outputs:
    Plan JSON (plan_json) - str: serialized ShellPlan
    Summary (summary) - str: created element counts as JSON
    Info (info) - list of str: diagnostic log

Error Handling:
    - Invalid dimensions: reported as errors, nothing created
    - Missing level or type: reported as errors, nothing created
    - Revit call failure: transaction rolled back, reported as error
"""

import os
import sys
import json
import traceback

# =============================================================================
# Force Module Reload (CPython 3 in Rhino 8)
# =============================================================================
_modules_to_clear = [k for k in sys.modules.keys() if 'building_shell_generator' in k]
for _mod in _modules_to_clear:
    del sys.modules[_mod]

# =============================================================================
# .NET / CLR
# =============================================================================

import clr

clr.AddReference('Grasshopper')

REVIT_DOC = None

try:
    clr.AddReference('RhinoInside.Revit')
    from RhinoInside.Revit import Revit
    REVIT_DOC = Revit.ActiveDBDocument
except Exception as _revit_err:
    print(f"[INFO] RhinoInside.Revit not available: {_revit_err}")

import Grasshopper

# =============================================================================
# Project Setup
# =============================================================================

# GH components have no __file__; set BUILDING_SHELL_PATH to the repo root
PROJECT_PATH = os.environ.get(
    "BUILDING_SHELL_PATH",
    os.path.dirname(os.path.dirname(os.path.abspath(globals().get("__file__", ".")))),
)
_SRC_PATH = os.path.join(PROJECT_PATH, "src")
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from building_shell_generator.config.shell import ShellParameters
from building_shell_generator.core.errors import ShellGeneratorError
from building_shell_generator.core.json_schemas import serialize_shell_plan
from building_shell_generator.core.shell_plan import build_shell_plan
from building_shell_generator.commands.create_shell import CreateShellCommand
from building_shell_generator.host.revit_adapter import RevitHostAdapter
from building_shell_generator.utils.logging_config import ShellGeneratorLogger

log_file = ShellGeneratorLogger.configure(
    debug_mode=False, log_dir=os.path.join(PROJECT_PATH, "logs"), host_mode=True
)
logger = ShellGeneratorLogger.get_logger("gh_shell_creator")

# =============================================================================
# Constants
# =============================================================================

COMPONENT_NAME = "Building Shell Creator"
COMPONENT_NICKNAME = "Shell"
COMPONENT_MESSAGE = "v0.3"
COMPONENT_CATEGORY = "BSG"
COMPONENT_SUBCATEGORY = "1-Create"

# =============================================================================
# Logging Utilities
# =============================================================================

def log_message(message: str, level: str = "info") -> None:
    """Log to console and add a GH runtime message for warnings and errors."""
    getattr(logger, level if level != "remark" else "info")(message)

    if level == "warning":
        ghenv.Component.AddRuntimeMessage(
            Grasshopper.Kernel.GH_RuntimeMessageLevel.Warning, message)
    elif level == "error":
        ghenv.Component.AddRuntimeMessage(
            Grasshopper.Kernel.GH_RuntimeMessageLevel.Error, message)
    elif level == "remark":
        ghenv.Component.AddRuntimeMessage(
            Grasshopper.Kernel.GH_RuntimeMessageLevel.Remark, message)


# =============================================================================
# Component Setup
# =============================================================================

def setup_component() -> None:
    """Set component metadata and output names.

    Note: Output[0] is reserved for GH's internal 'out' - start from Output[1].
    """
    ghenv.Component.Name = COMPONENT_NAME
    ghenv.Component.NickName = COMPONENT_NICKNAME
    ghenv.Component.Message = COMPONENT_MESSAGE
    ghenv.Component.Category = COMPONENT_CATEGORY
    ghenv.Component.SubCategory = COMPONENT_SUBCATEGORY

    outputs = ghenv.Component.Params.Output
    output_config = [
        ("Plan JSON", "plan_json", "Serialized shell geometry"),
        ("Summary", "summary", "Created element counts"),
        ("Info", "info", "Diagnostic log"),
    ]
    for i, (name, nick, desc) in enumerate(output_config):
        idx = i + 1
        if idx < outputs.Count:
            outputs[idx].Name = name
            outputs[idx].NickName = nick
            outputs[idx].Description = desc


def _unwrap_gh_input(value, default=None):
    """Unwrap Grasshopper list wrapping from a single-item input."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return default if value is None else value


def build_parameters() -> ShellParameters:
    """Collect component inputs into ShellParameters."""
    overrides = {
        "length": _unwrap_gh_input(length),
        "width": _unwrap_gh_input(width),
        "roof_height": _unwrap_gh_input(roof_height),
        "sill_height": _unwrap_gh_input(sill_height),
        "level_base_name": _unwrap_gh_input(level_base_name),
        "include_openings": _unwrap_gh_input(include_openings),
        "include_roof": _unwrap_gh_input(include_roof),
    }
    return ShellParameters.from_dict({k: v for k, v in overrides.items() if v is not None})


# =============================================================================
# Main
# =============================================================================

def main():
    """Main entry point for the Building Shell Creator component.

    Returns:
        tuple: (plan_json, summary, info)
    """
    setup_component()
    info_lines = ["Building Shell Creator v0.3", "=" * 40]

    try:
        params = build_parameters()
        info_lines.append(f"Footprint: {params.length} x {params.width} {params.units.value}")
        info_lines.append(f"Levels: '{params.base_level_name}' -> '{params.top_level_name}'")

        if not _unwrap_gh_input(run, False):
            # Preview only; the roof needs a real level elevation
            preview = build_shell_plan(
                ShellParameters.from_dict({**params.to_dict(), "include_roof": False})
            )
            info_lines.append("Preview only (run=False)")
            return (serialize_shell_plan(preview), "", info_lines)

        if REVIT_DOC is None:
            log_message("No active Revit document", "error")
            return ("", "", info_lines + ["Revit Document: NOT AVAILABLE"])

        info_lines.append(f"Revit Document: {REVIT_DOC.Title}")
        command = CreateShellCommand(params, RevitHostAdapter(REVIT_DOC))
        result = command.execute()

        info_lines.extend(result.log)
        log_message(f"Shell created: {result.to_dict()}", "remark")
        return (serialize_shell_plan(result.plan), json.dumps(result.to_dict()), info_lines)

    except ShellGeneratorError as e:
        log_message(e.detail, "error")
        return ("", "", info_lines + [e.detail])
    except Exception as e:
        error_msg = f"Unexpected error: {str(e)}"
        log_message(error_msg, "error")
        return ("", "", info_lines + [error_msg, traceback.format_exc()])


# =============================================================================
# Default Input Handling
# =============================================================================

for _name in ("length", "width", "roof_height", "sill_height", "level_base_name",
              "include_openings", "include_roof", "run"):
    if _name not in globals():
        globals()[_name] = None

# =============================================================================
# Execution
# =============================================================================

if __name__ == "__main__":
    plan_json, summary, info = main()
