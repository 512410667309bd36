# File: building_shell_generator/commands/create_shell.py
"""
Shell creation command.

Builds a rectangular single-story shell in the host document: four walls
between two levels, optionally a door and three windows, and optionally a
gable roof. The command runs in three strictly ordered phases:

1. Resolve: look up levels and types by name and read their elevation and
   thickness. Any failed lookup raises before anything is modified.
2. Plan: compute all geometry with the pure geometry core.
3. Apply: create every element inside one host transaction. A failing
   host call rolls the whole transaction back.

Usage:
    from building_shell_generator.commands.create_shell import CreateShellCommand

    command = CreateShellCommand(ShellParameters(), adapter)
    result = command.execute()
    print(result.to_dict())
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from building_shell_generator.config.shell import (
    DOOR_CATEGORY,
    ROOF_CATEGORY,
    WINDOW_CATEGORY,
    ShellParameters,
)
from building_shell_generator.core.errors import (
    FamilyTypeNotFound,
    HostOperationError,
    LevelNotFound,
)
from building_shell_generator.core.shell_plan import ShellPlan, build_shell_plan
from building_shell_generator.geometry.openings import OpeningType
from building_shell_generator.host.adapter import HostAdapter, LevelInfo

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTION_NAME = "Create building shell"


@dataclass
class HostContext:
    """Everything resolved from the host before planning."""
    base_level: LevelInfo
    top_level: LevelInfo
    wall_type: Any
    wall_thickness: float
    door_type: Optional[Any] = None
    window_type: Optional[Any] = None
    roof_type: Optional[Any] = None
    roof_thickness: float = 0.0


@dataclass
class ShellCreationResult:
    """Handles of the created elements plus the plan they were built from.

    Attributes:
        plan: Geometry that was applied
        walls: Wall handles in outline order
        doors: Door instance handles
        windows: Window instance handles
        roof: Roof handle, or None when the roof is disabled
        log: Ordered list of diagnostic messages
    """
    plan: ShellPlan
    walls: List[Any] = field(default_factory=list)
    doors: List[Any] = field(default_factory=list)
    windows: List[Any] = field(default_factory=list)
    roof: Optional[Any] = None
    log: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize counts to dict for JSON output."""
        return {
            "wall_count": len(self.walls),
            "door_count": len(self.doors),
            "window_count": len(self.windows),
            "roof_created": self.roof is not None,
        }


class CreateShellCommand:
    """Creates one building shell through a HostAdapter.

    Args:
        params: Shell dimensions, names and feature flags
        adapter: Host capabilities used for lookup and creation
        transaction_name: Name of the single host transaction
    """

    def __init__(
        self,
        params: ShellParameters,
        adapter: HostAdapter,
        transaction_name: str = DEFAULT_TRANSACTION_NAME,
    ) -> None:
        self._params = params
        self._adapter = adapter
        self._transaction_name = transaction_name

    @property
    def params(self) -> ShellParameters:
        return self._params

    # -------------------------------------------------------------------------
    # Phase 1: resolve
    # -------------------------------------------------------------------------

    def _require_level(self, name: str) -> LevelInfo:
        level = self._adapter.find_level(name)
        if level is None:
            raise LevelNotFound(name)
        return level

    def _require_type(self, category: str, type_name: str, family_name: str) -> Any:
        type_handle = self._adapter.resolve_family_type(category, type_name, family_name)
        if type_handle is None:
            raise FamilyTypeNotFound(category, type_name, family_name)
        return type_handle

    def resolve(self) -> HostContext:
        """Look up every named host element the shell needs.

        Raises:
            LevelNotFound: If either level is missing
            FamilyTypeNotFound: If an enabled feature's type is missing
        """
        p = self._params
        base_level = self._require_level(p.base_level_name)
        top_level = self._require_level(p.top_level_name)

        wall_type = self._adapter.default_wall_type()
        context = HostContext(
            base_level=base_level,
            top_level=top_level,
            wall_type=wall_type,
            wall_thickness=self._adapter.type_thickness(wall_type),
        )

        if p.include_openings:
            context.door_type = self._require_type(DOOR_CATEGORY, p.door_type, p.door_family)
            context.window_type = self._require_type(WINDOW_CATEGORY, p.window_type, p.window_family)

        if p.include_roof:
            context.roof_type = self._require_type(ROOF_CATEGORY, p.roof_type, p.roof_family)
            context.roof_thickness = self._adapter.type_thickness(context.roof_type)

        logger.debug(
            "Resolved levels '%s' (%.4f) and '%s' (%.4f)",
            base_level.name, base_level.elevation, top_level.name, top_level.elevation,
        )
        return context

    # -------------------------------------------------------------------------
    # Phase 2: plan
    # -------------------------------------------------------------------------

    def plan(self, context: HostContext) -> ShellPlan:
        """Compute all shell geometry for a resolved context."""
        return build_shell_plan(
            self._params,
            top_level_elevation=context.top_level.elevation,
            wall_thickness=context.wall_thickness,
            roof_thickness=context.roof_thickness,
        )

    # -------------------------------------------------------------------------
    # Phase 3: apply
    # -------------------------------------------------------------------------

    @staticmethod
    def _host_call(operation: str, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except Exception as e:
            raise HostOperationError(operation, e) from e

    def apply(self, plan: ShellPlan, context: HostContext) -> ShellCreationResult:
        """Create all planned elements inside one transaction.

        Raises:
            HostOperationError: If any host call fails; nothing is committed
        """
        adapter = self._adapter
        result = ShellCreationResult(plan=plan)

        with adapter.transaction(self._transaction_name):
            for index, centerline in enumerate(plan.walls):
                wall = self._host_call(
                    f"create_wall[{index}]",
                    adapter.create_wall, centerline, context.wall_type, context.base_level,
                )
                self._host_call(
                    f"set_wall_top_level[{index}]",
                    adapter.set_wall_top_level, wall, context.top_level,
                )
                result.walls.append(wall)
            result.log.append(f"Created {len(result.walls)} walls")

            for opening in plan.openings:
                host_wall = result.walls[opening.wall_index]
                if opening.opening_type is OpeningType.DOOR:
                    door = self._host_call(
                        f"create_door[{opening.wall_index}]",
                        adapter.create_hosted_instance,
                        opening.location, context.door_type, host_wall, context.base_level,
                    )
                    result.doors.append(door)
                else:
                    window = self._host_call(
                        f"create_window[{opening.wall_index}]",
                        adapter.create_hosted_instance,
                        opening.location, context.window_type, host_wall, context.base_level,
                    )
                    self._host_call(
                        f"set_sill_height[{opening.wall_index}]",
                        adapter.set_sill_height, window, opening.sill_height,
                    )
                    result.windows.append(window)
            if plan.openings:
                result.log.append(
                    f"Inserted {len(result.doors)} doors and {len(result.windows)} windows"
                )

            if plan.has_roof:
                result.roof = self._host_call(
                    "create_extrusion_roof",
                    adapter.create_extrusion_roof,
                    plan.roof_profile, plan.roof_extrusion, context.top_level, context.roof_type,
                )
                result.log.append("Created gable roof")

        return result

    def execute(self) -> ShellCreationResult:
        """Resolve, plan and apply in order.

        Raises:
            HostLookupError: Before any modification, for a missing level or type
            GeometryError: Before any modification, for invalid dimensions
            HostOperationError: If a host call fails inside the transaction
        """
        logger.info("Creating shell in %s", self._adapter.host_name)
        context = self.resolve()
        plan = self.plan(context)
        result = self.apply(plan, context)
        for message in result.log:
            logger.info(message)
        return result
