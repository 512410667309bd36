# File: api/endpoints/shell.py
from fastapi import APIRouter, Depends
from api.models.shell_models import ShellPlanRequest, ShellPlanResponse
from api.utils.auth import get_api_key
from api.utils.errors import handle_exception

from building_shell_generator.config.shell import ShellParameters
from building_shell_generator.core.json_schemas import shell_plan_to_dict
from building_shell_generator.core.shell_plan import build_shell_plan

import logging
logger = logging.getLogger("shell_generator.api")

router = APIRouter(dependencies=[Depends(get_api_key)])


@router.post("/plan", response_model=ShellPlanResponse)
async def plan_shell(request: ShellPlanRequest):
    """
    Compute the geometry of a building shell.

    Returns the footprint outline, wall centerlines, opening placements and
    gable roof profile in internal units. Nothing is persisted; the same
    request always yields the same plan.
    """
    logger.info(
        f"Shell plan requested: {request.length} x {request.width} {request.units}, "
        f"openings={request.include_openings}, roof={request.include_roof}"
    )
    try:
        params = ShellParameters.from_dict(request.model_dump())
        plan = build_shell_plan(
            params,
            top_level_elevation=request.top_level_elevation,
            wall_thickness=request.wall_thickness,
            roof_thickness=request.roof_thickness,
        )
    except Exception as e:
        raise handle_exception(e, resource_type="shell_plan")

    return ShellPlanResponse.model_validate(shell_plan_to_dict(plan))
