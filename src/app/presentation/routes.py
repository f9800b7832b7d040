from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from src.app.application.services import RoleViewService
from src.app.domain.exceptions import CollaboratorUnavailableError, UnknownTaskStatusError
from src.app.presentation.rendering import RoleViewResponse, render_role_view

router = APIRouter(prefix="/schedulerz", tags=["schedulerz"])
logger = logging.getLogger(__name__)

_role_view_service = RoleViewService()


@router.get(
    "/role",
    response_model=RoleViewResponse,
    summary="Jobs of a role",
    description=(
        "Per-job task counts by lifecycle bucket, cron jobs with their next run, "
        "and the role's resource consumption and quota."
    ),
    responses={
        500: {"description": "A task carries a status the view cannot classify."},
        503: {"description": "Task, cron or quota data is unavailable."},
    },
)
async def role_view(role: str | None = Query(None, description="Role to report on")):
    """
    Builds the role view and renders it; a blank role yields an explanatory message.
    """
    if role is not None and not role.strip():
        role = None
    try:
        view = await _role_view_service.build_role_view(role)
    except UnknownTaskStatusError:
        logger.exception("Role view failed on an unclassifiable task status", extra={"role": role})
        raise HTTPException(status_code=500, detail="Internal server error.")  # noqa: B904
    except CollaboratorUnavailableError as exc:
        logger.error("Role view collaborator unavailable: %s", exc.collaborator, extra={"role": role})
        raise HTTPException(  # noqa: B904
            status_code=503, detail=f"{exc.collaborator} is unavailable"
        )
    return render_role_view(view)
