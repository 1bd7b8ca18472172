from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from artist_portal.api.deps import get_list_activities_use_case, get_list_projects_use_case, require_admin
from artist_portal.api.routers.activities import build_activities_response
from artist_portal.api.routers.projects import build_project_summaries
from artist_portal.api.schemas.activities import ActivitiesResponse
from artist_portal.api.schemas.projects import ProjectsResponse
from artist_portal.application.use_cases.list_activities import ListActivitiesUseCase
from artist_portal.application.use_cases.list_projects import ListProjectsUseCase
from artist_portal.domain.entities.user import User


router = APIRouter()


@router.get("/api/admin/projects", response_model=ProjectsResponse)
def list_all_projects(
    status: str | None = Query(default=None, max_length=40),
    _admin: User = Depends(require_admin),
    use_case: ListProjectsUseCase = Depends(get_list_projects_use_case),
):
    return build_project_summaries(use_case.execute_all(status=status or None))


@router.get("/api/admin/activities", response_model=ActivitiesResponse)
def list_all_activities(
    limit: int | None = Query(default=None, ge=1),
    _admin: User = Depends(require_admin),
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
):
    return build_activities_response(use_case.execute_all(limit=limit))
