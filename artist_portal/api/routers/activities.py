from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from artist_portal.api.deps import get_list_activities_use_case, require_auth
from artist_portal.api.schemas.activities import ActivitiesResponse, ActivityResponse
from artist_portal.api.schemas.common import from_entity
from artist_portal.application.use_cases.list_activities import ListActivitiesUseCase
from artist_portal.domain.entities.activity import Activity
from artist_portal.domain.entities.user import User


router = APIRouter()


def build_activities_response(activities: list[Activity]) -> ActivitiesResponse:
    return ActivitiesResponse(activities=[from_entity(ActivityResponse, item) for item in activities])


@router.get("/api/activities", response_model=ActivitiesResponse)
def list_activities(
    limit: int | None = Query(default=None, ge=1),
    current_user: User = Depends(require_auth),
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
):
    return build_activities_response(use_case.execute(user=current_user, limit=limit))
