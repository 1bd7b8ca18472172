from __future__ import annotations

from fastapi import APIRouter, Depends

from artist_portal.api.deps import get_current_user, get_get_me_use_case
from artist_portal.api.schemas.catalog import PlanResponse, SubscriptionResponse
from artist_portal.api.schemas.common import from_entity
from artist_portal.api.schemas.me import ArtistProfileResponse, MeResponse, MeUserResponse
from artist_portal.application.use_cases.get_me import GetMeUseCase
from artist_portal.domain.entities.user import User


router = APIRouter()


@router.get("/api/me", response_model=MeResponse)
def get_me(
    current_user: User | None = Depends(get_current_user),
    use_case: GetMeUseCase = Depends(get_get_me_use_case),
):
    if current_user is None:
        return MeResponse(user=None)

    output = use_case.execute(user=current_user)
    subscription = None
    if output.subscription is not None:
        subscription = from_entity(
            SubscriptionResponse,
            output.subscription,
            plan=from_entity(PlanResponse, output.plan) if output.plan is not None else None,
        )
    return MeResponse(
        user=from_entity(
            MeUserResponse,
            output.user,
            profile=from_entity(ArtistProfileResponse, output.profile) if output.profile else None,
            subscription=subscription,
        )
    )
