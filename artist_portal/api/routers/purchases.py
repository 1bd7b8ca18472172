from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from artist_portal.api.deps import (
    get_purchase_addon_use_case,
    get_subscribe_plan_use_case,
    require_auth,
)
from artist_portal.api.schemas.catalog import (
    PlanResponse,
    PurchaseAddonRequest,
    PurchaseAddonResponse,
    SubscribeRequest,
    SubscribeResponse,
    SubscriptionResponse,
)
from artist_portal.api.schemas.common import from_entity
from artist_portal.application.use_cases.purchase_addon import PurchaseAddonUseCase
from artist_portal.application.use_cases.subscribe_plan import SubscribePlanUseCase
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import AddonNotFoundError, PlanNotFoundError


router = APIRouter()


@router.post("/api/purchase-addon", response_model=PurchaseAddonResponse)
def purchase_addon(
    req: PurchaseAddonRequest,
    current_user: User = Depends(require_auth),
    use_case: PurchaseAddonUseCase = Depends(get_purchase_addon_use_case),
):
    try:
        output = use_case.execute(addon_id=req.addon_id, user=current_user)
    except AddonNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return PurchaseAddonResponse(
        message=f"Successfully purchased {output.addon_name}",
        project_id=output.project_id,
        purchase_id=output.purchase_id,
        deliverable_count=len(output.deliverable_ids),
    )


@router.post("/api/subscribe", response_model=SubscribeResponse)
def subscribe(
    req: SubscribeRequest,
    current_user: User = Depends(require_auth),
    use_case: SubscribePlanUseCase = Depends(get_subscribe_plan_use_case),
):
    try:
        output = use_case.execute(plan_id=req.plan_id, user=current_user)
    except PlanNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    verb = "upgraded to" if output.upgraded else "subscribed to"
    return SubscribeResponse(
        message=f"Successfully {verb} {output.plan.name} plan",
        subscription=from_entity(
            SubscriptionResponse,
            output.subscription,
            plan=from_entity(PlanResponse, output.plan),
        ),
    )
