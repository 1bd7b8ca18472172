from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from artist_portal.api.deps import get_list_addons_use_case, get_list_plans_use_case
from artist_portal.api.schemas.catalog import AddonResponse, AddonsResponse, PlanResponse, PlansResponse
from artist_portal.api.schemas.common import from_entity
from artist_portal.application.use_cases.list_addons import ListAddonsUseCase
from artist_portal.application.use_cases.list_plans import ListPlansUseCase


router = APIRouter()


@router.get("/api/plans", response_model=PlansResponse)
def list_plans(use_case: ListPlansUseCase = Depends(get_list_plans_use_case)):
    return PlansResponse(plans=[from_entity(PlanResponse, plan) for plan in use_case.execute()])


@router.get("/api/addons", response_model=AddonsResponse)
def list_addons(
    category: str | None = Query(default=None, max_length=40),
    use_case: ListAddonsUseCase = Depends(get_list_addons_use_case),
):
    addons = use_case.execute(category=category)
    return AddonsResponse(addons=[from_entity(AddonResponse, addon) for addon in addons])
