from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import ApiModel, SuccessResponse


class PlanDeliverableResponse(ApiModel):
    name: str
    count: int


class PlanResponse(ApiModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    price_monthly: float
    price_yearly: float | None = None
    features: list[str]
    deliverables: list[PlanDeliverableResponse]
    sessions_per_month: int
    response_sla: str | None = None
    is_popular: bool
    sort_order: int


class PlansResponse(SuccessResponse):
    plans: list[PlanResponse]


class AddonResponse(ApiModel):
    id: str
    name: str
    slug: str
    category: str
    description: str | None = None
    price: float
    delivery_days: int
    scope: list[str]
    requirements: list[str]
    sort_order: int


class AddonsResponse(SuccessResponse):
    addons: list[AddonResponse]


class PurchaseAddonRequest(ApiModel):
    addon_id: str = Field(..., min_length=1)


class PurchaseAddonResponse(SuccessResponse):
    message: str
    project_id: str
    purchase_id: str
    deliverable_count: int


class SubscribeRequest(ApiModel):
    plan_id: str = Field(..., min_length=1)


class SubscriptionResponse(ApiModel):
    id: str
    plan_id: str
    status: str
    current_period_start: datetime | None = None
    current_period_end: datetime | None = None
    created_at: datetime
    plan: PlanResponse | None = None


class SubscribeResponse(SuccessResponse):
    message: str
    subscription: SubscriptionResponse
