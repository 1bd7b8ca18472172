from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


AddonCategory = Literal["social", "spotify", "branding", "pr", "ads", "content", "strategy"]
PurchaseStatus = Literal["pending", "completed", "refunded"]


@dataclass(frozen=True)
class PlanDeliverable:
    name: str
    count: int


@dataclass(frozen=True)
class Plan:
    id: str
    name: str
    slug: str
    description: str | None
    price_monthly: float
    price_yearly: float | None
    features: tuple[str, ...]
    deliverables: tuple[PlanDeliverable, ...]
    sessions_per_month: int
    response_sla: str | None
    is_popular: bool
    active: bool
    sort_order: int


@dataclass(frozen=True)
class Addon:
    id: str
    name: str
    slug: str
    category: AddonCategory
    description: str | None
    price: float
    delivery_days: int
    scope: tuple[str, ...]
    requirements: tuple[str, ...]
    active: bool
    sort_order: int


@dataclass(frozen=True)
class Purchase:
    id: str
    user_id: str
    addon_id: str
    project_id: str | None
    amount: float
    status: PurchaseStatus
    created_at: datetime
