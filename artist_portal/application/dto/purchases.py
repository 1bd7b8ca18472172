from __future__ import annotations

from dataclasses import dataclass

from artist_portal.domain.entities.catalog import Plan
from artist_portal.domain.entities.subscription import Subscription


@dataclass(frozen=True)
class PurchaseAddonOutput:
    addon_name: str
    project_id: str
    purchase_id: str
    deliverable_ids: list[str]


@dataclass(frozen=True)
class SubscribePlanOutput:
    plan: Plan
    subscription: Subscription
    upgraded: bool
