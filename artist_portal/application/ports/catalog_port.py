from __future__ import annotations

from datetime import datetime
from typing import Protocol

from artist_portal.domain.entities.catalog import Addon, Plan, Purchase
from artist_portal.domain.entities.subscription import Subscription


class CatalogPort(Protocol):
    def list_active_plans(self) -> list[Plan]:
        ...

    def get_plan(self, *, plan_id: str) -> Plan | None:
        ...

    def list_active_addons(self, *, category: str | None = None) -> list[Addon]:
        ...

    def get_addon(self, *, addon_id: str) -> Addon | None:
        ...

    def get_subscription_for_user(self, *, user_id: str) -> Subscription | None:
        ...

    def create_subscription(
        self,
        *,
        subscription_id: str,
        user_id: str,
        plan_id: str,
        status: str,
        current_period_start: datetime,
        current_period_end: datetime,
        created_at: datetime,
    ) -> Subscription:
        ...

    def update_subscription(
        self,
        *,
        subscription_id: str,
        plan_id: str,
        status: str,
        current_period_start: datetime,
        current_period_end: datetime,
    ) -> Subscription:
        ...

    def create_purchase(
        self,
        *,
        purchase_id: str,
        user_id: str,
        addon_id: str,
        project_id: str | None,
        amount: float,
        status: str,
        created_at: datetime,
    ) -> Purchase:
        ...
