from __future__ import annotations

from datetime import datetime

from sqlalchemy import insert, select, update

from artist_portal.application.ports.catalog_port import CatalogPort
from artist_portal.infrastructure.db.mappers.portal_mapper import (
    map_row_to_addon,
    map_row_to_plan,
    map_row_to_purchase,
    map_row_to_subscription,
)
from artist_portal.infrastructure.db.models.portal import (
    AddonModel,
    PlanModel,
    PurchaseModel,
    SubscriptionModel,
)

from .base import SqlRepository


plans = PlanModel.__table__
addons = AddonModel.__table__
subscriptions = SubscriptionModel.__table__
purchases = PurchaseModel.__table__


class SqlCatalogRepository(SqlRepository, CatalogPort):
    def list_active_plans(self):
        stmt = select(plans).where(plans.c.active.is_(True)).order_by(plans.c.sort_order, plans.c.name)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_plan(row) for row in rows]

    def get_plan(self, *, plan_id: str):
        stmt = select(plans).where(plans.c.id == plan_id).limit(1)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_plan(row)

    def list_active_addons(self, *, category: str | None = None):
        stmt = select(addons).where(addons.c.active.is_(True))
        if category:
            stmt = stmt.where(addons.c.category == category)
        stmt = stmt.order_by(addons.c.sort_order, addons.c.name)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_addon(row) for row in rows]

    def get_addon(self, *, addon_id: str):
        stmt = select(addons).where(addons.c.id == addon_id).limit(1)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_addon(row)

    def get_subscription_for_user(self, *, user_id: str):
        stmt = (
            select(subscriptions)
            .where(subscriptions.c.user_id == user_id)
            .order_by(subscriptions.c.created_at.desc())
            .limit(1)
        )
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_subscription(row)

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
    ):
        values = {
            "id": subscription_id,
            "user_id": user_id,
            "plan_id": plan_id,
            "status": status,
            "current_period_start": current_period_start,
            "current_period_end": current_period_end,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(subscriptions).values(**values))
        return map_row_to_subscription(values)

    def update_subscription(
        self,
        *,
        subscription_id: str,
        plan_id: str,
        status: str,
        current_period_start: datetime,
        current_period_end: datetime,
    ):
        stmt = (
            update(subscriptions)
            .where(subscriptions.c.id == subscription_id)
            .values(
                plan_id=plan_id,
                status=status,
                current_period_start=current_period_start,
                current_period_end=current_period_end,
            )
        )
        with self._write() as conn:
            conn.execute(stmt)
            row = conn.execute(
                select(subscriptions).where(subscriptions.c.id == subscription_id)
            ).mappings().one()
        return map_row_to_subscription(row)

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
    ):
        values = {
            "id": purchase_id,
            "user_id": user_id,
            "addon_id": addon_id,
            "project_id": project_id,
            "amount": amount,
            "status": status,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(purchases).values(**values))
        return map_row_to_purchase(values)
