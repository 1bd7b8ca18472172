from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

from artist_portal.application.dto.purchases import SubscribePlanOutput
from artist_portal.application.ports.catalog_port import CatalogPort
from artist_portal.application.ports.transaction_port import TransactionPort, TransactionScope
from artist_portal.domain.entities.subscription import SUBSCRIPTION_PERIOD_DAYS
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import PlanNotFoundError

from .auth_common import Clock, utcnow
from .record_activity import ActivityLogger


class SubscribePlanUseCase:
    def __init__(
        self,
        *,
        catalog_port: CatalogPort,
        transaction_port: TransactionPort,
        activity_logger: ActivityLogger,
        clock: Clock = utcnow,
    ):
        self._catalog_port = catalog_port
        self._transaction_port = transaction_port
        self._activity_logger = activity_logger
        self._clock = clock

    def execute(self, *, plan_id: str, user: User) -> SubscribePlanOutput:
        plan = self._catalog_port.get_plan(plan_id=plan_id)
        if plan is None:
            raise PlanNotFoundError("Plan not found")

        now = self._clock()
        period_end = now + timedelta(days=SUBSCRIPTION_PERIOD_DAYS)

        def _tx(scope: TransactionScope) -> SubscribePlanOutput:
            existing = scope.catalog.get_subscription_for_user(user_id=user.id)
            if existing is not None:
                subscription = scope.catalog.update_subscription(
                    subscription_id=existing.id,
                    plan_id=plan.id,
                    status="active",
                    current_period_start=now,
                    current_period_end=period_end,
                )
            else:
                subscription = scope.catalog.create_subscription(
                    subscription_id=str(uuid4()),
                    user_id=user.id,
                    plan_id=plan.id,
                    status="active",
                    current_period_start=now,
                    current_period_end=period_end,
                    created_at=now,
                )

            self._activity_logger.record(
                scope.activities,
                actor_id=user.id,
                type="subscription",
                action="upgraded" if existing is not None else "subscribed",
                entity_type="plan",
                entity_id=plan.id,
            )
            return SubscribePlanOutput(plan=plan, subscription=subscription, upgraded=existing is not None)

        return self._transaction_port.execute_in_transaction(_tx)
