from __future__ import annotations

import logging
from datetime import timedelta
from uuid import uuid4

from artist_portal.application.dto.purchases import PurchaseAddonOutput
from artist_portal.application.ports.catalog_port import CatalogPort
from artist_portal.application.ports.transaction_port import TransactionPort, TransactionScope
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import AddonNotFoundError

from .auth_common import Clock, utcnow
from .record_activity import ActivityLogger


logger = logging.getLogger(__name__)


class PurchaseAddonUseCase:
    """Simulated purchase that provisions a project with one deliverable per scope item.

    Project, deliverables, purchase row and activity are written in a single
    transaction.
    """

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

    def execute(self, *, addon_id: str, user: User) -> PurchaseAddonOutput:
        addon = self._catalog_port.get_addon(addon_id=addon_id)
        if addon is None:
            raise AddonNotFoundError("Add-on not found")

        now = self._clock()
        due_date = now + timedelta(days=addon.delivery_days)

        def _tx(scope: TransactionScope) -> PurchaseAddonOutput:
            project = scope.projects.create_project(
                project_id=str(uuid4()),
                user_id=user.id,
                title=addon.name,
                description=addon.description,
                type="addon",
                status="active",
                progress=0,
                start_date=now,
                due_date=due_date,
                meta={"addonId": addon.id},
                created_at=now,
            )

            deliverable_ids: list[str] = []
            for index, title in enumerate(addon.scope):
                deliverable = scope.projects.create_deliverable(
                    deliverable_id=str(uuid4()),
                    project_id=project.id,
                    title=title,
                    status="not_started",
                    priority="medium",
                    due_date=due_date,
                    sort_order=index,
                    created_at=now,
                )
                deliverable_ids.append(deliverable.id)

            purchase = scope.catalog.create_purchase(
                purchase_id=str(uuid4()),
                user_id=user.id,
                addon_id=addon.id,
                project_id=project.id,
                amount=addon.price,
                status="completed",
                created_at=now,
            )

            self._activity_logger.record(
                scope.activities,
                actor_id=user.id,
                type="purchase",
                action="purchased",
                entity_type="addon",
                entity_id=addon.id,
                meta={"projectId": project.id, "amount": addon.price},
            )
            return PurchaseAddonOutput(
                addon_name=addon.name,
                project_id=project.id,
                purchase_id=purchase.id,
                deliverable_ids=deliverable_ids,
            )

        output = self._transaction_port.execute_in_transaction(_tx)
        logger.info(
            "purchase_addon: provisioned user_id=%s addon_id=%s project_id=%s deliverables=%s",
            user.id,
            addon.id,
            output.project_id,
            len(output.deliverable_ids),
        )
        return output
