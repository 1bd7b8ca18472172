from __future__ import annotations

import logging
from uuid import uuid4

from artist_portal.application.dto.deliverables import UpdateDeliverableInput, UpdateDeliverableOutput
from artist_portal.application.ports.transaction_port import TransactionPort, TransactionScope
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import DeliverableNotFoundError, ForbiddenError
from artist_portal.domain.services.deliverable_workflow import apply_status_change, is_workflow_transition

from .auth_common import Clock, utcnow
from .auth_gate import ensure_owner_or_admin
from .record_activity import ActivityLogger
from .recompute_progress import ProgressAggregator


logger = logging.getLogger(__name__)


class UpdateDeliverableUseCase:
    def __init__(
        self,
        *,
        transaction_port: TransactionPort,
        activity_logger: ActivityLogger,
        progress_aggregator: ProgressAggregator,
        clock: Clock = utcnow,
    ):
        self._transaction_port = transaction_port
        self._activity_logger = activity_logger
        self._progress_aggregator = progress_aggregator
        self._clock = clock

    def execute(self, command: UpdateDeliverableInput, *, actor: User) -> UpdateDeliverableOutput:
        def _tx(scope: TransactionScope) -> UpdateDeliverableOutput:
            deliverable = scope.projects.get_deliverable(deliverable_id=command.deliverable_id)
            if deliverable is None:
                raise DeliverableNotFoundError("Deliverable not found")

            project = scope.projects.get_project(project_id=deliverable.project_id, for_update=True)
            if project is None:
                raise ForbiddenError("Access denied")
            ensure_owner_or_admin(owner_id=project.user_id, user=actor)

            now = self._clock()
            status = deliverable.status
            completed_at = deliverable.completed_at
            progress = project.progress

            if command.status:
                if not is_workflow_transition(deliverable.status, command.status):
                    logger.info(
                        "update_deliverable: off_workflow_transition deliverable_id=%s from=%s to=%s",
                        deliverable.id,
                        deliverable.status,
                        command.status,
                    )
                change = apply_status_change(command.status, now=now)
                scope.projects.update_deliverable_status(
                    deliverable_id=deliverable.id,
                    status=change.status,
                    completed_at=change.completed_at,
                )
                status = change.status
                completed_at = change.completed_at

                recomputed = self._progress_aggregator.recompute(scope.projects, project_id=project.id)
                if recomputed is not None:
                    progress = recomputed

                self._activity_logger.record(
                    scope.activities,
                    actor_id=actor.id,
                    type="deliverable",
                    action=change.activity_action,
                    entity_type="deliverable",
                    entity_id=deliverable.id,
                    meta=change.activity_meta,
                )

            comment_id = None
            if command.comment:
                comment = scope.projects.create_comment(
                    comment_id=str(uuid4()),
                    deliverable_id=deliverable.id,
                    author_id=actor.id,
                    content=command.comment,
                    is_internal=command.is_internal and actor.is_admin,
                    created_at=now,
                )
                comment_id = comment.id

            return UpdateDeliverableOutput(
                deliverable_id=deliverable.id,
                project_id=project.id,
                status=status,
                completed_at=completed_at,
                project_progress=progress,
                comment_id=comment_id,
            )

        return self._transaction_port.execute_in_transaction(_tx)
