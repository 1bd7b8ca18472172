from __future__ import annotations

from uuid import uuid4

from artist_portal.application.dto.projects import PostProjectMessageInput
from artist_portal.application.ports.transaction_port import TransactionPort, TransactionScope
from artist_portal.domain.entities.project import Message
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import ProjectNotFoundError

from .auth_common import Clock, utcnow
from .auth_gate import ensure_owner_or_admin
from .record_activity import ActivityLogger


class PostProjectMessageUseCase:
    def __init__(
        self,
        *,
        transaction_port: TransactionPort,
        activity_logger: ActivityLogger,
        clock: Clock = utcnow,
    ):
        self._transaction_port = transaction_port
        self._activity_logger = activity_logger
        self._clock = clock

    def execute(self, command: PostProjectMessageInput, *, user: User) -> Message:
        def _tx(scope: TransactionScope) -> Message:
            project = scope.projects.get_project(project_id=command.project_id)
            if project is None:
                raise ProjectNotFoundError("Project not found")
            ensure_owner_or_admin(owner_id=project.user_id, user=user)

            message = scope.projects.create_message(
                message_id=str(uuid4()),
                project_id=project.id,
                author_id=user.id,
                content=command.content,
                attachment_url=command.attachment_url,
                created_at=self._clock(),
            )
            self._activity_logger.record(
                scope.activities,
                actor_id=user.id,
                type="message",
                action="sent",
                entity_type="project",
                entity_id=project.id,
            )
            return message

        return self._transaction_port.execute_in_transaction(_tx)
