from __future__ import annotations

from artist_portal.application.ports.project_port import ProjectPort
from artist_portal.domain.entities.project import DeliverableComment
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import DeliverableNotFoundError, ForbiddenError

from .auth_gate import ensure_owner_or_admin


class ListDeliverableCommentsUseCase:
    def __init__(self, *, project_port: ProjectPort):
        self._project_port = project_port

    def execute(self, *, deliverable_id: str, user: User) -> list[DeliverableComment]:
        deliverable = self._project_port.get_deliverable(deliverable_id=deliverable_id)
        if deliverable is None:
            raise DeliverableNotFoundError("Deliverable not found")

        project = self._project_port.get_project(project_id=deliverable.project_id)
        if project is None:
            raise ForbiddenError("Access denied")
        ensure_owner_or_admin(owner_id=project.user_id, user=user)

        # Internal notes are admin-only.
        return self._project_port.list_comments(
            deliverable_id=deliverable.id,
            include_internal=user.is_admin,
        )
