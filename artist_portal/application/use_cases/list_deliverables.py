from __future__ import annotations

from artist_portal.application.ports.project_port import ProjectPort
from artist_portal.domain.entities.project import Deliverable
from artist_portal.domain.entities.user import User


class ListDeliverablesUseCase:
    def __init__(self, *, project_port: ProjectPort):
        self._project_port = project_port

    def execute(
        self,
        *,
        user: User,
        status: str | None = None,
        project_id: str | None = None,
    ) -> list[Deliverable]:
        return self._project_port.list_deliverables_for_user(
            user_id=user.id,
            status=status,
            project_id=project_id,
        )
