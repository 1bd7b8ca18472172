from __future__ import annotations

from artist_portal.application.dto.projects import ProjectDetailOutput
from artist_portal.application.ports.project_port import ProjectPort
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import ProjectNotFoundError

from .auth_gate import ensure_owner_or_admin


class GetProjectUseCase:
    def __init__(self, *, project_port: ProjectPort):
        self._project_port = project_port

    def execute(self, *, project_id: str, user: User) -> ProjectDetailOutput:
        project = self._project_port.get_project(project_id=project_id)
        if project is None:
            raise ProjectNotFoundError("Project not found")
        ensure_owner_or_admin(owner_id=project.user_id, user=user)

        return ProjectDetailOutput(
            project=project,
            deliverables=self._project_port.list_deliverables_for_project(project_id=project.id),
            messages=self._project_port.list_messages(project_id=project.id),
            attachments=self._project_port.list_attachments(project_id=project.id),
        )
