from __future__ import annotations

from artist_portal.application.dto.projects import ProjectSummaryOutput
from artist_portal.application.ports.project_port import ProjectPort
from artist_portal.domain.entities.project import DeliverableCounts, Project
from artist_portal.domain.entities.user import User


class ListProjectsUseCase:
    def __init__(self, *, project_port: ProjectPort):
        self._project_port = project_port

    def execute(self, *, user: User, status: str | None = None) -> list[ProjectSummaryOutput]:
        projects = self._project_port.list_projects_for_user(user_id=user.id, status=status)
        return self._summarize(projects)

    def execute_all(self, *, status: str | None = None) -> list[ProjectSummaryOutput]:
        """Admin listing across every owner."""
        projects = self._project_port.list_all_projects(status=status)
        return self._summarize(projects)

    def _summarize(self, projects: list[Project]) -> list[ProjectSummaryOutput]:
        if not projects:
            return []
        counts = self._project_port.count_deliverables_by_project(project_ids=[p.id for p in projects])
        empty = DeliverableCounts(total=0, approved=0)
        return [
            ProjectSummaryOutput(
                project=project,
                total_deliverables=counts.get(project.id, empty).total,
                completed_deliverables=counts.get(project.id, empty).approved,
            )
            for project in projects
        ]
