from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol

from artist_portal.domain.entities.project import (
    Attachment,
    Deliverable,
    DeliverableComment,
    DeliverableCounts,
    Message,
    Project,
)


class ProjectPort(Protocol):
    def list_projects_for_user(self, *, user_id: str, status: str | None = None) -> list[Project]:
        ...

    def list_all_projects(self, *, status: str | None = None) -> list[Project]:
        ...

    def get_project(self, *, project_id: str, for_update: bool = False) -> Project | None:
        ...

    def create_project(
        self,
        *,
        project_id: str,
        user_id: str,
        title: str,
        description: str | None,
        type: str,
        status: str,
        progress: int,
        start_date: datetime | None,
        due_date: datetime | None,
        meta: dict[str, Any],
        created_at: datetime,
    ) -> Project:
        ...

    def update_project_progress(self, *, project_id: str, progress: int) -> None:
        ...

    def count_deliverables(self, *, project_id: str) -> DeliverableCounts:
        ...

    def count_deliverables_by_project(self, *, project_ids: list[str]) -> dict[str, DeliverableCounts]:
        ...

    def list_deliverables_for_project(self, *, project_id: str) -> list[Deliverable]:
        ...

    def list_deliverables_for_user(
        self,
        *,
        user_id: str,
        status: str | None = None,
        project_id: str | None = None,
    ) -> list[Deliverable]:
        ...

    def get_deliverable(self, *, deliverable_id: str) -> Deliverable | None:
        ...

    def create_deliverable(
        self,
        *,
        deliverable_id: str,
        project_id: str,
        title: str,
        status: str,
        priority: str,
        due_date: datetime | None,
        sort_order: int,
        created_at: datetime,
    ) -> Deliverable:
        ...

    def update_deliverable_status(
        self,
        *,
        deliverable_id: str,
        status: str,
        completed_at: datetime | None,
    ) -> None:
        ...

    def create_comment(
        self,
        *,
        comment_id: str,
        deliverable_id: str,
        author_id: str,
        content: str,
        is_internal: bool,
        created_at: datetime,
    ) -> DeliverableComment:
        ...

    def list_comments(self, *, deliverable_id: str, include_internal: bool) -> list[DeliverableComment]:
        ...

    def list_messages(self, *, project_id: str) -> list[Message]:
        ...

    def create_message(
        self,
        *,
        message_id: str,
        project_id: str,
        author_id: str,
        content: str,
        attachment_url: str | None,
        created_at: datetime,
    ) -> Message:
        ...

    def list_attachments(self, *, project_id: str) -> list[Attachment]:
        ...
