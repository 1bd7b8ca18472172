from __future__ import annotations

from dataclasses import dataclass

from artist_portal.domain.entities.project import Attachment, Deliverable, Message, Project


@dataclass(frozen=True)
class ProjectSummaryOutput:
    project: Project
    total_deliverables: int
    completed_deliverables: int


@dataclass(frozen=True)
class ProjectDetailOutput:
    project: Project
    deliverables: list[Deliverable]
    messages: list[Message]
    attachments: list[Attachment]


@dataclass(frozen=True)
class PostProjectMessageInput:
    project_id: str
    content: str
    attachment_url: str | None
