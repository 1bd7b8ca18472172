from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .common import ApiModel, SuccessResponse


class ProjectResponse(ApiModel):
    id: str
    user_id: str
    title: str
    description: str | None = None
    type: str
    status: str
    progress: int
    start_date: datetime | None = None
    due_date: datetime | None = None
    completed_at: datetime | None = None
    meta: dict[str, Any]
    created_at: datetime


class ProjectSummaryResponse(ProjectResponse):
    total_deliverables: int
    completed_deliverables: int


class ProjectsResponse(SuccessResponse):
    projects: list[ProjectSummaryResponse]


class DeliverableResponse(ApiModel):
    id: str
    project_id: str
    project_title: str | None = None
    title: str
    description: str | None = None
    status: str
    priority: str
    due_date: datetime | None = None
    completed_at: datetime | None = None
    assigned_to: str | None = None
    sort_order: int
    meta: dict[str, Any]
    created_at: datetime


class ProjectMessageResponse(ApiModel):
    id: str
    project_id: str
    author_id: str
    author_name: str | None = None
    author_avatar: str | None = None
    author_role: str | None = None
    content: str
    attachment_url: str | None = None
    read_at: datetime | None = None
    created_at: datetime


class AttachmentResponse(ApiModel):
    id: str
    project_id: str | None = None
    deliverable_id: str | None = None
    name: str
    url: str
    type: str | None = None
    size: int | None = None
    uploaded_by: str | None = None
    created_at: datetime


class ProjectDetailResponse(SuccessResponse):
    project: ProjectResponse
    deliverables: list[DeliverableResponse]
    messages: list[ProjectMessageResponse]
    attachments: list[AttachmentResponse]


class PostMessageRequest(ApiModel):
    content: str = Field(..., min_length=1, max_length=5000)
    attachment_url: str | None = Field(default=None, max_length=2048)


class PostMessageResponse(SuccessResponse):
    message: ProjectMessageResponse
