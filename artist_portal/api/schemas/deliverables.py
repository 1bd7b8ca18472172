from __future__ import annotations

from datetime import datetime

from pydantic import Field

from artist_portal.domain.entities.project import DeliverableStatus

from .common import ApiModel, SuccessResponse
from .projects import DeliverableResponse


class DeliverablesResponse(SuccessResponse):
    deliverables: list[DeliverableResponse]


class UpdateDeliverableRequest(ApiModel):
    status: DeliverableStatus | None = None
    comment: str | None = Field(default=None, max_length=5000)
    is_internal: bool = False


class UpdatedDeliverableResponse(ApiModel):
    id: str
    project_id: str
    status: str
    completed_at: datetime | None = None


class UpdateDeliverableResponse(SuccessResponse):
    message: str
    deliverable: UpdatedDeliverableResponse
    project_progress: int
    comment_id: str | None = None


class CommentResponse(ApiModel):
    id: str
    deliverable_id: str
    author_id: str
    content: str
    is_internal: bool
    created_at: datetime


class CommentsResponse(SuccessResponse):
    comments: list[CommentResponse]
