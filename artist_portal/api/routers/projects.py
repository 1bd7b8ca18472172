from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from artist_portal.api.deps import (
    get_get_project_use_case,
    get_list_projects_use_case,
    get_post_project_message_use_case,
    require_auth,
)
from artist_portal.api.schemas.common import from_entity
from artist_portal.api.schemas.projects import (
    AttachmentResponse,
    DeliverableResponse,
    PostMessageRequest,
    PostMessageResponse,
    ProjectDetailResponse,
    ProjectMessageResponse,
    ProjectResponse,
    ProjectsResponse,
    ProjectSummaryResponse,
)
from artist_portal.application.dto.projects import PostProjectMessageInput, ProjectSummaryOutput
from artist_portal.application.use_cases.get_project import GetProjectUseCase
from artist_portal.application.use_cases.list_projects import ListProjectsUseCase
from artist_portal.application.use_cases.post_project_message import PostProjectMessageUseCase
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import ForbiddenError, ProjectNotFoundError


router = APIRouter()


def build_project_summaries(summaries: list[ProjectSummaryOutput]) -> ProjectsResponse:
    return ProjectsResponse(
        projects=[
            from_entity(
                ProjectSummaryResponse,
                summary.project,
                total_deliverables=summary.total_deliverables,
                completed_deliverables=summary.completed_deliverables,
            )
            for summary in summaries
        ]
    )


@router.get("/api/projects", response_model=ProjectsResponse)
def list_projects(
    status: str | None = Query(default=None, max_length=40),
    current_user: User = Depends(require_auth),
    use_case: ListProjectsUseCase = Depends(get_list_projects_use_case),
):
    return build_project_summaries(use_case.execute(user=current_user, status=status or None))


@router.get("/api/projects/{project_id}", response_model=ProjectDetailResponse)
def get_project(
    project_id: str,
    current_user: User = Depends(require_auth),
    use_case: GetProjectUseCase = Depends(get_get_project_use_case),
):
    try:
        output = use_case.execute(project_id=project_id, user=current_user)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return ProjectDetailResponse(
        project=from_entity(ProjectResponse, output.project),
        deliverables=[from_entity(DeliverableResponse, item) for item in output.deliverables],
        messages=[from_entity(ProjectMessageResponse, item) for item in output.messages],
        attachments=[from_entity(AttachmentResponse, item) for item in output.attachments],
    )


@router.post("/api/projects/{project_id}/messages", response_model=PostMessageResponse)
def post_project_message(
    project_id: str,
    req: PostMessageRequest,
    current_user: User = Depends(require_auth),
    use_case: PostProjectMessageUseCase = Depends(get_post_project_message_use_case),
):
    try:
        message = use_case.execute(
            PostProjectMessageInput(
                project_id=project_id,
                content=req.content,
                attachment_url=req.attachment_url,
            ),
            user=current_user,
        )
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return PostMessageResponse(
        message=from_entity(
            ProjectMessageResponse,
            message,
            author_name=current_user.name,
            author_avatar=current_user.avatar_url,
            author_role=current_user.role,
        )
    )
