from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from artist_portal.api.deps import (
    get_list_deliverable_comments_use_case,
    get_list_deliverables_use_case,
    get_update_deliverable_use_case,
    require_auth,
)
from artist_portal.api.schemas.common import from_entity
from artist_portal.api.schemas.deliverables import (
    CommentResponse,
    CommentsResponse,
    DeliverablesResponse,
    UpdateDeliverableRequest,
    UpdateDeliverableResponse,
    UpdatedDeliverableResponse,
)
from artist_portal.api.schemas.projects import DeliverableResponse
from artist_portal.application.dto.deliverables import UpdateDeliverableInput
from artist_portal.application.use_cases.list_deliverable_comments import ListDeliverableCommentsUseCase
from artist_portal.application.use_cases.list_deliverables import ListDeliverablesUseCase
from artist_portal.application.use_cases.update_deliverable import UpdateDeliverableUseCase
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import DeliverableNotFoundError, ForbiddenError


router = APIRouter()


@router.get("/api/deliverables", response_model=DeliverablesResponse)
def list_deliverables(
    status: str | None = Query(default=None, max_length=40),
    project_id: str | None = Query(default=None, alias="projectId", max_length=64),
    current_user: User = Depends(require_auth),
    use_case: ListDeliverablesUseCase = Depends(get_list_deliverables_use_case),
):
    deliverables = use_case.execute(user=current_user, status=status or None, project_id=project_id or None)
    return DeliverablesResponse(
        deliverables=[from_entity(DeliverableResponse, item) for item in deliverables]
    )


@router.patch("/api/deliverables/{deliverable_id}", response_model=UpdateDeliverableResponse)
def update_deliverable(
    deliverable_id: str,
    req: UpdateDeliverableRequest,
    current_user: User = Depends(require_auth),
    use_case: UpdateDeliverableUseCase = Depends(get_update_deliverable_use_case),
):
    try:
        output = use_case.execute(
            UpdateDeliverableInput(
                deliverable_id=deliverable_id,
                status=req.status,
                comment=(req.comment or "").strip() or None,
                is_internal=req.is_internal,
            ),
            actor=current_user,
        )
    except DeliverableNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return UpdateDeliverableResponse(
        message="Deliverable updated successfully",
        deliverable=UpdatedDeliverableResponse(
            id=output.deliverable_id,
            project_id=output.project_id,
            status=output.status,
            completed_at=output.completed_at,
        ),
        project_progress=output.project_progress,
        comment_id=output.comment_id,
    )


@router.get("/api/deliverables/{deliverable_id}/comments", response_model=CommentsResponse)
def list_deliverable_comments(
    deliverable_id: str,
    current_user: User = Depends(require_auth),
    use_case: ListDeliverableCommentsUseCase = Depends(get_list_deliverable_comments_use_case),
):
    try:
        comments = use_case.execute(deliverable_id=deliverable_id, user=current_user)
    except DeliverableNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return CommentsResponse(comments=[from_entity(CommentResponse, item) for item in comments])
