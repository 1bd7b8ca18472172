from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from artist_portal.api.deps import (
    get_list_goals_use_case,
    get_list_metrics_use_case,
    get_list_notifications_use_case,
    require_auth,
)
from artist_portal.api.schemas.common import from_entity
from artist_portal.api.schemas.insights import (
    GoalResponse,
    GoalsResponse,
    MetricResponse,
    MetricsResponse,
    NotificationResponse,
    NotificationsResponse,
)
from artist_portal.application.use_cases.list_goals import ListGoalsUseCase
from artist_portal.application.use_cases.list_metrics import ListMetricsUseCase
from artist_portal.application.use_cases.list_notifications import ListNotificationsUseCase
from artist_portal.domain.entities.user import User


router = APIRouter()


@router.get("/api/notifications", response_model=NotificationsResponse)
def list_notifications(
    unread: bool = False,
    current_user: User = Depends(require_auth),
    use_case: ListNotificationsUseCase = Depends(get_list_notifications_use_case),
):
    notifications = use_case.execute(user=current_user, unread_only=unread)
    return NotificationsResponse(
        notifications=[from_entity(NotificationResponse, item) for item in notifications]
    )


@router.get("/api/goals", response_model=GoalsResponse)
def list_goals(
    current_user: User = Depends(require_auth),
    use_case: ListGoalsUseCase = Depends(get_list_goals_use_case),
):
    return GoalsResponse(goals=[from_entity(GoalResponse, item) for item in use_case.execute(user=current_user)])


@router.get("/api/metrics", response_model=MetricsResponse)
def list_metrics(
    type: str | None = Query(default=None, max_length=40),
    current_user: User = Depends(require_auth),
    use_case: ListMetricsUseCase = Depends(get_list_metrics_use_case),
):
    metrics = use_case.execute(user=current_user, type=type)
    return MetricsResponse(metrics=[from_entity(MetricResponse, item) for item in metrics])
