from __future__ import annotations

from datetime import datetime
from typing import Any

from .common import ApiModel, SuccessResponse


class NotificationResponse(ApiModel):
    id: str
    type: str
    title: str
    content: str | None = None
    link_url: str | None = None
    read_at: datetime | None = None
    created_at: datetime


class NotificationsResponse(SuccessResponse):
    notifications: list[NotificationResponse]


class GoalResponse(ApiModel):
    id: str
    title: str
    type: str
    target: int
    current: int
    period: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime


class GoalsResponse(SuccessResponse):
    goals: list[GoalResponse]


class MetricResponse(ApiModel):
    id: str
    type: str
    date: datetime
    value: float
    meta: dict[str, Any]
    created_at: datetime


class MetricsResponse(SuccessResponse):
    metrics: list[MetricResponse]
