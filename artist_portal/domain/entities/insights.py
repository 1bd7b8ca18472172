from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal


NotificationType = Literal["deliverable", "message", "booking", "project", "system"]
GoalType = Literal["posts_per_week", "deliverables_per_month", "sessions_per_month", "custom"]
GoalPeriod = Literal["weekly", "monthly", "quarterly"]
MetricType = Literal["content_cadence", "campaign_progress", "completion_rate", "engagement"]


@dataclass(frozen=True)
class Notification:
    id: str
    user_id: str
    type: NotificationType
    title: str
    content: str | None
    link_url: str | None
    read_at: datetime | None
    created_at: datetime


@dataclass(frozen=True)
class Goal:
    id: str
    user_id: str
    title: str
    type: GoalType
    target: int
    current: int
    period: GoalPeriod
    start_date: datetime | None
    end_date: datetime | None
    created_at: datetime


@dataclass(frozen=True)
class Metric:
    id: str
    user_id: str
    type: MetricType
    date: datetime
    value: float
    created_at: datetime
    meta: dict[str, Any] = field(default_factory=dict)
