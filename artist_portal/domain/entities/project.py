from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal


ProjectType = Literal["subscription", "addon", "custom"]
ProjectStatus = Literal["active", "completed", "on_hold", "cancelled"]

DeliverableStatus = Literal[
    "not_started",
    "in_progress",
    "review",
    "revision",
    "approved",
    "cancelled",
]
DeliverablePriority = Literal["low", "medium", "high", "urgent"]

DELIVERABLE_STATUSES: tuple[str, ...] = (
    "not_started",
    "in_progress",
    "review",
    "revision",
    "approved",
    "cancelled",
)


@dataclass(frozen=True)
class Project:
    id: str
    user_id: str
    title: str
    description: str | None
    type: ProjectType
    status: ProjectStatus
    progress: int
    start_date: datetime | None
    due_date: datetime | None
    completed_at: datetime | None
    created_at: datetime
    meta: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Deliverable:
    id: str
    project_id: str
    title: str
    description: str | None
    status: DeliverableStatus
    priority: DeliverablePriority
    due_date: datetime | None
    completed_at: datetime | None
    assigned_to: str | None
    sort_order: int
    created_at: datetime
    meta: dict[str, Any] = field(default_factory=dict)
    project_title: str | None = None


@dataclass(frozen=True)
class DeliverableCounts:
    total: int
    approved: int


@dataclass(frozen=True)
class DeliverableComment:
    id: str
    deliverable_id: str
    author_id: str
    content: str
    is_internal: bool
    created_at: datetime


@dataclass(frozen=True)
class Message:
    id: str
    project_id: str
    author_id: str
    content: str
    attachment_url: str | None
    read_at: datetime | None
    created_at: datetime
    author_name: str | None = None
    author_avatar: str | None = None
    author_role: str | None = None


@dataclass(frozen=True)
class Attachment:
    id: str
    project_id: str | None
    deliverable_id: str | None
    name: str
    url: str
    type: str | None
    size: int | None
    uploaded_by: str | None
    created_at: datetime
