from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from artist_portal.domain.entities.project import DeliverableStatus


@dataclass(frozen=True)
class UpdateDeliverableInput:
    deliverable_id: str
    status: DeliverableStatus | None = None
    comment: str | None = None
    is_internal: bool = False


@dataclass(frozen=True)
class UpdateDeliverableOutput:
    deliverable_id: str
    project_id: str
    status: str
    completed_at: datetime | None
    project_progress: int
    comment_id: str | None
