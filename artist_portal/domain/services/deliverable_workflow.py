from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from artist_portal.domain.entities.project import DeliverableStatus


APPROVED: DeliverableStatus = "approved"
CANCELLED: DeliverableStatus = "cancelled"

# Canonical review loop. Writes are not restricted to it.
WORKFLOW_TRANSITIONS: dict[str, frozenset[str]] = {
    "not_started": frozenset({"in_progress"}),
    "in_progress": frozenset({"review"}),
    "review": frozenset({"approved", "revision"}),
    "revision": frozenset({"review"}),
    "approved": frozenset(),
    "cancelled": frozenset(),
}


@dataclass(frozen=True)
class StatusChange:
    status: DeliverableStatus
    completed_at: datetime | None
    activity_action: str
    activity_meta: dict[str, Any] = field(default_factory=dict)


def is_workflow_transition(current: str, new: str) -> bool:
    if new == CANCELLED or current == new:
        return True
    return new in WORKFLOW_TRANSITIONS.get(current, frozenset())


def apply_status_change(new_status: DeliverableStatus, *, now: datetime) -> StatusChange:
    approved = new_status == APPROVED
    return StatusChange(
        status=new_status,
        completed_at=now if approved else None,
        activity_action="approved" if approved else "updated",
        activity_meta={"newStatus": new_status},
    )
