from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol

from artist_portal.domain.entities.activity import Activity


class ActivityPort(Protocol):
    def append_activity(
        self,
        *,
        activity_id: str,
        user_id: str | None,
        type: str,
        action: str,
        entity_type: str | None,
        entity_id: str | None,
        meta: dict[str, Any],
        created_at: datetime,
    ) -> Activity:
        ...

    def list_activities(self, *, user_id: str | None, limit: int) -> list[Activity]:
        ...
