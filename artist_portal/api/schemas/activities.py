from __future__ import annotations

from datetime import datetime
from typing import Any

from .common import ApiModel, SuccessResponse


class ActivityResponse(ApiModel):
    id: str
    type: str
    action: str
    entity_type: str | None = None
    entity_id: str | None = None
    meta: dict[str, Any]
    created_at: datetime
    user_id: str | None = None
    user_name: str | None = None
    user_avatar: str | None = None
    user_role: str | None = None


class ActivitiesResponse(SuccessResponse):
    activities: list[ActivityResponse]
