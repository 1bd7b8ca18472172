from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Activity:
    id: str
    user_id: str | None
    type: str
    action: str
    entity_type: str | None
    entity_id: str | None
    created_at: datetime
    meta: dict[str, Any] = field(default_factory=dict)
    user_name: str | None = None
    user_avatar: str | None = None
    user_role: str | None = None
