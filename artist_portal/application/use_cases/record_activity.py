from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from artist_portal.application.ports.activity_port import ActivityPort
from artist_portal.domain.entities.activity import Activity

from .auth_common import Clock, utcnow


logger = logging.getLogger(__name__)


class ActivityLogger:
    """Best-effort audit trail.

    A failed append is logged and swallowed so the triggering mutation still
    succeeds. Repositories isolate the insert in a savepoint when it runs inside
    a larger transaction.
    """

    def __init__(self, *, clock: Clock = utcnow):
        self._clock = clock

    def record(
        self,
        activities: ActivityPort,
        *,
        actor_id: str | None,
        type: str,
        action: str,
        entity_type: str | None = None,
        entity_id: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> Activity | None:
        try:
            return activities.append_activity(
                activity_id=str(uuid4()),
                user_id=actor_id,
                type=type,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                meta=dict(meta or {}),
                created_at=self._clock(),
            )
        except Exception:
            logger.warning(
                "activity_logger: record_failed type=%s action=%s entity_type=%s entity_id=%s",
                type,
                action,
                entity_type,
                entity_id,
                exc_info=True,
            )
            return None
