from __future__ import annotations

from artist_portal.application.ports.activity_port import ActivityPort
from artist_portal.domain.entities.activity import Activity
from artist_portal.domain.entities.user import User


MAX_ACTIVITY_LIMIT = 100


class ListActivitiesUseCase:
    def __init__(self, *, activity_port: ActivityPort, default_limit: int = 20):
        self._activity_port = activity_port
        self._default_limit = default_limit

    def execute(self, *, user: User, limit: int | None = None) -> list[Activity]:
        """Admins see every actor's activity; artists only their own."""
        return self._activity_port.list_activities(
            user_id=None if user.is_admin else user.id,
            limit=self._clamp(limit),
        )

    def execute_all(self, *, limit: int | None = None) -> list[Activity]:
        return self._activity_port.list_activities(user_id=None, limit=self._clamp(limit))

    def _clamp(self, limit: int | None) -> int:
        if limit is None or limit <= 0:
            return self._default_limit
        return min(limit, MAX_ACTIVITY_LIMIT)
