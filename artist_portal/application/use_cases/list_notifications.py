from __future__ import annotations

from artist_portal.application.ports.insights_port import InsightsPort
from artist_portal.domain.entities.insights import Notification
from artist_portal.domain.entities.user import User


class ListNotificationsUseCase:
    def __init__(self, *, insights_port: InsightsPort):
        self._insights_port = insights_port

    def execute(self, *, user: User, unread_only: bool = False) -> list[Notification]:
        return self._insights_port.list_notifications(user_id=user.id, unread_only=unread_only)
