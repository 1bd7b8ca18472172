from __future__ import annotations

from artist_portal.application.ports.insights_port import InsightsPort
from artist_portal.domain.entities.insights import Goal
from artist_portal.domain.entities.user import User


class ListGoalsUseCase:
    def __init__(self, *, insights_port: InsightsPort):
        self._insights_port = insights_port

    def execute(self, *, user: User) -> list[Goal]:
        return self._insights_port.list_goals(user_id=user.id)
