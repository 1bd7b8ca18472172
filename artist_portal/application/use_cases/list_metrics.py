from __future__ import annotations

from artist_portal.application.ports.insights_port import InsightsPort
from artist_portal.domain.entities.insights import Metric
from artist_portal.domain.entities.user import User


class ListMetricsUseCase:
    def __init__(self, *, insights_port: InsightsPort):
        self._insights_port = insights_port

    def execute(self, *, user: User, type: str | None = None) -> list[Metric]:
        return self._insights_port.list_metrics(user_id=user.id, type=type or None)
