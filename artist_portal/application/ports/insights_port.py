from __future__ import annotations

from typing import Protocol

from artist_portal.domain.entities.insights import Goal, Metric, Notification


class InsightsPort(Protocol):
    def list_notifications(self, *, user_id: str, unread_only: bool = False) -> list[Notification]:
        ...

    def list_goals(self, *, user_id: str) -> list[Goal]:
        ...

    def list_metrics(self, *, user_id: str, type: str | None = None) -> list[Metric]:
        ...
