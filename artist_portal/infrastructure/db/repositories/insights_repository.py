from __future__ import annotations

from sqlalchemy import select

from artist_portal.application.ports.insights_port import InsightsPort
from artist_portal.infrastructure.db.mappers.portal_mapper import (
    map_row_to_goal,
    map_row_to_metric,
    map_row_to_notification,
)
from artist_portal.infrastructure.db.models.portal import GoalModel, MetricModel, NotificationModel

from .base import SqlRepository


notifications = NotificationModel.__table__
goals = GoalModel.__table__
metrics = MetricModel.__table__


class SqlInsightsRepository(SqlRepository, InsightsPort):
    def list_notifications(self, *, user_id: str, unread_only: bool = False):
        stmt = select(notifications).where(notifications.c.user_id == user_id)
        if unread_only:
            stmt = stmt.where(notifications.c.read_at.is_(None))
        stmt = stmt.order_by(notifications.c.created_at.desc())
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_notification(row) for row in rows]

    def list_goals(self, *, user_id: str):
        stmt = select(goals).where(goals.c.user_id == user_id).order_by(goals.c.created_at)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_goal(row) for row in rows]

    def list_metrics(self, *, user_id: str, type: str | None = None):
        stmt = select(metrics).where(metrics.c.user_id == user_id)
        if type:
            stmt = stmt.where(metrics.c.type == type)
        stmt = stmt.order_by(metrics.c.date)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_metric(row) for row in rows]
