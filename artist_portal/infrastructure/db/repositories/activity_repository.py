from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection

from artist_portal.application.ports.activity_port import ActivityPort
from artist_portal.infrastructure.db.mappers.portal_mapper import map_row_to_activity
from artist_portal.infrastructure.db.models.portal import ActivityModel, UserModel

from .base import SqlRepository


activities = ActivityModel.__table__
users = UserModel.__table__


class SqlActivityRepository(SqlRepository, ActivityPort):
    @contextmanager
    def _isolated_write(self) -> Iterator[Connection]:
        # Inside a caller's transaction the insert gets its own savepoint, so a
        # failed append rolls back alone and the outer mutation can still commit.
        if self._connection is None:
            with self._write() as conn:
                yield conn
            return
        with self._connection.begin_nested():
            yield self._connection

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
    ):
        values = {
            "id": activity_id,
            "user_id": user_id,
            "type": type,
            "action": action,
            "entity_type": entity_type,
            "entity_id": entity_id,
            "meta": meta,
            "created_at": created_at,
        }
        with self._isolated_write() as conn:
            conn.execute(insert(activities).values(**values))
        return map_row_to_activity(values)

    def list_activities(self, *, user_id: str | None, limit: int):
        stmt = select(
            activities,
            users.c.name.label("user_name"),
            users.c.avatar_url.label("user_avatar"),
            users.c.role.label("user_role"),
        ).outerjoin(users, users.c.id == activities.c.user_id)
        if user_id is not None:
            stmt = stmt.where(activities.c.user_id == user_id)
        stmt = stmt.order_by(activities.c.created_at.desc(), activities.c.id).limit(limit)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_activity(row) for row in rows]
