from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, insert, select

from artist_portal.application.ports.auth_port import AuthPort
from artist_portal.infrastructure.db.mappers.portal_mapper import (
    map_row_to_artist_profile,
    map_row_to_auth_session,
    map_row_to_user,
)
from artist_portal.infrastructure.db.models.portal import ArtistProfileModel, SessionModel, UserModel

from .base import SqlRepository


users = UserModel.__table__
artist_profiles = ArtistProfileModel.__table__
sessions = SessionModel.__table__


class SqlAccountsRepository(SqlRepository, AuthPort):
    def get_user_by_id(self, *, user_id: str):
        stmt = select(users).where(users.c.id == user_id).limit(1)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def list_users(self):
        stmt = select(users).order_by(users.c.role.desc(), users.c.name)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_user(row) for row in rows]

    def get_artist_profile(self, *, user_id: str):
        stmt = select(artist_profiles).where(artist_profiles.c.user_id == user_id).limit(1)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_artist_profile(row)

    def create_session(
        self,
        *,
        session_id: str,
        user_id: str,
        expires_at: datetime,
        created_at: datetime,
    ):
        values = {
            "id": session_id,
            "user_id": user_id,
            "expires_at": expires_at,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(sessions).values(**values))
        return map_row_to_auth_session(values)

    def get_session(self, *, session_id: str):
        stmt = select(sessions).where(sessions.c.id == session_id).limit(1)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_auth_session(row)

    def delete_session(self, *, session_id: str) -> None:
        with self._write() as conn:
            conn.execute(delete(sessions).where(sessions.c.id == session_id))
