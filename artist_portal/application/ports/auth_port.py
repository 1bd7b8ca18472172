from __future__ import annotations

from datetime import datetime
from typing import Protocol

from artist_portal.domain.entities.user import ArtistProfile, AuthSession, User


class AuthPort(Protocol):
    def get_user_by_id(self, *, user_id: str) -> User | None:
        ...

    def list_users(self) -> list[User]:
        ...

    def get_artist_profile(self, *, user_id: str) -> ArtistProfile | None:
        ...

    def create_session(
        self,
        *,
        session_id: str,
        user_id: str,
        expires_at: datetime,
        created_at: datetime,
    ) -> AuthSession:
        ...

    def get_session(self, *, session_id: str) -> AuthSession | None:
        ...

    def delete_session(self, *, session_id: str) -> None:
        ...
