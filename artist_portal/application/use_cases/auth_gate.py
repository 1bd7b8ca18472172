from __future__ import annotations

from artist_portal.application.ports.auth_port import AuthPort
from artist_portal.domain.entities.user import User, UserRole
from artist_portal.domain.exceptions import ForbiddenError, UnauthenticatedError
from artist_portal.domain.services.access import can_manage

from .session_store import SessionStore


class AuthGate:
    def __init__(self, *, auth_port: AuthPort, session_store: SessionStore):
        self._auth_port = auth_port
        self._session_store = session_store

    def current_user(self, *, token: str | None) -> User | None:
        session = self._session_store.resolve(token=token)
        if session is None:
            return None
        return self._auth_port.get_user_by_id(user_id=session.user_id)

    def require_auth(self, *, token: str | None) -> User:
        user = self.current_user(token=token)
        if user is None:
            raise UnauthenticatedError("Authentication required")
        return user

    def require_role(self, *, token: str | None, role: UserRole) -> User:
        user = self.require_auth(token=token)
        ensure_role(user, role)
        return user


def ensure_role(user: User, role: UserRole) -> None:
    if user.role != role:
        raise ForbiddenError(f"{role.capitalize()} access required")


def ensure_owner_or_admin(*, owner_id: str, user: User) -> None:
    if not can_manage(owner_id=owner_id, user=user):
        raise ForbiddenError("Access denied")
