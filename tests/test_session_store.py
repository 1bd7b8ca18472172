from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from artist_portal.application.use_cases.auth_gate import AuthGate, ensure_owner_or_admin
from artist_portal.application.use_cases.session_store import SessionStore
from artist_portal.domain.entities.user import AuthSession, User
from artist_portal.domain.exceptions import ForbiddenError, UnauthenticatedError


START = datetime(2026, 2, 1, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeAuthPort:
    def __init__(self, users=()):
        self.users = {user.id: user for user in users}
        self.sessions: dict[str, AuthSession] = {}
        self.deleted: list[str] = []

    def get_user_by_id(self, *, user_id):
        return self.users.get(user_id)

    def list_users(self):
        return list(self.users.values())

    def get_artist_profile(self, *, user_id):
        return None

    def create_session(self, *, session_id, user_id, expires_at, created_at):
        session = AuthSession(id=session_id, user_id=user_id, expires_at=expires_at, created_at=created_at)
        self.sessions[session_id] = session
        return session

    def get_session(self, *, session_id):
        return self.sessions.get(session_id)

    def delete_session(self, *, session_id):
        self.deleted.append(session_id)
        self.sessions.pop(session_id, None)


class FakeTokenPort:
    def __init__(self):
        self._counter = 0

    def generate_session_token(self):
        self._counter += 1
        return f"token-{self._counter}"

    def hash_session_token(self, *, token):
        return f"digest:{token}"

    def session_expires_at(self, *, now):
        return now + timedelta(days=7)


def _user(user_id: str, role: str) -> User:
    return User(
        id=user_id,
        email=f"{user_id}@demo.com",
        name=user_id,
        avatar_url=None,
        role=role,
        created_at=START,
    )


def _build(users=()):
    auth_port = FakeAuthPort(users)
    clock = FakeClock(START)
    store = SessionStore(auth_port=auth_port, token_port=FakeTokenPort(), clock=clock)
    return auth_port, clock, store


def test_create_persists_only_the_token_digest():
    auth_port, _, store = _build()

    issued = store.create(user_id="user-1")

    assert issued.token == "token-1"
    assert issued.expires_at == START + timedelta(days=7)
    assert list(auth_port.sessions) == ["digest:token-1"]
    assert auth_port.sessions["digest:token-1"].user_id == "user-1"


def test_resolve_returns_live_session():
    _, clock, store = _build()
    issued = store.create(user_id="user-1")

    clock.now = START + timedelta(days=6, hours=23)
    session = store.resolve(token=issued.token)

    assert session is not None
    assert session.user_id == "user-1"


def test_resolve_purges_expired_session():
    auth_port, clock, store = _build()
    issued = store.create(user_id="user-1")

    clock.now = START + timedelta(days=7)

    assert store.resolve(token=issued.token) is None
    assert auth_port.sessions == {}
    assert auth_port.deleted == ["digest:token-1"]


@pytest.mark.parametrize("token", [None, "", "   ", "unknown-token"])
def test_resolve_rejects_missing_or_unknown_tokens(token):
    auth_port, _, store = _build()
    store.create(user_id="user-1")

    assert store.resolve(token=token) is None
    assert auth_port.deleted == []


def test_destroy_is_idempotent():
    auth_port, _, store = _build()
    issued = store.create(user_id="user-1")

    store.destroy(token=issued.token)
    store.destroy(token=issued.token)
    store.destroy(token=None)

    assert store.resolve(token=issued.token) is None
    assert auth_port.sessions == {}


def test_auth_gate_distinguishes_unauthenticated_from_forbidden():
    artist = _user("artist-1", "artist")
    admin = _user("admin-1", "admin")
    auth_port, _, store = _build([artist, admin])
    gate = AuthGate(auth_port=auth_port, session_store=store)
    artist_token = store.create(user_id=artist.id).token
    admin_token = store.create(user_id=admin.id).token

    with pytest.raises(UnauthenticatedError):
        gate.require_role(token=None, role="admin")
    with pytest.raises(ForbiddenError):
        gate.require_role(token=artist_token, role="admin")
    assert gate.require_role(token=admin_token, role="admin") == admin
    assert gate.require_auth(token=artist_token) == artist


def test_auth_gate_treats_session_of_deleted_user_as_anonymous():
    auth_port, _, store = _build()
    gate = AuthGate(auth_port=auth_port, session_store=store)
    token = store.create(user_id="ghost").token

    assert gate.current_user(token=token) is None
    with pytest.raises(UnauthenticatedError):
        gate.require_auth(token=token)


def test_ensure_owner_or_admin():
    ensure_owner_or_admin(owner_id="artist-1", user=_user("artist-1", "artist"))
    ensure_owner_or_admin(owner_id="artist-1", user=_user("admin-1", "admin"))

    with pytest.raises(ForbiddenError):
        ensure_owner_or_admin(owner_id="artist-1", user=_user("artist-2", "artist"))
