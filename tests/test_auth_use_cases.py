from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from artist_portal.application.dto.auth import LoginInput, LogoutInput
from artist_portal.application.use_cases.list_users import ListUsersUseCase
from artist_portal.application.use_cases.login import LoginUseCase
from artist_portal.application.use_cases.logout_session import LogoutSessionUseCase
from artist_portal.application.use_cases.session_store import SessionStore
from artist_portal.domain.entities.user import AuthSession, User
from artist_portal.domain.exceptions import InvalidPasscodeError, UserNotFoundError


NOW = datetime(2026, 2, 1, 9, 0, tzinfo=timezone.utc)


class FakeAuthPort:
    def __init__(self, users=()):
        self.users = {user.id: user for user in users}
        self.sessions: dict[str, AuthSession] = {}

    def get_user_by_id(self, *, user_id: str) -> User | None:
        return self.users.get(user_id)

    def list_users(self) -> list[User]:
        return sorted(self.users.values(), key=lambda user: (user.role != "admin", user.name))

    def get_artist_profile(self, *, user_id: str):
        return None

    def create_session(self, *, session_id, user_id, expires_at, created_at) -> AuthSession:
        session = AuthSession(id=session_id, user_id=user_id, expires_at=expires_at, created_at=created_at)
        self.sessions[session_id] = session
        return session

    def get_session(self, *, session_id: str) -> AuthSession | None:
        return self.sessions.get(session_id)

    def delete_session(self, *, session_id: str) -> None:
        self.sessions.pop(session_id, None)


class FakeTokenPort:
    def generate_session_token(self) -> str:
        return "session-token"

    def hash_session_token(self, *, token: str) -> str:
        return f"hashed-{token}"

    def session_expires_at(self, *, now: datetime) -> datetime:
        return now + timedelta(days=7)


def _make_user(user_id: str, *, name: str, role: str) -> User:
    return User(
        id=user_id,
        email=f"{user_id}@demo.com",
        name=name,
        avatar_url=None,
        role=role,
        created_at=NOW,
    )


def _build_login(auth_port: FakeAuthPort) -> LoginUseCase:
    store = SessionStore(auth_port=auth_port, token_port=FakeTokenPort(), clock=lambda: NOW)
    return LoginUseCase(auth_port=auth_port, session_store=store, demo_passcode="DEMO2026")


def test_login_with_matching_passcode_creates_session():
    auth_port = FakeAuthPort([_make_user("user_artist_demo", name="Jordan Rivers", role="artist")])

    output = _build_login(auth_port).execute(LoginInput(user_id="user_artist_demo", passcode="DEMO2026"))

    assert output.user.id == "user_artist_demo"
    assert output.user.role == "artist"
    assert output.session_token == "session-token"
    assert output.session_expires_at == NOW + timedelta(days=7)
    assert "hashed-session-token" in auth_port.sessions


def test_login_without_passcode_is_allowed():
    auth_port = FakeAuthPort([_make_user("user_admin_demo", name="Alex Morgan", role="admin")])

    output = _build_login(auth_port).execute(LoginInput(user_id="user_admin_demo", passcode=None))

    assert output.user.role == "admin"
    assert len(auth_port.sessions) == 1


def test_login_with_wrong_passcode_creates_no_session():
    auth_port = FakeAuthPort([_make_user("user_artist_demo", name="Jordan Rivers", role="artist")])

    with pytest.raises(InvalidPasscodeError):
        _build_login(auth_port).execute(LoginInput(user_id="user_artist_demo", passcode="WRONG"))

    assert auth_port.sessions == {}


def test_login_unknown_user_raises_not_found():
    auth_port = FakeAuthPort()

    with pytest.raises(UserNotFoundError):
        _build_login(auth_port).execute(LoginInput(user_id="nobody", passcode="DEMO2026"))

    assert auth_port.sessions == {}


def test_logout_deletes_session_and_tolerates_repeats():
    auth_port = FakeAuthPort([_make_user("user_artist_demo", name="Jordan Rivers", role="artist")])
    store = SessionStore(auth_port=auth_port, token_port=FakeTokenPort(), clock=lambda: NOW)
    token = store.create(user_id="user_artist_demo").token
    use_case = LogoutSessionUseCase(session_store=store)

    use_case.execute(LogoutInput(session_token=token))
    use_case.execute(LogoutInput(session_token=token))

    assert auth_port.sessions == {}


def test_list_users_returns_public_fields():
    auth_port = FakeAuthPort(
        [
            _make_user("user_artist_demo", name="Jordan Rivers", role="artist"),
            _make_user("user_admin_demo", name="Alex Morgan", role="admin"),
        ]
    )

    users = ListUsersUseCase(auth_port=auth_port).execute()

    assert [user.id for user in users] == ["user_admin_demo", "user_artist_demo"]
    assert not hasattr(users[0], "created_at")
