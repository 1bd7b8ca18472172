from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PublicUserOutput:
    id: str
    email: str
    name: str
    avatar_url: str | None
    role: str


@dataclass(frozen=True)
class LoginInput:
    user_id: str
    passcode: str | None


@dataclass(frozen=True)
class LoginOutput:
    user: PublicUserOutput
    session_token: str
    session_expires_at: datetime


@dataclass(frozen=True)
class LogoutInput:
    session_token: str | None


@dataclass(frozen=True)
class IssuedSession:
    token: str
    expires_at: datetime
