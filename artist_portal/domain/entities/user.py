from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal


UserRole = Literal["artist", "admin"]

ROLE_ARTIST: UserRole = "artist"
ROLE_ADMIN: UserRole = "admin"


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str
    avatar_url: str | None
    role: UserRole
    created_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


@dataclass(frozen=True)
class ArtistProfile:
    id: str
    user_id: str
    genre: str | None
    bio: str | None
    goals: tuple[str, ...] = ()
    social_links: dict[str, str] = field(default_factory=dict)
    monthly_listeners: int | None = None
    followers: int | None = None


@dataclass(frozen=True)
class AuthSession:
    """Server-side session row. ``id`` is the digest of the client token."""

    id: str
    user_id: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
