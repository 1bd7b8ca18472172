from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from artist_portal.application.dto.auth import PublicUserOutput
from artist_portal.domain.entities.user import User


Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_public_user_output(user: User) -> PublicUserOutput:
    return PublicUserOutput(
        id=user.id,
        email=user.email,
        name=user.name,
        avatar_url=user.avatar_url,
        role=user.role,
    )
