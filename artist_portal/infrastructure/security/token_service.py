from __future__ import annotations

import hashlib
import secrets
from datetime import datetime, timedelta

from artist_portal.application.ports.token_port import TokenPort


class SessionTokenService(TokenPort):
    def __init__(self, *, session_ttl_days: int):
        self._session_ttl_days = session_ttl_days

    def generate_session_token(self) -> str:
        return secrets.token_urlsafe(32)

    def hash_session_token(self, *, token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def session_expires_at(self, *, now: datetime) -> datetime:
        return now + timedelta(days=self._session_ttl_days)
