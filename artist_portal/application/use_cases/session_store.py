from __future__ import annotations

import logging

from artist_portal.application.dto.auth import IssuedSession
from artist_portal.application.ports.auth_port import AuthPort
from artist_portal.application.ports.token_port import TokenPort
from artist_portal.domain.entities.user import AuthSession

from .auth_common import Clock, utcnow


logger = logging.getLogger(__name__)


class SessionStore:
    """Opaque session tokens backed by the ``sessions`` table.

    Only the token digest is persisted. Expired rows are purged lazily on
    ``resolve``; there is no background sweep.
    """

    def __init__(self, *, auth_port: AuthPort, token_port: TokenPort, clock: Clock = utcnow):
        self._auth_port = auth_port
        self._token_port = token_port
        self._clock = clock

    def create(self, *, user_id: str) -> IssuedSession:
        now = self._clock()
        token = self._token_port.generate_session_token()
        expires_at = self._token_port.session_expires_at(now=now)
        self._auth_port.create_session(
            session_id=self._token_port.hash_session_token(token=token),
            user_id=user_id,
            expires_at=expires_at,
            created_at=now,
        )
        logger.info("session_store: created user_id=%s expires_at=%s", user_id, expires_at.isoformat())
        return IssuedSession(token=token, expires_at=expires_at)

    def resolve(self, *, token: str | None) -> AuthSession | None:
        token = (token or "").strip()
        if not token:
            return None

        session_id = self._token_port.hash_session_token(token=token)
        session = self._auth_port.get_session(session_id=session_id)
        if session is None:
            return None
        if session.is_expired(self._clock()):
            self._auth_port.delete_session(session_id=session_id)
            logger.info("session_store: purged_expired user_id=%s", session.user_id)
            return None
        return session

    def destroy(self, *, token: str | None) -> None:
        token = (token or "").strip()
        if not token:
            return
        self._auth_port.delete_session(session_id=self._token_port.hash_session_token(token=token))
