from __future__ import annotations

from artist_portal.application.dto.auth import LogoutInput

from .session_store import SessionStore


class LogoutSessionUseCase:
    def __init__(self, *, session_store: SessionStore):
        self._session_store = session_store

    def execute(self, command: LogoutInput) -> None:
        self._session_store.destroy(token=command.session_token)
