from __future__ import annotations

import hmac
import logging

from artist_portal.application.dto.auth import LoginInput, LoginOutput
from artist_portal.application.ports.auth_port import AuthPort
from artist_portal.domain.exceptions import InvalidPasscodeError, UserNotFoundError

from .auth_common import build_public_user_output
from .session_store import SessionStore


logger = logging.getLogger(__name__)


class LoginUseCase:
    def __init__(self, *, auth_port: AuthPort, session_store: SessionStore, demo_passcode: str):
        self._auth_port = auth_port
        self._session_store = session_store
        self._demo_passcode = demo_passcode

    def execute(self, command: LoginInput) -> LoginOutput:
        # Passcode is optional; when sent it must match the shared demo value.
        if command.passcode and not hmac.compare_digest(
            command.passcode.encode("utf-8"),
            self._demo_passcode.encode("utf-8"),
        ):
            logger.info("login: invalid_passcode user_id=%s", command.user_id)
            raise InvalidPasscodeError("Invalid passcode")

        user = self._auth_port.get_user_by_id(user_id=command.user_id.strip())
        if user is None:
            raise UserNotFoundError("User not found")

        issued = self._session_store.create(user_id=user.id)
        return LoginOutput(
            user=build_public_user_output(user),
            session_token=issued.token,
            session_expires_at=issued.expires_at,
        )
