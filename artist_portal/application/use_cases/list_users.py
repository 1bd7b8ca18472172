from __future__ import annotations

from artist_portal.application.dto.auth import PublicUserOutput
from artist_portal.application.ports.auth_port import AuthPort

from .auth_common import build_public_user_output


class ListUsersUseCase:
    def __init__(self, *, auth_port: AuthPort):
        self._auth_port = auth_port

    def execute(self) -> list[PublicUserOutput]:
        return [build_public_user_output(user) for user in self._auth_port.list_users()]
