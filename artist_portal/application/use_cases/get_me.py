from __future__ import annotations

from artist_portal.application.dto.me import MeOutput
from artist_portal.application.ports.auth_port import AuthPort
from artist_portal.application.ports.catalog_port import CatalogPort
from artist_portal.domain.entities.user import ROLE_ARTIST, User


class GetMeUseCase:
    def __init__(self, *, auth_port: AuthPort, catalog_port: CatalogPort):
        self._auth_port = auth_port
        self._catalog_port = catalog_port

    def execute(self, *, user: User) -> MeOutput:
        if user.role != ROLE_ARTIST:
            return MeOutput(user=user, profile=None, subscription=None, plan=None)

        profile = self._auth_port.get_artist_profile(user_id=user.id)
        subscription = self._catalog_port.get_subscription_for_user(user_id=user.id)
        plan = None
        if subscription is not None:
            plan = self._catalog_port.get_plan(plan_id=subscription.plan_id)
        return MeOutput(user=user, profile=profile, subscription=subscription, plan=plan)
