from __future__ import annotations

from dataclasses import dataclass

from artist_portal.domain.entities.catalog import Plan
from artist_portal.domain.entities.subscription import Subscription
from artist_portal.domain.entities.user import ArtistProfile, User


@dataclass(frozen=True)
class MeOutput:
    user: User
    profile: ArtistProfile | None
    subscription: Subscription | None
    plan: Plan | None
