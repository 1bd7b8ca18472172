from __future__ import annotations

from datetime import datetime

from .catalog import SubscriptionResponse
from .common import ApiModel, SuccessResponse, UserResponse


class ArtistProfileResponse(ApiModel):
    id: str
    genre: str | None = None
    bio: str | None = None
    goals: list[str]
    social_links: dict[str, str]
    monthly_listeners: int | None = None
    followers: int | None = None


class MeUserResponse(UserResponse):
    created_at: datetime
    profile: ArtistProfileResponse | None = None
    subscription: SubscriptionResponse | None = None


class MeResponse(SuccessResponse):
    user: MeUserResponse | None
