from __future__ import annotations

from datetime import datetime, timezone

from artist_portal.application.use_cases.get_me import GetMeUseCase
from artist_portal.domain.entities.catalog import Plan
from artist_portal.domain.entities.subscription import Subscription
from artist_portal.domain.entities.user import ArtistProfile, User


NOW = datetime(2026, 2, 1, tzinfo=timezone.utc)


class FakeAuthPort:
    def __init__(self, profile: ArtistProfile | None):
        self.profile = profile
        self.profile_lookups = 0

    def get_artist_profile(self, *, user_id: str) -> ArtistProfile | None:
        self.profile_lookups += 1
        return self.profile


class FakeCatalogPort:
    def __init__(self, subscription: Subscription | None, plan: Plan | None):
        self.subscription = subscription
        self.plan = plan

    def get_subscription_for_user(self, *, user_id: str) -> Subscription | None:
        return self.subscription

    def get_plan(self, *, plan_id: str) -> Plan | None:
        if self.plan is not None and self.plan.id == plan_id:
            return self.plan
        return None


def _user(role: str) -> User:
    return User(
        id=f"user-{role}",
        email=f"{role}@demo.com",
        name="Jordan Rivers",
        avatar_url=None,
        role=role,
        created_at=NOW,
    )


PROFILE = ArtistProfile(id="profile-1", user_id="user-artist", genre="Indie Pop", bio=None)
PLAN = Plan(
    id="plan_premium",
    name="Premium",
    slug="premium",
    description=None,
    price_monthly=999.0,
    price_yearly=None,
    features=(),
    deliverables=(),
    sessions_per_month=2,
    response_sla="24 hours",
    is_popular=True,
    active=True,
    sort_order=2,
)
SUBSCRIPTION = Subscription(
    id="sub-1",
    user_id="user-artist",
    plan_id="plan_premium",
    status="active",
    current_period_start=NOW,
    current_period_end=None,
    created_at=NOW,
)


def test_get_me_returns_profile_and_subscription_for_artist():
    use_case = GetMeUseCase(auth_port=FakeAuthPort(PROFILE), catalog_port=FakeCatalogPort(SUBSCRIPTION, PLAN))

    output = use_case.execute(user=_user("artist"))

    assert output.profile == PROFILE
    assert output.subscription == SUBSCRIPTION
    assert output.plan == PLAN


def test_get_me_skips_artist_data_for_admin():
    auth_port = FakeAuthPort(PROFILE)
    use_case = GetMeUseCase(auth_port=auth_port, catalog_port=FakeCatalogPort(SUBSCRIPTION, PLAN))

    output = use_case.execute(user=_user("admin"))

    assert output.profile is None
    assert output.subscription is None
    assert auth_port.profile_lookups == 0


def test_get_me_without_subscription_has_no_plan():
    use_case = GetMeUseCase(auth_port=FakeAuthPort(None), catalog_port=FakeCatalogPort(None, PLAN))

    output = use_case.execute(user=_user("artist"))

    assert output.subscription is None
    assert output.plan is None
