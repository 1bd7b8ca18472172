from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


SubscriptionStatus = Literal["active", "cancelled", "past_due", "trialing"]

SUBSCRIPTION_PERIOD_DAYS = 30


@dataclass(frozen=True)
class Subscription:
    id: str
    user_id: str
    plan_id: str
    status: SubscriptionStatus
    current_period_start: datetime | None
    current_period_end: datetime | None
    created_at: datetime
