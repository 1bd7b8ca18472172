from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


SessionType = Literal["strategy", "content_planning", "branding_workshop", "review", "onboarding"]
BookingStatus = Literal["scheduled", "completed", "cancelled", "no_show"]


@dataclass(frozen=True)
class Booking:
    id: str
    user_id: str
    session_type: SessionType
    title: str
    description: str | None
    start_at: datetime
    end_at: datetime
    status: BookingStatus
    meeting_url: str | None
    notes: str | None
    created_at: datetime


def build_meeting_url(booking_id: str) -> str:
    return f"https://meet.example.com/artist-portal/{booking_id[:8]}"
