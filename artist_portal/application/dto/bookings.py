from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from artist_portal.domain.entities.booking import BookingStatus, SessionType


@dataclass(frozen=True)
class CreateBookingInput:
    session_type: SessionType
    title: str
    description: str | None
    start_at: datetime
    end_at: datetime


@dataclass(frozen=True)
class BookingChanges:
    """Partial update. ``notes_set`` distinguishes an explicit empty note from no change."""

    status: BookingStatus | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    notes: str | None = None
    notes_set: bool = False

    def is_empty(self) -> bool:
        return (
            self.status is None
            and self.start_at is None
            and self.end_at is None
            and not self.notes_set
        )


@dataclass(frozen=True)
class UpdateBookingInput:
    booking_id: str
    changes: BookingChanges
