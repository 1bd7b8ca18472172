from __future__ import annotations

from datetime import datetime
from typing import Protocol

from artist_portal.application.dto.bookings import BookingChanges
from artist_portal.domain.entities.booking import Booking


class BookingPort(Protocol):
    def list_bookings_for_user(
        self,
        *,
        user_id: str,
        status: str | None = None,
        starting_from: datetime | None = None,
    ) -> list[Booking]:
        ...

    def get_booking(self, *, booking_id: str) -> Booking | None:
        ...

    def create_booking(
        self,
        *,
        booking_id: str,
        user_id: str,
        session_type: str,
        title: str,
        description: str | None,
        start_at: datetime,
        end_at: datetime,
        status: str,
        meeting_url: str | None,
        created_at: datetime,
    ) -> Booking:
        ...

    def update_booking(self, *, booking_id: str, changes: BookingChanges) -> Booking:
        ...
