from __future__ import annotations

from artist_portal.application.ports.booking_port import BookingPort
from artist_portal.domain.entities.booking import Booking
from artist_portal.domain.entities.user import User

from .auth_common import Clock, utcnow


class ListBookingsUseCase:
    def __init__(self, *, booking_port: BookingPort, clock: Clock = utcnow):
        self._booking_port = booking_port
        self._clock = clock

    def execute(self, *, user: User, status: str | None = None, upcoming: bool = False) -> list[Booking]:
        return self._booking_port.list_bookings_for_user(
            user_id=user.id,
            status=status,
            starting_from=self._clock() if upcoming else None,
        )
