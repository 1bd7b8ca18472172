from __future__ import annotations

from uuid import uuid4

from artist_portal.application.dto.bookings import CreateBookingInput
from artist_portal.application.ports.transaction_port import TransactionPort, TransactionScope
from artist_portal.domain.entities.booking import Booking, build_meeting_url
from artist_portal.domain.entities.user import User

from .auth_common import Clock, utcnow
from .record_activity import ActivityLogger


class CreateBookingUseCase:
    def __init__(
        self,
        *,
        transaction_port: TransactionPort,
        activity_logger: ActivityLogger,
        clock: Clock = utcnow,
    ):
        self._transaction_port = transaction_port
        self._activity_logger = activity_logger
        self._clock = clock

    def execute(self, command: CreateBookingInput, *, user: User) -> Booking:
        booking_id = str(uuid4())

        def _tx(scope: TransactionScope) -> Booking:
            booking = scope.bookings.create_booking(
                booking_id=booking_id,
                user_id=user.id,
                session_type=command.session_type,
                title=command.title,
                description=command.description or None,
                start_at=command.start_at,
                end_at=command.end_at,
                status="scheduled",
                meeting_url=build_meeting_url(booking_id),
                created_at=self._clock(),
            )
            self._activity_logger.record(
                scope.activities,
                actor_id=user.id,
                type="booking",
                action="scheduled",
                entity_type="booking",
                entity_id=booking.id,
            )
            return booking

        return self._transaction_port.execute_in_transaction(_tx)
