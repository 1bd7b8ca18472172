from __future__ import annotations

from artist_portal.application.dto.bookings import UpdateBookingInput
from artist_portal.application.ports.transaction_port import TransactionPort, TransactionScope
from artist_portal.domain.entities.booking import Booking
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import BookingNotFoundError

from .auth_gate import ensure_owner_or_admin
from .record_activity import ActivityLogger


class UpdateBookingUseCase:
    def __init__(self, *, transaction_port: TransactionPort, activity_logger: ActivityLogger):
        self._transaction_port = transaction_port
        self._activity_logger = activity_logger

    def execute(self, command: UpdateBookingInput, *, user: User) -> Booking:
        def _tx(scope: TransactionScope) -> Booking:
            booking = scope.bookings.get_booking(booking_id=command.booking_id)
            if booking is None:
                raise BookingNotFoundError("Booking not found")
            ensure_owner_or_admin(owner_id=booking.user_id, user=user)

            updated = booking
            if not command.changes.is_empty():
                updated = scope.bookings.update_booking(booking_id=booking.id, changes=command.changes)

            self._activity_logger.record(
                scope.activities,
                actor_id=user.id,
                type="booking",
                action="cancelled" if command.changes.status == "cancelled" else "updated",
                entity_type="booking",
                entity_id=booking.id,
            )
            return updated

        return self._transaction_port.execute_in_transaction(_tx)
