from __future__ import annotations

from datetime import datetime

from sqlalchemy import insert, select, update

from artist_portal.application.dto.bookings import BookingChanges
from artist_portal.application.ports.booking_port import BookingPort
from artist_portal.infrastructure.db.mappers.portal_mapper import map_row_to_booking
from artist_portal.infrastructure.db.models.portal import BookingModel

from .base import SqlRepository


bookings = BookingModel.__table__


class SqlBookingsRepository(SqlRepository, BookingPort):
    def list_bookings_for_user(
        self,
        *,
        user_id: str,
        status: str | None = None,
        starting_from: datetime | None = None,
    ):
        stmt = select(bookings).where(bookings.c.user_id == user_id)
        if status:
            stmt = stmt.where(bookings.c.status == status)
        if starting_from is not None:
            stmt = stmt.where(bookings.c.start_at >= starting_from)
        stmt = stmt.order_by(bookings.c.start_at)
        with self._read() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [map_row_to_booking(row) for row in rows]

    def get_booking(self, *, booking_id: str):
        stmt = select(bookings).where(bookings.c.id == booking_id).limit(1)
        with self._read() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return map_row_to_booking(row)

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
    ):
        values = {
            "id": booking_id,
            "user_id": user_id,
            "session_type": session_type,
            "title": title,
            "description": description,
            "start_at": start_at,
            "end_at": end_at,
            "status": status,
            "meeting_url": meeting_url,
            "notes": None,
            "created_at": created_at,
        }
        with self._write() as conn:
            conn.execute(insert(bookings).values(**values))
        return map_row_to_booking(values)

    def update_booking(self, *, booking_id: str, changes: BookingChanges):
        values = {}
        if changes.status is not None:
            values["status"] = changes.status
        if changes.start_at is not None:
            values["start_at"] = changes.start_at
        if changes.end_at is not None:
            values["end_at"] = changes.end_at
        if changes.notes_set:
            values["notes"] = changes.notes

        with self._write() as conn:
            if values:
                conn.execute(update(bookings).where(bookings.c.id == booking_id).values(**values))
            row = conn.execute(select(bookings).where(bookings.c.id == booking_id)).mappings().one()
        return map_row_to_booking(row)
