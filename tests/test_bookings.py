from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import insert

from artist_portal.application.dto.bookings import BookingChanges, CreateBookingInput, UpdateBookingInput
from artist_portal.application.use_cases.create_booking import CreateBookingUseCase
from artist_portal.application.use_cases.list_bookings import ListBookingsUseCase
from artist_portal.application.use_cases.record_activity import ActivityLogger
from artist_portal.application.use_cases.update_booking import UpdateBookingUseCase
from artist_portal.domain.exceptions import BookingNotFoundError, ForbiddenError
from artist_portal.infrastructure.db.engine import create_db_engine, create_schema
from artist_portal.infrastructure.db.models.portal import UserModel
from artist_portal.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from artist_portal.infrastructure.db.repositories.activity_repository import SqlActivityRepository
from artist_portal.infrastructure.db.repositories.bookings_repository import SqlBookingsRepository
from artist_portal.infrastructure.db.repositories.transaction import SqlTransactionRunner
from artist_portal.infrastructure.db.seeds.seed_demo import ARTIST_USER_ID, seed_demo


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestBookings:
    def setup_method(self):
        self.engine = create_db_engine("sqlite://")
        create_schema(self.engine)
        seed_demo(self.engine, now=NOW)
        with self.engine.begin() as conn:
            conn.execute(
                insert(UserModel.__table__).values(
                    id="user_other_artist",
                    email="other@demo.com",
                    name="Sam Lake",
                    role="artist",
                    created_at=NOW,
                )
            )
        accounts = SqlAccountsRepository(self.engine)
        self.artist = accounts.get_user_by_id(user_id=ARTIST_USER_ID)
        self.other = accounts.get_user_by_id(user_id="user_other_artist")
        self.logger = ActivityLogger(clock=lambda: NOW)
        self.runner = SqlTransactionRunner(self.engine)

    def teardown_method(self):
        self.engine.dispose()

    def _create(self, user):
        start_at = NOW + timedelta(days=1)
        return CreateBookingUseCase(
            transaction_port=self.runner,
            activity_logger=self.logger,
            clock=lambda: NOW,
        ).execute(
            CreateBookingInput(
                session_type="content_planning",
                title="Content Planning",
                description="",
                start_at=start_at,
                end_at=start_at + timedelta(hours=1),
            ),
            user=user,
        )

    def test_create_booking_is_scheduled_with_meeting_link(self):
        booking = self._create(self.artist)

        assert booking.status == "scheduled"
        assert booking.description is None
        assert booking.meeting_url.endswith(booking.id[:8])
        stored = SqlBookingsRepository(self.engine).get_booking(booking_id=booking.id)
        assert stored.start_at == NOW + timedelta(days=1)

        activities = SqlActivityRepository(self.engine).list_activities(user_id=self.artist.id, limit=5)
        assert [(a.type, a.action, a.entity_id) for a in activities] == [("booking", "scheduled", booking.id)]
        assert activities[0].user_name == "Jordan Rivers"

    def test_upcoming_filter_excludes_past_sessions(self):
        self._create(self.artist)
        use_case = ListBookingsUseCase(
            booking_port=SqlBookingsRepository(self.engine),
            clock=lambda: NOW + timedelta(days=2),
        )

        upcoming = use_case.execute(user=self.artist, upcoming=True)
        every = use_case.execute(user=self.artist)

        assert [b.title for b in upcoming] == ["Quarterly Strategy Planning"]
        assert len(every) == 2
        assert every[0].start_at <= every[1].start_at

    def test_cancel_records_cancel_activity(self):
        booking = self._create(self.artist)
        use_case = UpdateBookingUseCase(transaction_port=self.runner, activity_logger=self.logger)

        updated = use_case.execute(
            UpdateBookingInput(booking_id=booking.id, changes=BookingChanges(status="cancelled")),
            user=self.artist,
        )

        assert updated.status == "cancelled"
        activities = SqlActivityRepository(self.engine).list_activities(user_id=self.artist.id, limit=10)
        assert sorted(a.action for a in activities) == ["cancelled", "scheduled"]

    def test_explicit_empty_notes_clear_existing_notes(self):
        booking = self._create(self.artist)
        use_case = UpdateBookingUseCase(transaction_port=self.runner, activity_logger=self.logger)
        use_case.execute(
            UpdateBookingInput(booking_id=booking.id, changes=BookingChanges(notes="Bring demos", notes_set=True)),
            user=self.artist,
        )

        untouched = use_case.execute(
            UpdateBookingInput(booking_id=booking.id, changes=BookingChanges(status="completed")),
            user=self.artist,
        )
        cleared = use_case.execute(
            UpdateBookingInput(booking_id=booking.id, changes=BookingChanges(notes=None, notes_set=True)),
            user=self.artist,
        )

        assert untouched.notes == "Bring demos"
        assert cleared.notes is None
        assert cleared.status == "completed"

    def test_other_artist_cannot_update_booking(self):
        booking = self._create(self.artist)
        use_case = UpdateBookingUseCase(transaction_port=self.runner, activity_logger=self.logger)

        with pytest.raises(ForbiddenError):
            use_case.execute(
                UpdateBookingInput(booking_id=booking.id, changes=BookingChanges(status="cancelled")),
                user=self.other,
            )

        assert SqlBookingsRepository(self.engine).get_booking(booking_id=booking.id).status == "scheduled"

    def test_unknown_booking_raises_not_found(self):
        use_case = UpdateBookingUseCase(transaction_port=self.runner, activity_logger=self.logger)

        with pytest.raises(BookingNotFoundError):
            use_case.execute(
                UpdateBookingInput(booking_id="missing", changes=BookingChanges(status="cancelled")),
                user=self.artist,
            )
