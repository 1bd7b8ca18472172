from __future__ import annotations

from datetime import datetime

from pydantic import Field, model_validator

from artist_portal.domain.entities.booking import BookingStatus, SessionType

from .common import ApiModel, SuccessResponse


class BookingResponse(ApiModel):
    id: str
    user_id: str
    session_type: str
    title: str
    description: str | None = None
    start_at: datetime
    end_at: datetime
    status: str
    meeting_url: str | None = None
    notes: str | None = None
    created_at: datetime


class BookingsResponse(SuccessResponse):
    bookings: list[BookingResponse]


class CreateBookingRequest(ApiModel):
    session_type: SessionType
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    start_at: datetime
    end_at: datetime

    @model_validator(mode="after")
    def _check_window(self) -> "CreateBookingRequest":
        if self.end_at <= self.start_at:
            raise ValueError("endAt must be after startAt")
        return self


class UpdateBookingRequest(ApiModel):
    status: BookingStatus | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    notes: str | None = Field(default=None, max_length=5000)

    @model_validator(mode="after")
    def _check_window(self) -> "UpdateBookingRequest":
        if self.start_at is not None and self.end_at is not None and self.end_at <= self.start_at:
            raise ValueError("endAt must be after startAt")
        return self


class BookingEnvelopeResponse(SuccessResponse):
    message: str
    booking: BookingResponse
