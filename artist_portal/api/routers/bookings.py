from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from artist_portal.api.deps import (
    get_create_booking_use_case,
    get_list_bookings_use_case,
    get_update_booking_use_case,
    require_auth,
)
from artist_portal.api.schemas.bookings import (
    BookingEnvelopeResponse,
    BookingResponse,
    BookingsResponse,
    CreateBookingRequest,
    UpdateBookingRequest,
)
from artist_portal.api.schemas.common import from_entity
from artist_portal.application.dto.bookings import BookingChanges, CreateBookingInput, UpdateBookingInput
from artist_portal.application.use_cases.create_booking import CreateBookingUseCase
from artist_portal.application.use_cases.list_bookings import ListBookingsUseCase
from artist_portal.application.use_cases.update_booking import UpdateBookingUseCase
from artist_portal.domain.entities.user import User
from artist_portal.domain.exceptions import BookingNotFoundError, ForbiddenError


router = APIRouter()


@router.get("/api/bookings", response_model=BookingsResponse)
def list_bookings(
    status: str | None = Query(default=None, max_length=40),
    upcoming: bool = False,
    current_user: User = Depends(require_auth),
    use_case: ListBookingsUseCase = Depends(get_list_bookings_use_case),
):
    bookings = use_case.execute(user=current_user, status=status or None, upcoming=upcoming)
    return BookingsResponse(bookings=[from_entity(BookingResponse, item) for item in bookings])


@router.post("/api/bookings", response_model=BookingEnvelopeResponse)
def create_booking(
    req: CreateBookingRequest,
    current_user: User = Depends(require_auth),
    use_case: CreateBookingUseCase = Depends(get_create_booking_use_case),
):
    booking = use_case.execute(
        CreateBookingInput(
            session_type=req.session_type,
            title=req.title,
            description=req.description,
            start_at=req.start_at,
            end_at=req.end_at,
        ),
        user=current_user,
    )
    return BookingEnvelopeResponse(
        message="Booking scheduled",
        booking=from_entity(BookingResponse, booking),
    )


@router.patch("/api/bookings/{booking_id}", response_model=BookingEnvelopeResponse)
def update_booking(
    booking_id: str,
    req: UpdateBookingRequest,
    current_user: User = Depends(require_auth),
    use_case: UpdateBookingUseCase = Depends(get_update_booking_use_case),
):
    changes = BookingChanges(
        status=req.status,
        start_at=req.start_at,
        end_at=req.end_at,
        notes=req.notes,
        notes_set="notes" in req.model_fields_set,
    )
    try:
        booking = use_case.execute(UpdateBookingInput(booking_id=booking_id, changes=changes), user=current_user)
    except BookingNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    return BookingEnvelopeResponse(
        message="Booking cancelled" if req.status == "cancelled" else "Booking updated",
        booking=from_entity(BookingResponse, booking),
    )
