# carbath/routers/bookings.py
"""
Booking form endpoints.

POST   /bookings              - validate, reserve slot, email the business
GET    /bookings/{booking_id} - look up a reservation
DELETE /bookings/{booking_id} - cancel a reservation (frees the slot)
"""

import logging
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..config import Settings
from ..dependencies import get_mailer, get_settings, get_slot_registry
from ..schemas.bookings import (
    BookingCancelled,
    BookingConfirmation,
    BookingConflict,
    BookingSubmission,
    ReservationRead,
)
from ..services.notifications import SmtpMailer, build_booking_email
from ..services.slots import SlotRegistry
from ..services.validation import BOOKING_VALIDATOR
from ..utils.request import InvalidJSONBody, invalid_fields, read_json

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("")
async def create_booking(
    request: Request,
    registry: SlotRegistry = Depends(get_slot_registry),
    mailer: SmtpMailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    try:
        data = await read_json(request)
    except InvalidJSONBody:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

    result = BOOKING_VALIDATOR.validate(data)
    if not result.ok:
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields", "missing": result.missing},
        )

    try:
        submission = BookingSubmission.model_validate(data)
    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid field values", "missing": invalid_fields(e)},
        )

    booking_id = str(uuid4())
    request.state.booking_id = booking_id
    slot_date = submission.preferred_date
    slot_time = submission.preferred_time
    location = submission.location

    if settings.enforce_slot_availability:
        reservation = registry.try_reserve(slot_date, slot_time, location, booking_id)
        if reservation is None:
            logger.info(f"Slot conflict: {registry.slot_key(slot_date, slot_time, location)}")
            conflict = BookingConflict(date=slot_date, time=slot_time, location=location)
            return JSONResponse(status_code=409, content=conflict.model_dump())
    else:
        registry.reserve(slot_date, slot_time, location, booking_id)

    logger.info(f"Slot reserved: {registry.slot_key(slot_date, slot_time, location)} -> {booking_id}")

    try:
        message = build_booking_email(submission, booking_id, settings)
        await run_in_threadpool(mailer.send, message)
    except Exception:
        logger.exception(f"Email error for booking {booking_id}")
        registry.remove(booking_id)
        return JSONResponse(status_code=500, content={"ok": False, "error": "Failed to send email"})

    confirmation = BookingConfirmation(
        booking_id=booking_id,
        date=slot_date,
        time=slot_time,
        location=location,
        message="Booking confirmed and email sent",
    )
    return JSONResponse(status_code=200, content=confirmation.model_dump(by_alias=True))


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def bookings_method_not_allowed():
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
    )


@router.get("/{booking_id}", response_model=ReservationRead)
def get_booking(
    booking_id: str,
    request: Request,
    registry: SlotRegistry = Depends(get_slot_registry),
):
    request.state.booking_id = booking_id
    reservation = registry.find_by_booking_id(booking_id)
    if reservation is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return ReservationRead(
        booking_id=reservation.booking_id,
        date=reservation.date,
        time=reservation.time,
        location=reservation.location,
        reserved_at=reservation.reserved_at,
    )


@router.delete("/{booking_id}", response_model=BookingCancelled)
def cancel_booking(
    booking_id: str,
    request: Request,
    registry: SlotRegistry = Depends(get_slot_registry),
):
    request.state.booking_id = booking_id
    if not registry.remove(booking_id):
        raise HTTPException(status_code=404, detail="Booking not found")

    logger.info(f"Booking cancelled: {booking_id}")

    return BookingCancelled(booking_id=booking_id)
