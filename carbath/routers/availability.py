# carbath/routers/availability.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..dependencies import get_slot_registry
from ..schemas.availability import AvailabilityQuery, AvailabilityResponse
from ..services.slots import SlotRegistry
from ..services.validation import AVAILABILITY_VALIDATOR
from ..utils.request import InvalidJSONBody, invalid_fields, read_json

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/check-availability", tags=["availability"])


@router.post("")
async def check_availability(
    request: Request,
    registry: SlotRegistry = Depends(get_slot_registry),
):
    """Read-only check: is the (date, time, location) slot free?"""
    try:
        data = await read_json(request)
    except InvalidJSONBody:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

    result = AVAILABILITY_VALIDATOR.validate(data)
    if not result.ok:
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields", "missing": result.missing},
        )

    try:
        query = AvailabilityQuery.model_validate(data)
    except ValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid field values", "missing": invalid_fields(e)},
        )

    try:
        available = registry.is_available(query.date, query.time, query.location)
    except Exception:
        logger.exception("Availability check error")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to check availability", "available": False},
        )

    response = AvailabilityResponse(
        available=available,
        date=query.date,
        time=query.time,
        location=query.location,
        message="Time slot is available" if available else "Time slot is already booked",
    )
    return JSONResponse(status_code=200, content=response.model_dump())


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def availability_method_not_allowed():
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
    )
