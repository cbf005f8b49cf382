from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from guesthouse.api.schemas import BookingRequestSchema
from guesthouse.wiring.dependencies import get_mock_booking_endpoint


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/book-room")
async def book_room(request: Request) -> JSONResponse:
    """Development stand-in for the booking service; answers with the agreed JSON contract."""
    body = await request.body()
    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.exception("Failed to parse booking request body")
        return JSONResponse(status_code=400, content={"message": "Invalid booking request"})

    try:
        booking = BookingRequestSchema.model_validate(payload)
    except ValidationError as e:
        logger.warning("Booking request rejected", extra={"error": str(e)})
        return JSONResponse(status_code=400, content={"message": "Invalid booking request"})

    result = get_mock_booking_endpoint().submit(booking.model_dump(mode="json", by_alias=True))
    return JSONResponse(status_code=result.status_code, content=result.body)
