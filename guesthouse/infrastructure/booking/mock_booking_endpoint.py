from __future__ import annotations

import logging
from typing import Any

from guesthouse.application.ports.booking_endpoint import BookingEndpointPort, EndpointResponse
from guesthouse.domain.entities.booking_draft import RoomType


class MockBookingEndpoint(BookingEndpointPort):
    """In-process stand-in for the booking service used in dev/local runs."""

    def __init__(self, unavailable_room_types: set[RoomType] | None = None) -> None:
        self._accepted: dict[str, dict[str, Any]] = {}
        self._unavailable = set(unavailable_room_types or ())
        self._logger = logging.getLogger(__name__)

    @property
    def accepted(self) -> dict[str, dict[str, Any]]:
        return dict(self._accepted)

    def submit(self, payload: dict[str, Any]) -> EndpointResponse:
        room_type = payload.get("roomType")
        if room_type in {r.value for r in self._unavailable}:
            self._logger.info("Mock booking rejected", extra={"reason": "room_unavailable"})
            return EndpointResponse(ok=False, status_code=409, body={"message": "Room unavailable"})

        booking_id = f"BK-{len(self._accepted) + 1}"
        self._accepted[booking_id] = dict(payload)
        self._logger.info("Mock booking accepted", extra={"booking_id": booking_id})
        return EndpointResponse(ok=True, status_code=201, body={"bookingId": booking_id})
