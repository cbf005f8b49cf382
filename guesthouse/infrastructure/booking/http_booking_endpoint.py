from __future__ import annotations

import logging
from typing import Any

import httpx

from guesthouse.application.exceptions import BookingContractError, BookingTransportError
from guesthouse.application.ports.booking_endpoint import BookingEndpointPort, EndpointResponse
from guesthouse.core.config import settings


class HttpBookingEndpoint(BookingEndpointPort):
    def __init__(
        self,
        endpoint_url: str | None = None,
        timeout_seconds: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url or settings.BOOKING_ENDPOINT_URL
        timeout = timeout_seconds if timeout_seconds is not None else settings.BOOKING_TIMEOUT_SECONDS
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

        if not self._endpoint_url:
            raise ValueError("BOOKING_ENDPOINT_URL is required for the HTTP booking endpoint")

    def submit(self, payload: dict[str, Any]) -> EndpointResponse:
        try:
            resp = self._client.post(
                self._endpoint_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            self._logger.error("Booking endpoint timed out", extra={"error": str(e)})
            raise BookingTransportError("Booking endpoint timed out") from e
        except httpx.HTTPError as e:
            self._logger.error("Booking endpoint unreachable", extra={"error": str(e)})
            raise BookingTransportError(f"Booking endpoint unreachable: {e}") from e

        try:
            body = resp.json()
        except ValueError as e:
            self._logger.error(
                "Booking endpoint returned non-JSON body",
                extra={"status": resp.status_code, "error": str(e)},
            )
            raise BookingContractError("Booking endpoint returned non-JSON body") from e

        if not isinstance(body, dict):
            raise BookingContractError("Booking endpoint returned a non-object JSON body")

        if resp.is_error:
            self._logger.warning(
                "Booking endpoint rejected request",
                extra={"status": resp.status_code, "reason": body.get("message")},
            )

        return EndpointResponse(ok=resp.is_success, status_code=resp.status_code, body=body)

    def close(self) -> None:
        self._client.close()
