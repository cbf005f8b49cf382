"""
Tests for the httpx booking endpoint adapter.
"""

from __future__ import annotations

import json

import httpx
import pytest

from guesthouse.application.exceptions import BookingContractError, BookingTransportError
from guesthouse.infrastructure.booking.http_booking_endpoint import HttpBookingEndpoint

URL = "http://booking.test/api/book-room"
PAYLOAD = {
    "name": "Amani Otieno",
    "email": "amani@example.com",
    "checkIn": "2025-06-01",
    "checkOut": "2025-06-05",
    "roomType": "standard",
    "guests": 1,
}


def _endpoint(handler) -> HttpBookingEndpoint:
    client = httpx.Client(transport=httpx.MockTransport(handler), timeout=5.0)
    return HttpBookingEndpoint(endpoint_url=URL, client=client)


def test_posts_json_payload_and_returns_ok_response():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"bookingId": "BK-42"})

    response = _endpoint(handler).submit(PAYLOAD)

    assert response.ok is True
    assert response.status_code == 201
    assert response.body == {"bookingId": "BK-42"}
    assert seen == {"method": "POST", "url": URL, "body": PAYLOAD}


def test_error_status_returns_not_ok_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, json={"message": "Room unavailable"})

    response = _endpoint(handler).submit(PAYLOAD)

    assert response.ok is False
    assert response.status_code == 409
    assert response.body["message"] == "Room unavailable"


def test_connect_error_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(BookingTransportError):
        _endpoint(handler).submit(PAYLOAD)


def test_timeout_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(BookingTransportError):
        _endpoint(handler).submit(PAYLOAD)


def test_non_json_body_raises_contract_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(BookingContractError):
        _endpoint(handler).submit(PAYLOAD)


def test_non_object_json_body_raises_contract_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["BK-42"])

    with pytest.raises(BookingContractError):
        _endpoint(handler).submit(PAYLOAD)


def test_missing_url_is_rejected(monkeypatch):
    from guesthouse.core.config import settings

    monkeypatch.setattr(settings, "BOOKING_ENDPOINT_URL", None)
    with pytest.raises(ValueError):
        HttpBookingEndpoint(client=httpx.Client())
