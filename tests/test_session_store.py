"""
Tests for the in-memory booking session store and endpoint wiring.
"""

from __future__ import annotations

import pytest

from guesthouse.infrastructure.booking.http_booking_endpoint import HttpBookingEndpoint
from guesthouse.infrastructure.booking.mock_booking_endpoint import MockBookingEndpoint
from guesthouse.infrastructure.store.memory_session_store import MemorySessionStore
from guesthouse.wiring import dependencies


def test_store_evicts_oldest_session_past_capacity():
    store = MemorySessionStore(endpoint=MockBookingEndpoint(), max_sessions=3)
    ids = []
    for _ in range(5):
        session_id, controller = store.create()
        controller.open_session()
        ids.append(session_id)

    assert len(store) == 3
    assert store.get(ids[0]) is None
    assert store.get(ids[1]) is None
    assert all(store.get(session_id) is not None for session_id in ids[2:])


def test_recently_used_session_survives_eviction():
    store = MemorySessionStore(endpoint=MockBookingEndpoint(), max_sessions=2)
    first, _ = store.create()
    second, _ = store.create()

    assert store.get(first) is not None
    store.create()

    assert store.get(first) is not None
    assert store.get(second) is None


def test_discard_removes_session():
    store = MemorySessionStore(endpoint=MockBookingEndpoint())
    session_id, _ = store.create()
    assert store.discard(session_id) is True
    assert store.discard(session_id) is False
    assert len(store) == 0


def test_store_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        MemorySessionStore(endpoint=MockBookingEndpoint(), max_sessions=0)


def test_http_endpoint_is_built_once(monkeypatch):
    monkeypatch.setattr(dependencies.settings, "BOOKING_ENDPOINT_URL", "http://booking.test/api/book-room")
    monkeypatch.setattr(dependencies, "_http_endpoint", None)

    first = dependencies.get_booking_endpoint()
    second = dependencies.get_booking_endpoint()

    assert isinstance(first, HttpBookingEndpoint)
    assert first is second
    first.close()


def test_missing_url_outside_dev_is_a_configuration_error(monkeypatch):
    monkeypatch.setattr(dependencies.settings, "BOOKING_ENDPOINT_URL", None)
    monkeypatch.setattr(dependencies.settings, "ENV", "prod")

    with pytest.raises(ValueError):
        dependencies.get_booking_endpoint()
