import logging

from guesthouse.core.config import settings
from guesthouse.application.ports.booking_endpoint import BookingEndpointPort
from guesthouse.application.ports.session_store import SessionStorePort
from guesthouse.application.use_cases.booking_form import BookingFormController
from guesthouse.infrastructure.booking.http_booking_endpoint import HttpBookingEndpoint
from guesthouse.infrastructure.booking.mock_booking_endpoint import MockBookingEndpoint
from guesthouse.infrastructure.store.memory_session_store import MemorySessionStore


_mock_endpoint: MockBookingEndpoint | None = None
_http_endpoint: HttpBookingEndpoint | None = None
_session_store: MemorySessionStore | None = None


def get_mock_booking_endpoint() -> MockBookingEndpoint:
    global _mock_endpoint
    if _mock_endpoint is None:
        _mock_endpoint = MockBookingEndpoint()
    return _mock_endpoint


def get_booking_endpoint() -> BookingEndpointPort:
    logger = logging.getLogger(__name__)
    if not settings.BOOKING_ENDPOINT_URL:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockBookingEndpoint (BOOKING_ENDPOINT_URL missing, ENV=dev/local)")
            return get_mock_booking_endpoint()
        raise ValueError("BOOKING_ENDPOINT_URL is required to submit bookings.")

    global _http_endpoint
    if _http_endpoint is None:
        logger.info("Using HttpBookingEndpoint url=%s", settings.BOOKING_ENDPOINT_URL)
        _http_endpoint = HttpBookingEndpoint(
            endpoint_url=settings.BOOKING_ENDPOINT_URL,
            timeout_seconds=settings.BOOKING_TIMEOUT_SECONDS,
        )
    return _http_endpoint


def get_session_store() -> SessionStorePort:
    global _session_store
    if _session_store is None:
        _session_store = MemorySessionStore(
            endpoint=get_booking_endpoint(),
            max_sessions=settings.BOOKING_MAX_SESSIONS,
        )
    return _session_store


def get_booking_form_controller() -> BookingFormController:
    return BookingFormController(endpoint=get_booking_endpoint())
