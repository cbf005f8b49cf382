from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from guesthouse.application.ports.booking_endpoint import BookingEndpointPort
from guesthouse.application.ports.session_store import SessionStorePort
from guesthouse.application.use_cases.booking_form import BookingFormController


class MemorySessionStore(SessionStorePort):
    def __init__(self, endpoint: BookingEndpointPort, max_sessions: int = 1000) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._endpoint = endpoint
        self._max_sessions = max_sessions
        # least recently touched first
        self._sessions: OrderedDict[str, BookingFormController] = OrderedDict()
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> tuple[str, BookingFormController]:
        session_id = uuid.uuid4().hex
        controller = BookingFormController(endpoint=self._endpoint, session_id=session_id)
        self._sessions[session_id] = controller
        while len(self._sessions) > self._max_sessions:
            evicted_id, evicted = self._sessions.popitem(last=False)
            evicted.close_session()
            self._logger.info("Booking session evicted", extra={"session_id": evicted_id, "reason": "capacity"})
        return session_id, controller

    def get(self, session_id: str) -> BookingFormController | None:
        controller = self._sessions.get(session_id)
        if controller is not None:
            self._sessions.move_to_end(session_id)
        return controller

    def discard(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None
