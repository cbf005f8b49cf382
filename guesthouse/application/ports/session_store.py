from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from guesthouse.application.use_cases.booking_form import BookingFormController


class SessionStorePort(ABC):
    @abstractmethod
    def create(self) -> tuple[str, "BookingFormController"]:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> "BookingFormController | None":
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> bool:
        raise NotImplementedError
