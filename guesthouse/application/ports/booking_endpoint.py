from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EndpointResponse:
    ok: bool
    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


class BookingEndpointPort(ABC):
    @abstractmethod
    def submit(self, payload: dict[str, Any]) -> EndpointResponse:
        """
        Send one booking request. Returns the decoded response.
        Raises BookingTransportError when the endpoint is unreachable and
        BookingContractError when the response body is not a JSON object.
        """
        raise NotImplementedError
