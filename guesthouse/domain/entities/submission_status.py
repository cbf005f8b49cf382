from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SubmissionState(str, Enum):
    idle = "idle"
    in_progress = "in_progress"
    succeeded = "succeeded"
    failed = "failed"


class StatusTone(str, Enum):
    none = "none"
    info = "info"
    success = "success"
    error = "error"


@dataclass(frozen=True)
class SubmissionStatus:
    state: SubmissionState = SubmissionState.idle
    message: str = ""
    booking_id: str | None = None  # set only when state is succeeded

    @property
    def tone(self) -> StatusTone:
        if self.state == SubmissionState.succeeded:
            return StatusTone.success
        if self.state == SubmissionState.failed:
            return StatusTone.error
        if self.state == SubmissionState.in_progress:
            return StatusTone.info
        # idle carries a message only after a rejected validation pass
        return StatusTone.error if self.message else StatusTone.none

    @property
    def is_in_progress(self) -> bool:
        return self.state == SubmissionState.in_progress
