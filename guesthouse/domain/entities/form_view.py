from __future__ import annotations

from dataclasses import dataclass, field

from guesthouse.domain.entities.booking_draft import BookingDraft
from guesthouse.domain.entities.submission_status import StatusTone, SubmissionStatus


@dataclass(frozen=True)
class BookingFormView:
    is_open: bool
    draft: BookingDraft
    status: SubmissionStatus
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return self.status.message

    @property
    def tone(self) -> StatusTone:
        return self.status.tone

    def field_error(self, field_name: str) -> str | None:
        return self.errors.get(field_name)

    def has_error(self, field_name: str) -> bool:
        return field_name in self.errors
