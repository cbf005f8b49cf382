from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from guesthouse.application.exceptions import (
    BookingContractError,
    BookingTransportError,
    InvalidFieldValueError,
    UnknownFieldError,
)
from guesthouse.application.ports.booking_endpoint import BookingEndpointPort, EndpointResponse
from guesthouse.application.utils.validation import parse_guests, validate
from guesthouse.domain.entities.booking_draft import BookingDraft, BookingField, RoomType
from guesthouse.domain.entities.form_view import BookingFormView
from guesthouse.domain.entities.submission_status import SubmissionState, SubmissionStatus

CORRECT_ERRORS_MESSAGE = "Please correct the errors above."
IN_PROGRESS_MESSAGE = "Booking in progress..."
SUCCESS_MESSAGE = "Booking successful! We will contact you shortly. Booking ID: {booking_id}"
REJECTED_MESSAGE = "Booking failed: {message}"
CONNECTION_FAILED_MESSAGE = "Booking failed. Could not connect to the server. Please try again later."

Listener = Callable[[BookingFormView], None]


class BookingFormController:
    """
    Owns one booking draft together with its validation errors, submission
    status and visibility. Surfaces read state through view() or subscribe()
    and forward user gestures to the operations below.
    """

    def __init__(self, endpoint: BookingEndpointPort, session_id: str | None = None) -> None:
        self._endpoint = endpoint
        self._session_id = session_id
        self._is_open = False
        self._draft = BookingDraft()
        self._errors: dict[str, str] = {}
        self._status = SubmissionStatus()
        self._listeners: list[Listener] = []
        self._logger = logging.getLogger(__name__)

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def status(self) -> SubmissionStatus:
        return self._status

    def view(self) -> BookingFormView:
        return BookingFormView(
            is_open=self._is_open,
            draft=self._draft,
            status=self._status,
            errors=dict(self._errors),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with a fresh view after every change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def open_session(self) -> None:
        # Draft values are left alone; close_session is where they get cleared.
        self._is_open = True
        self._status = SubmissionStatus()
        self._errors = {}
        self._notify()

    def close_session(self) -> None:
        self._is_open = False
        self._draft = BookingDraft()
        self._notify()

    def update_field(self, field_name: BookingField | str, raw_value: str) -> BookingDraft:
        try:
            booking_field = BookingField(field_name)
        except ValueError:
            raise UnknownFieldError(f"Unknown booking field: {field_name!r}") from None

        value: object = raw_value
        if booking_field == BookingField.room_type:
            try:
                value = RoomType(raw_value)
            except ValueError:
                raise InvalidFieldValueError(f"Unknown room type: {raw_value!r}") from None
        elif booking_field == BookingField.guests:
            value = parse_guests(raw_value)

        self._draft = replace(self._draft, **{booking_field.attribute: value})
        self._notify()
        return self._draft

    def validate(self, draft: BookingDraft | None = None) -> dict[str, str]:
        return validate(draft if draft is not None else self._draft)

    def submit(self) -> SubmissionStatus:
        if self._status.is_in_progress:
            self._logger.warning(
                "Booking submit ignored, request already in flight",
                extra={"session_id": self._session_id, "reason": "in_progress"},
            )
            return self._status

        draft = self._draft
        errors = validate(draft)
        if errors:
            self._errors = errors
            self._status = SubmissionStatus(state=SubmissionState.idle, message=CORRECT_ERRORS_MESSAGE)
            self._logger.info(
                "Booking validation failed",
                extra={"session_id": self._session_id, "field": ",".join(sorted(errors))},
            )
            self._notify()
            return self._status

        self._errors = {}
        self._status = SubmissionStatus(state=SubmissionState.in_progress, message=IN_PROGRESS_MESSAGE)
        try:
            self._notify()
            response = self._endpoint.submit(draft.to_payload())
            self._status = self._interpret(response)
        except (BookingTransportError, BookingContractError) as e:
            self._logger.error(
                "Booking submission could not reach endpoint",
                extra={"session_id": self._session_id, "error": str(e)},
            )
            self._status = SubmissionStatus(state=SubmissionState.failed, message=CONNECTION_FAILED_MESSAGE)
        except Exception as e:
            # Any other fault still has to leave the session retryable.
            self._logger.exception(
                "Unexpected error during booking submission",
                extra={"session_id": self._session_id, "error": str(e)},
            )
            self._status = SubmissionStatus(state=SubmissionState.failed, message=CONNECTION_FAILED_MESSAGE)

        if self._status.state == SubmissionState.succeeded:
            self._errors = {}
        self._notify()
        return self._status

    def _interpret(self, response: EndpointResponse) -> SubmissionStatus:
        if response.ok:
            booking_id = response.body.get("bookingId")
            if booking_id is None:
                raise BookingContractError("Success response missing bookingId")
            booking_id = render_json_scalar(booking_id)
            self._logger.info(
                "Booking accepted",
                extra={"session_id": self._session_id, "booking_id": booking_id},
            )
            return SubmissionStatus(
                state=SubmissionState.succeeded,
                message=SUCCESS_MESSAGE.format(booking_id=booking_id),
                booking_id=booking_id,
            )

        message = response.body.get("message")
        if message is None:
            raise BookingContractError("Failure response missing message")
        self._logger.warning(
            "Booking rejected",
            extra={"session_id": self._session_id, "status": response.status_code, "reason": message},
        )
        return SubmissionStatus(
            state=SubmissionState.failed,
            message=REJECTED_MESSAGE.format(message=render_json_scalar(message)),
        )

    def _notify(self) -> None:
        if not self._listeners:
            return
        view = self.view()
        for listener in list(self._listeners):
            listener(view)


def render_json_scalar(value: object) -> str:
    """Render a decoded JSON value the way it reads in the response body (true, 42, 42.5)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
