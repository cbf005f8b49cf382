from __future__ import annotations

import math
import re
from datetime import date

from guesthouse.domain.entities.booking_draft import BookingDraft, BookingField

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

NAME_REQUIRED = "Name is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Email is invalid"
CHECK_IN_REQUIRED = "Check-in date is required"
CHECK_OUT_REQUIRED = "Check-out date is required"
CHECK_OUT_NOT_AFTER_CHECK_IN = "Check-out date must be after check-in date"
GUESTS_TOO_FEW = "Number of guests must be at least 1"


def validate(draft: BookingDraft) -> dict[str, str]:
    """
    Validate a draft snapshot. Returns field wire name -> message; empty when valid.
    Every rule runs, so one field's error never hides another's.
    """
    errors: dict[str, str] = {}

    if not draft.name.strip():
        errors[BookingField.guest_name.value] = NAME_REQUIRED

    if not draft.email.strip():
        errors[BookingField.email.value] = EMAIL_REQUIRED
    elif not EMAIL_PATTERN.search(draft.email):
        errors[BookingField.email.value] = EMAIL_INVALID

    if not draft.check_in:
        errors[BookingField.check_in.value] = CHECK_IN_REQUIRED
    if not draft.check_out:
        errors[BookingField.check_out.value] = CHECK_OUT_REQUIRED

    if draft.check_in and draft.check_out:
        check_in = _parse_iso_date(draft.check_in)
        check_out = _parse_iso_date(draft.check_out)
        if check_in and check_out and check_in >= check_out:
            errors[BookingField.check_out.value] = CHECK_OUT_NOT_AFTER_CHECK_IN

    if draft.guests < 1:
        errors[BookingField.guests.value] = GUESTS_TOO_FEW

    return errors


def parse_guests(raw_value: str | int | float) -> int | float:
    """
    Parse a raw guests input. Whole numbers come back as int, fractional ones as float;
    blank, non-numeric or non-finite input becomes 0.
    """
    if isinstance(raw_value, (int, float)) and not isinstance(raw_value, bool):
        number = raw_value
    else:
        try:
            number = float(str(raw_value).strip())
        except ValueError:
            return 0
    if not math.isfinite(number):
        return 0
    if float(number).is_integer():
        return int(number)
    return number


def _parse_iso_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
