#!/usr/bin/env python3
"""
Interactive local booking form (console surface, no browser).

Usage:
  python3 scripts/book_local.py

What it does:
- Opens one booking session against the configured endpoint
  (in-process mock unless BOOKING_ENDPOINT_URL is set)
- Forwards your edits, submit and close gestures to BookingFormController
- Re-renders the form, field errors and status line after every change
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from guesthouse.application.exceptions import InvalidFieldValueError, UnknownFieldError
from guesthouse.core.config import settings
from guesthouse.domain.entities.booking_draft import BookingField, RoomType
from guesthouse.domain.entities.form_view import BookingFormView
from guesthouse.domain.entities.submission_status import StatusTone
from guesthouse.main import configure_logging
from guesthouse.wiring.dependencies import get_booking_form_controller

_TONE_MARKS = {
    StatusTone.none: "",
    StatusTone.info: "…",
    StatusTone.success: "✅",
    StatusTone.error: "❌",
}

_LABELS = {
    BookingField.guest_name: "Full Name",
    BookingField.email: "Email",
    BookingField.check_in: "Check-in Date",
    BookingField.check_out: "Check-out Date",
    BookingField.room_type: "Room Type",
    BookingField.guests: "Number of Guests",
}


def _print_help() -> None:
    print("Commands:")
    print("  set <field> <value>   fields: " + ", ".join(f.value for f in BookingField))
    print("  rooms                 list room types")
    print("  submit                confirm booking")
    print("  open / close          open or close the booking form")
    print("  /help, /quit")


def _render(view: BookingFormView) -> None:
    print("-" * 60)
    if not view.is_open:
        print(f"{settings.BUSINESS_NAME}: booking form closed (type 'open' to book)")
        print("-" * 60)
        return

    print(f"Book Your Stay at {settings.BUSINESS_NAME}")
    if view.message:
        mark = _TONE_MARKS[view.tone]
        print(f"{mark} {view.message}".strip())

    payload = view.draft.to_payload()
    for booking_field in BookingField:
        value = payload[booking_field.value]
        if booking_field == BookingField.room_type:
            value = RoomType(value).label
        line = f"  {_LABELS[booking_field]:<18} [{booking_field.value}] {value}"
        error = view.field_error(booking_field.value)
        if error:
            line += f"   <- {error}"
        print(line)
    print("-" * 60)


def main() -> int:
    configure_logging()
    controller = get_booking_form_controller()
    controller.subscribe(_render)
    controller.open_session()
    _print_help()

    while True:
        try:
            raw = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        if not raw:
            continue
        if raw in {"/quit", "quit", "exit"}:
            controller.close_session()
            return 0
        if raw in {"/help", "help"}:
            _print_help()
            continue
        if raw == "rooms":
            for room in RoomType:
                print(f"  {room.value:<10} {room.label}")
            continue
        if raw == "open":
            controller.open_session()
            continue
        if raw == "close":
            controller.close_session()
            continue
        if raw == "submit":
            controller.submit()
            continue

        parts = raw.split(maxsplit=2)
        if parts[0] == "set" and len(parts) >= 2:
            value = parts[2] if len(parts) == 3 else ""
            try:
                controller.update_field(parts[1], value)
            except (UnknownFieldError, InvalidFieldValueError) as e:
                print(f"⚠️  {e}")
            continue

        print("Unknown command. Type /help.")


if __name__ == "__main__":
    raise SystemExit(main())
