from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RoomType(str, Enum):
    standard = "standard"
    deluxe = "deluxe"
    family = "family"

    @property
    def label(self) -> str:
        return _ROOM_LABELS[self]


_ROOM_LABELS = {
    RoomType.standard: "Standard Room",
    RoomType.deluxe: "Deluxe Room",
    RoomType.family: "Family Suite",
}


class BookingField(str, Enum):
    """Closed set of editable draft fields, keyed by their wire names."""

    guest_name = "name"
    email = "email"
    check_in = "checkIn"
    check_out = "checkOut"
    room_type = "roomType"
    guests = "guests"

    @property
    def attribute(self) -> str:
        return _FIELD_ATTRIBUTES[self]


_FIELD_ATTRIBUTES = {
    BookingField.guest_name: "name",
    BookingField.email: "email",
    BookingField.check_in: "check_in",
    BookingField.check_out: "check_out",
    BookingField.room_type: "room_type",
    BookingField.guests: "guests",
}


@dataclass(frozen=True)
class BookingDraft:
    name: str = ""
    email: str = ""
    check_in: str = ""  # YYYY-MM-DD, "" when unset
    check_out: str = ""  # YYYY-MM-DD, "" when unset
    room_type: RoomType = RoomType.standard
    guests: int | float = 1

    def to_payload(self) -> dict[str, Any]:
        """JSON object sent to the booking endpoint."""
        return {
            BookingField.guest_name.value: self.name,
            BookingField.email.value: self.email,
            BookingField.check_in.value: self.check_in,
            BookingField.check_out.value: self.check_out,
            BookingField.room_type.value: self.room_type.value,
            BookingField.guests.value: self.guests,
        }
