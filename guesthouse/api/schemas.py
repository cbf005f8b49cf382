from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from guesthouse.domain.entities.booking_draft import BookingDraft, RoomType
from guesthouse.domain.entities.form_view import BookingFormView
from guesthouse.domain.entities.submission_status import StatusTone, SubmissionState


class BookingRequestSchema(BaseModel):
    """Wire contract accepted by POST /api/book-room."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(min_length=1)
    email: str = Field(pattern=r"\S+@\S+\.\S+")
    check_in: date = Field(alias="checkIn")
    check_out: date = Field(alias="checkOut")
    room_type: RoomType = Field(alias="roomType")
    guests: int = Field(ge=1)

    @model_validator(mode="after")
    def check_dates(self) -> "BookingRequestSchema":
        if self.check_in >= self.check_out:
            raise ValueError("checkOut must be after checkIn")
        return self


class DraftSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    check_in: str = Field(alias="checkIn")
    check_out: str = Field(alias="checkOut")
    room_type: RoomType = Field(alias="roomType")
    guests: int | float

    @classmethod
    def from_draft(cls, draft: BookingDraft) -> "DraftSchema":
        return cls(
            name=draft.name,
            email=draft.email,
            check_in=draft.check_in,
            check_out=draft.check_out,
            room_type=draft.room_type,
            guests=draft.guests,
        )


class StatusSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    state: SubmissionState
    message: str
    tone: StatusTone
    booking_id: str | None = Field(default=None, alias="bookingId")


class FormViewSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    is_open: bool = Field(alias="isOpen")
    draft: DraftSchema
    errors: dict[str, str] = Field(default_factory=dict)
    status: StatusSchema

    @classmethod
    def from_view(cls, session_id: str, view: BookingFormView) -> "FormViewSchema":
        return cls(
            session_id=session_id,
            is_open=view.is_open,
            draft=DraftSchema.from_draft(view.draft),
            errors=view.errors,
            status=StatusSchema(
                state=view.status.state,
                message=view.message,
                tone=view.tone,
                booking_id=view.status.booking_id,
            ),
        )


class FieldUpdateSchema(BaseModel):
    field: str
    value: str
