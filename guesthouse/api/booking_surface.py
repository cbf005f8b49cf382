from fastapi import APIRouter, Depends, HTTPException

from guesthouse.api.schemas import FieldUpdateSchema, FormViewSchema
from guesthouse.application.exceptions import InvalidFieldValueError, UnknownFieldError
from guesthouse.application.ports.session_store import SessionStorePort
from guesthouse.application.use_cases.booking_form import BookingFormController
from guesthouse.wiring.dependencies import get_session_store

router = APIRouter(prefix="/booking/sessions")


def _controller(session_id: str, store: SessionStorePort) -> BookingFormController:
    controller = store.get(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="Booking session not found")
    return controller


@router.post("", response_model=FormViewSchema, status_code=201)
def create_session(store: SessionStorePort = Depends(get_session_store)):
    session_id, controller = store.create()
    controller.open_session()
    return FormViewSchema.from_view(session_id, controller.view())


@router.get("/{session_id}", response_model=FormViewSchema)
def get_session(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    controller = _controller(session_id, store)
    return FormViewSchema.from_view(session_id, controller.view())


@router.patch("/{session_id}/fields", response_model=FormViewSchema)
def update_field(
    session_id: str,
    req: FieldUpdateSchema,
    store: SessionStorePort = Depends(get_session_store),
):
    controller = _controller(session_id, store)
    try:
        controller.update_field(req.field, req.value)
    except (UnknownFieldError, InvalidFieldValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return FormViewSchema.from_view(session_id, controller.view())


@router.post("/{session_id}/submit", response_model=FormViewSchema)
def submit(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    controller = _controller(session_id, store)
    controller.submit()
    return FormViewSchema.from_view(session_id, controller.view())


@router.post("/{session_id}/open", response_model=FormViewSchema)
def open_session(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    controller = _controller(session_id, store)
    controller.open_session()
    return FormViewSchema.from_view(session_id, controller.view())


@router.post("/{session_id}/close", response_model=FormViewSchema)
def close_session(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    controller = _controller(session_id, store)
    controller.close_session()
    return FormViewSchema.from_view(session_id, controller.view())


@router.delete("/{session_id}", status_code=204)
def discard_session(session_id: str, store: SessionStorePort = Depends(get_session_store)) -> None:
    controller = _controller(session_id, store)
    controller.close_session()
    store.discard(session_id)
