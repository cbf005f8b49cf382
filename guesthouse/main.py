import logging

from fastapi import FastAPI

from guesthouse.api.book_room import router as book_room_router
from guesthouse.api.booking_surface import router as booking_surface_router
from guesthouse.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "booking_id", "status", "field", "error", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging() -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


configure_logging()

app = FastAPI(title=f"{settings.BUSINESS_NAME} Booking", version="1.0.0")

app.include_router(booking_surface_router, tags=["booking"])
app.include_router(book_room_router, tags=["book-room"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
