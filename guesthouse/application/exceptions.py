
class BookingTransportError(RuntimeError):
    """Raised when the booking endpoint cannot be reached (timeouts, network errors, refused connections)."""
    pass


class BookingContractError(RuntimeError):
    """Raised when the booking endpoint answers with a body that is not the agreed JSON shape."""
    pass


class UnknownFieldError(ValueError):
    """Raised when an edit names a field the booking draft does not have."""
    pass


class InvalidFieldValueError(ValueError):
    """Raised when an edit carries a value the field can never hold (e.g. an unknown room type)."""
    pass
