"""Service-layer exceptions."""


class InvalidStateError(Exception):
    """Raised when a run is resumed in a way its current status does not allow."""
