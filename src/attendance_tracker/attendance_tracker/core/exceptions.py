class DomainError(Exception):
    """Base exception for attendance draft failures."""


class ValidationError(DomainError):
    """Raised when a local precondition fails; no request is sent."""


class GatewayError(DomainError):
    """Base for failures talking to the backend API."""


class TransportError(GatewayError):
    """Raised when no usable response reached us (network, timeout, bad body)."""


class ServerRejection(GatewayError):
    """Raised when the backend answered with a non-success status."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
