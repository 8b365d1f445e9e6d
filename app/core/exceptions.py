"""
Service error taxonomy.

Every fault that reaches the HTTP boundary is one of these, rendered as a
status code plus a ``{"message": ...}`` body by the handlers in
``app.api.errors``.
"""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(ServiceError):
    """Missing, malformed, or expired bearer token."""

    status_code = 401
    default_message = "unauthorized access"


class Forbidden(ServiceError):
    """Authenticated principal is not entitled to the resource."""

    status_code = 403
    default_message = "Unauthorized access"


class NotFound(ServiceError):
    """Referenced entity does not exist."""

    status_code = 404
    default_message = "Not found"


class StoreUnavailable(ServiceError):
    """Document store could not be reached."""

    status_code = 500
    default_message = "Internal server error"
