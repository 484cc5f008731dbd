"""Error taxonomy surfaced to API callers."""


class PantryPilotError(Exception):
    """Base error carrying a human-readable message and an HTTP status."""

    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(PantryPilotError):
    """A referenced item, meal or ingredient does not exist."""

    http_status = 404


class ValidationFailure(PantryPilotError):
    """A required field is missing or invalid."""

    http_status = 400


class UnauthorizedError(PantryPilotError):
    """The caller identity is missing or invalid."""

    http_status = 401


class ForbiddenError(PantryPilotError):
    """The caller does not own the requested resource."""

    http_status = 403


class BackendFailure(PantryPilotError):
    """The underlying store rejected or failed an operation."""

    http_status = 500
