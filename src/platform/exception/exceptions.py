class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Local, field-level input error raised before any external call."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message, 400)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class TooManyRequestsError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 429)


class ExternalServiceError(CustomBaseError):
    """Account service or store failure, shown to the user as a generic message."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
