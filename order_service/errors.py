"""
API error model. Every failure the service reports is an ApiError subclass;
the exception handlers in main turn them into {"message": ..., "details": ...} responses.
"""
from fastapi import status


class ApiError(Exception):
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, details: dict[str, list[str]] | None = None):
        if message is not None:
            self.message = message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"message": self.message, "details": self.details}


class NotFoundError(ApiError):
    """The addressed order does not exist."""
    http_status = status.HTTP_404_NOT_FOUND
    message = "Order not found"

    def __init__(self):
        super().__init__()


class BadRequestError(ApiError):
    """Body or path parameter could not be decoded."""
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")


class ValidationFailedError(ApiError):
    """Decoded DTO broke one or more field rules. field_errors: field -> messages."""
    http_status = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, field_errors: dict[str, list[str]]):
        self.field_errors = field_errors
        super().__init__(details=field_errors)


class InternalError(ApiError):
    def __init__(self):
        super().__init__()
