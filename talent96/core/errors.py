# talent96/core/errors.py
"""
Error taxonomy shared by services and routes.

Each error is an HTTPException with its status preset, so a service can raise
it and FastAPI renders ``{"detail": message}`` without extra mapping.
"""
from fastapi import HTTPException, status


class ServiceError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        super().__init__(status_code=self.status_code, detail=message or self.default_message)


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidInputError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class OtpError(ServiceError):
    # Wrong and expired codes look the same to the client
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid or expired OTP"


class ServerError(ServiceError):
    pass
