from rest_framework import status
from rest_framework.exceptions import APIException


class ApiError(APIException):
    """
    Base class for errors that are reported to the client as
    ``{"message": ..., "error": ...}``.
    """

    def __init__(self, message=None, error=None, status_code=None):
        super().__init__(detail=message)
        self.error = error
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request."
    default_code = "invalid"


class NotFoundError(ApiError):
    # Also used when the row exists but belongs to another user.
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


class AuthError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication failed."
    default_code = "auth_failed"


class UnexpectedError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "unexpected"
