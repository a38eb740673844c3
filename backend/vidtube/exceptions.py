"""Domain errors raised by services and translated to responses in main."""

from fastapi import status


class AppError(Exception):
    """Base error carrying an HTTP status, a machine kind and a display message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind: str = "internal_error"
    default_message: str = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgumentError(AppError):
    """Malformed identifier or missing/empty required field."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "invalid_argument"
    default_message = "Invalid request"


class AuthenticationError(AppError):
    """Missing or invalid access token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "unauthorized"
    default_message = "Unauthorized request"


class ForbiddenError(AppError):
    """Authenticated actor may not mutate this resource."""

    status_code = status.HTTP_403_FORBIDDEN
    kind = "forbidden"
    default_message = "You do not have permission to modify this resource"


class PolicyViolationError(ForbiddenError):
    """Action forbidden by a relationship rule (e.g. subscribing to yourself)."""

    kind = "policy_violation"
    default_message = "This action is not allowed"


class NotFoundError(AppError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"
    default_message = "Resource not found"


class StoreUnavailableError(AppError):
    """Transient database failure. Safe for the caller to retry."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    kind = "store_unavailable"
    default_message = "Storage is temporarily unavailable, please retry"
