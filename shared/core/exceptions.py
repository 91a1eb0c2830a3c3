from typing import Any, Optional

from fastapi import status

from shared.utils.app_status_code import AppStatusCode


class AppException(Exception):
    """Base class for errors surfaced to API callers."""

    http_status: int = status.HTTP_400_BAD_REQUEST
    status_code: str = AppStatusCode.OPERATION_FAILED

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppException):
    """Malformed or out-of-range input, raised before any write."""

    http_status = status.HTTP_400_BAD_REQUEST
    status_code = AppStatusCode.INVALID_INPUT


class NotFoundError(AppException):
    http_status = status.HTTP_404_NOT_FOUND
    status_code = AppStatusCode.NOT_FOUND


class ConflictError(AppException):
    http_status = status.HTTP_409_CONFLICT
    status_code = AppStatusCode.DUPLICATE_ADD_ERROR


class InsufficientStockError(AppException):
    http_status = status.HTTP_400_BAD_REQUEST
    status_code = AppStatusCode.INSUFFICIENT_STOCK


class AuthError(AppException):
    http_status = status.HTTP_401_UNAUTHORIZED
    status_code = AppStatusCode.AUTHENTICATION_TOKEN_INVALID


class StorageError(AppException):
    """The database call failed for infrastructure reasons. Never retried."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    status_code = AppStatusCode.STORAGE_ERROR
