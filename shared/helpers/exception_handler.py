import logging
from typing import Dict, List

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from shared.core.exceptions import AppException, StorageError
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def flatten_validation_errors(errors) -> Dict[str, List[str]]:
    """Group pydantic error entries by field name, dropping the body/query prefix."""
    field_errors: Dict[str, List[str]] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ())
                    if part not in ("body", "query", "path")]
        field = ".".join(location) or "__root__"
        field_errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return field_errors


def failure_response(message: str, status_code: str, http_status: int, data=None) -> JSONResponse:
    wrapped = JsonOutResult(
        data=data,
        status="Failure",
        status_code=status_code,
        message=message
    ).model_dump()
    return JSONResponse(content=wrapped, status_code=http_status)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        if isinstance(exc, StorageError):
            logger.error("Storage failure on %s %s: %s",
                         request.method, request.url.path, exc.message)
        return failure_response(
            message=exc.message,
            status_code=exc.status_code,
            http_status=exc.http_status,
            data=exc.details,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return failure_response(
            message=str(exc.detail),
            status_code=str(exc.status_code),
            http_status=exc.status_code or 400,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return failure_response(
            message="Invalid request data",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400,
            data=flatten_validation_errors(exc.errors()),
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)
        return failure_response(
            message="An unexpected server error occurred",
            status_code=AppStatusCode.OPERATION_FAILED,
            http_status=500,
        )
