"""
Exception Handlers
==================

Application-wide handlers registered on the FastAPI app.

- Request validation errors become a 400 failure envelope.
- Anything unhandled becomes a 500 problem body; the exception text
  is only shown in development.
"""
import logging
import traceback
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskia.application.dto.common_dto import ProblemDetails
from taskia.core.config import Settings
from taskia.domain.common.result import Result

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"
GENERIC_ERROR_DETAIL = "An unexpected error occurred. Please try again later."

_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}
_VALUE_ERROR_PREFIX = "Value error, "


def _format_error(error: Dict[str, Any]) -> str:
    """Render one pydantic error as ``"field: message"``."""
    message = str(error.get("msg", "Invalid value"))
    if message.startswith(_VALUE_ERROR_PREFIX):
        message = message[len(_VALUE_ERROR_PREFIX):]

    location = [str(part) for part in error.get("loc", ()) if str(part) not in _LOCATION_ROOTS]
    if not location:
        return message
    return f"{'.'.join(location)}: {message}"


def validation_errors(exc: RequestValidationError) -> List[str]:
    return [_format_error(error) for error in exc.errors()]


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = validation_errors(exc)
        logger.info(f"Validation failed for {request.method} {request.url.path}: {errors}")
        result = Result.failure(VALIDATION_FAILED_MESSAGE, errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=jsonable_encoder(result.to_dict()))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        if settings.is_development:
            detail = f"{exc}\n{''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}"
        else:
            detail = GENERIC_ERROR_DETAIL
        problem = ProblemDetails(
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            title="An internal server error occurred",
            detail=detail,
            instance=request.url.path,
        )
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=problem.model_dump())
