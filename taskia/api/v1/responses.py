"""Mapping of service outcomes to HTTP responses."""
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from taskia.application.dto.common_dto import ExistsResponse
from taskia.domain.common.result import Result

ID_MISMATCH_MESSAGE = "URL ID differs from request body ID"


def to_response(result: Result) -> JSONResponse:
    """200 with the envelope on success, 400 on failure."""
    status_code = status.HTTP_200_OK if result.is_success else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=jsonable_encoder(result.to_dict()))


def id_mismatch_response() -> JSONResponse:
    return to_response(Result.failure(ID_MISMATCH_MESSAGE))


def ids_differ(path_id: str, body_id) -> bool:
    """True when the body carries an ID other than the one in the path."""
    return body_id is not None and body_id.strip().lower() != path_id.lower()


def exists_response(exists: bool, message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content=ExistsResponse(exists=exists, message=message).model_dump())


def missing_value_response(message: str) -> JSONResponse:
    """400 answer of a check endpoint called without a value."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ExistsResponse(exists=False, message=message).model_dump(),
    )
