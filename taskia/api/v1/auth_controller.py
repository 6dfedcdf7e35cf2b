"""
Auth Controller
===============

FastAPI controller for login and first-access password rotation.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from taskia.api.v1.dependencies import get_auth_service
from taskia.api.v1.responses import exists_response, missing_value_response, to_response
from taskia.application.dto.auth_dto import ChangePasswordFirstAccessRequest, LoginRequest, LoginResponse
from taskia.application.dto.common_dto import ExistsResponse, ResultResponse
from taskia.application.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=ResultResponse[LoginResponse],
    summary="Log in with CPF and password",
    description="""
    Check a CPF/password pair.

    On first access the password is the birth date (ddMMyyyy) and the
    response flags ``is_first_access`` so the client can ask for a new one.
    """,
)
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return to_response(service.login(request))


@router.post(
    "/change-password-first-access",
    response_model=ResultResponse[LoginResponse],
    summary="Replace the default password",
)
def change_password_first_access(
    request: ChangePasswordFirstAccessRequest,
    service: AuthService = Depends(get_auth_service),
):
    return to_response(service.change_password_first_access(request))


@router.get("/check-cpf", response_model=ExistsResponse, summary="Check whether a CPF is registered")
def check_cpf(
    cpf: Optional[str] = Query(None),
    service: AuthService = Depends(get_auth_service),
):
    if not cpf or not cpf.strip():
        return missing_value_response("CPF is required")
    exists = service.cpf_exists(cpf)
    return exists_response(exists, "CPF already registered" if exists else "CPF available")
