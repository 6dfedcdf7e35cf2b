"""
User Controller
===============

FastAPI controller for user management endpoints.
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from taskia.api.v1.dependencies import get_user_service
from taskia.api.v1.responses import (
    exists_response,
    id_mismatch_response,
    ids_differ,
    missing_value_response,
    to_response,
)
from taskia.application.dto.common_dto import ExistsResponse, ResultResponse
from taskia.application.dto.user_dto import CreateUserRequest, UpdateUserRequest, UserDto
from taskia.application.services.user_service import UserService
from taskia.domain.common.result import Result

router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=ResultResponse[UserDto],
    summary="Create a user",
    description="""
    Register a new user.

    The account starts in first-access mode and its password is the
    birth date formatted as ddMMyyyy until it is changed.
    """,
)
def create_user(
    request: CreateUserRequest,
    service: UserService = Depends(get_user_service),
):
    return to_response(service.create(request))


@router.get("", response_model=ResultResponse[List[UserDto]], summary="List active users")
def list_users(service: UserService = Depends(get_user_service)):
    return to_response(service.get_all())


@router.get("/search", response_model=ResultResponse[List[UserDto]], summary="Find a user by e-mail")
def search_by_email(
    email: Optional[str] = Query(None),
    service: UserService = Depends(get_user_service),
):
    if not email or not email.strip():
        return to_response(Result.failure("Email is required"))
    return to_response(service.find_by_email(email))


@router.get("/check-email", response_model=ExistsResponse, summary="Check whether an e-mail is taken")
def check_email(
    email: Optional[str] = Query(None),
    service: UserService = Depends(get_user_service),
):
    if not email or not email.strip():
        return missing_value_response("Email is required")
    exists = service.email_exists(email)
    return exists_response(exists, "Email already registered" if exists else "Email available")


@router.get("/{user_id}", response_model=ResultResponse[UserDto], summary="Get a user")
def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return to_response(service.get_by_id(str(user_id)))


@router.put("/{user_id}", response_model=ResultResponse[UserDto], summary="Update a user's profile")
def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    service: UserService = Depends(get_user_service),
):
    """Update name and phone. A body ``id`` must match the path."""
    if ids_differ(str(user_id), request.id):
        return id_mismatch_response()
    return to_response(service.update(str(user_id), request))


@router.delete("/{user_id}", response_model=ResultResponse, summary="Deactivate a user")
def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return to_response(service.delete(str(user_id)))
