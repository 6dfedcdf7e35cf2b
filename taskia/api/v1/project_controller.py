"""
Project Controller
==================

FastAPI controller for project management endpoints.
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from taskia.api.v1.dependencies import get_project_service
from taskia.api.v1.responses import (
    exists_response,
    id_mismatch_response,
    ids_differ,
    missing_value_response,
    to_response,
)
from taskia.application.dto.common_dto import ExistsResponse, ResultResponse
from taskia.application.dto.project_dto import CreateProjectRequest, ProjectDto, UpdateProjectRequest
from taskia.application.services.project_service import ProjectService

router = APIRouter(tags=["projects"])


@router.post(
    "",
    response_model=ResultResponse[ProjectDto],
    summary="Create a project",
    description="""
    Create a project owned by an existing, active user.

    The name must not be used by another active project (case-insensitive).
    Status defaults to Draft.
    """,
)
def create_project(
    request: CreateProjectRequest,
    service: ProjectService = Depends(get_project_service),
):
    return to_response(service.create(request))


@router.get("", response_model=ResultResponse[List[ProjectDto]], summary="List active projects")
def list_projects(service: ProjectService = Depends(get_project_service)):
    return to_response(service.get_all())


@router.get("/search/name", response_model=ResultResponse[List[ProjectDto]], summary="Search projects by name")
def search_by_name(
    name: Optional[str] = Query(None),
    service: ProjectService = Depends(get_project_service),
):
    return to_response(service.find_by_name(name or ""))


@router.get("/search/status", response_model=ResultResponse[List[ProjectDto]], summary="List projects by status")
def search_by_status(
    status: Optional[str] = Query(None),
    service: ProjectService = Depends(get_project_service),
):
    return to_response(service.find_by_status(status or ""))


@router.get("/check-name", response_model=ExistsResponse, summary="Check whether a project name is taken")
def check_name(
    name: Optional[str] = Query(None),
    service: ProjectService = Depends(get_project_service),
):
    if not name or not name.strip():
        return missing_value_response("Name is required")
    exists = service.name_exists(name)
    return exists_response(exists, "Project name already registered" if exists else "Project name available")


@router.get("/by-user/{user_id}", response_model=ResultResponse[List[ProjectDto]], summary="List a user's projects")
def list_user_projects(user_id: UUID, service: ProjectService = Depends(get_project_service)):
    return to_response(service.get_by_user(str(user_id)))


@router.get("/{project_id}", response_model=ResultResponse[ProjectDto], summary="Get a project")
def get_project(project_id: UUID, service: ProjectService = Depends(get_project_service)):
    return to_response(service.get_by_id(str(project_id)))


@router.put("/{project_id}", response_model=ResultResponse[ProjectDto], summary="Update a project")
def update_project(
    project_id: UUID,
    request: UpdateProjectRequest,
    service: ProjectService = Depends(get_project_service),
):
    if ids_differ(str(project_id), request.id):
        return id_mismatch_response()
    return to_response(service.update(str(project_id), request))


@router.delete("/{project_id}", response_model=ResultResponse, summary="Deactivate a project")
def delete_project(project_id: UUID, service: ProjectService = Depends(get_project_service)):
    return to_response(service.delete(str(project_id)))


@router.patch(
    "/{project_id}/status",
    response_model=ResultResponse[ProjectDto],
    summary="Toggle a project between Active and Inactive",
)
def toggle_project_status(project_id: UUID, service: ProjectService = Depends(get_project_service)):
    return to_response(service.toggle_status(str(project_id)))
