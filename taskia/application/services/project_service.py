"""
Project Service
===============

Application service that coordinates project-related operations.
"""
import logging
from typing import List

from taskia.application.dto.project_dto import CreateProjectRequest, ProjectDto, UpdateProjectRequest
from taskia.application.services.guard import guarded
from taskia.application.use_cases.project.create_project import CreateProjectUseCase
from taskia.application.use_cases.project.toggle_project_status import ToggleProjectStatusUseCase
from taskia.domain.common.result import Result
from taskia.domain.repositories.project_repository import ProjectRepository
from taskia.domain.repositories.unit_of_work import UnitOfWork
from taskia.domain.models.project import normalize_name

logger = logging.getLogger(__name__)


def _to_dtos(projects) -> List[ProjectDto]:
    return [ProjectDto.from_entity(project) for project in projects]


class ProjectService:
    """
    Application service for project operations.

    Project names are unique among active projects, compared trimmed and
    case-insensitively.
    """

    def __init__(self, project_repository: ProjectRepository, unit_of_work: UnitOfWork):
        self._repository = project_repository
        self._unit_of_work = unit_of_work
        self._create_use_case = CreateProjectUseCase(project_repository, unit_of_work)
        self._toggle_status_use_case = ToggleProjectStatusUseCase(project_repository, unit_of_work)

    @guarded("Error creating project")
    def create(self, request: CreateProjectRequest) -> Result[ProjectDto]:
        return self._create_use_case.execute(request)

    @guarded("Error getting project")
    def get_by_id(self, project_id: str) -> Result[ProjectDto]:
        project = self._repository.get_by_id(project_id)
        if project is None:
            return Result.failure(f"Project not found with ID {project_id}")
        return Result.success(ProjectDto.from_entity(project), "Project found")

    @guarded("Error listing projects")
    def get_all(self) -> Result[List[ProjectDto]]:
        projects = _to_dtos(self._repository.get_active_projects())
        return Result.success(projects, f"{len(projects)} project(s) found")

    @guarded("Error updating project")
    def update(self, project_id: str, request: UpdateProjectRequest) -> Result[ProjectDto]:
        """
        Update a project's descriptive fields, schedule and status.

        A new name must be free among the other active projects.
        """
        project = self._repository.get_by_id(project_id)
        if project is None:
            return Result.failure(f"Project not found with ID {project_id}")

        if not project.is_active:
            return Result.failure("Project is deactivated and cannot be updated")

        if normalize_name(request.name) != normalize_name(project.name):
            if self._repository.name_exists(request.name, exclude_id=project_id):
                return Result.failure("Project name already registered. Choose another name for the project.")

        project.update_info(
            name=request.name,
            objective=request.objective,
            description=request.description,
            start_date=request.start_date,
            end_date=request.end_date,
        )
        project.update_status(request.status)

        self._repository.update(project)
        self._unit_of_work.commit()

        logger.info(f"Project {project_id} updated")
        return Result.success(ProjectDto.from_entity(project), "Project updated successfully")

    @guarded("Error deleting project")
    def delete(self, project_id: str) -> Result[None]:
        project = self._repository.get_by_id(project_id)
        if project is None:
            return Result.failure(f"Project not found with ID {project_id}")

        if not project.is_active:
            return Result.success(message="Project is already deactivated")

        project.soft_delete()
        self._repository.update(project)
        self._unit_of_work.commit()

        logger.info(f"Project {project_id} deactivated")
        return Result.success(message="Project deactivated successfully")

    @guarded("Error searching projects by name")
    def find_by_name(self, name: str) -> Result[List[ProjectDto]]:
        """Partial, case-insensitive search over active projects, ordered by name."""
        if not name or not name.strip():
            return Result.failure("Name is required")
        projects = _to_dtos(self._repository.find_by_name(name))
        return Result.success(projects, f"{len(projects)} project(s) found")

    @guarded("Error searching projects by status")
    def find_by_status(self, status: str) -> Result[List[ProjectDto]]:
        if not status or not status.strip():
            return Result.failure("Status is required")
        projects = _to_dtos(self._repository.find_by_status(status.strip()))
        return Result.success(projects, f"{len(projects)} project(s) found")

    @guarded("Error listing user projects")
    def get_by_user(self, user_id: str) -> Result[List[ProjectDto]]:
        projects = _to_dtos(self._repository.get_by_user_id(user_id))
        return Result.success(projects, f"{len(projects)} project(s) found")

    @guarded("Error changing project status")
    def toggle_status(self, project_id: str) -> Result[ProjectDto]:
        return self._toggle_status_use_case.execute(project_id)

    def name_exists(self, name: str) -> bool:
        return self._repository.name_exists(name)
