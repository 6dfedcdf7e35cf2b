"""
Create Project Use Case
=======================

Business use case for creating a project owned by an active user.
"""
import logging

from taskia.application.dto.project_dto import CreateProjectRequest, ProjectDto
from taskia.domain.common.result import Result
from taskia.domain.models.project import Project
from taskia.domain.repositories.project_repository import ProjectRepository
from taskia.domain.repositories.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """Use case for creating a project."""

    def __init__(self, project_repository: ProjectRepository, unit_of_work: UnitOfWork):
        self._repository = project_repository
        self._unit_of_work = unit_of_work

    def execute(self, request: CreateProjectRequest) -> Result[ProjectDto]:
        """
        Execute the create project use case.

        Returns:
            Result with the stored project (owner name included), or a
            failure when the owner is missing/inactive or the name is taken
        """
        if not self._repository.user_exists(request.user_id):
            return Result.failure("User not found. Provide a valid user to create the project.")

        if self._repository.name_exists(request.name):
            return Result.failure("Project name already registered. Choose another name for the project.")

        project = Project(
            name=request.name,
            objective=request.objective,
            description=request.description,
            status=request.status,
            start_date=request.start_date,
            end_date=request.end_date,
            user_id=request.user_id,
        )

        self._repository.add(project)
        self._unit_of_work.commit()
        logger.info(f"Project {project.id} created for user {project.user_id}")

        # Reload to pick up the owner's name
        stored = self._repository.get_by_id(project.id) or project
        return Result.success(ProjectDto.from_entity(stored), "Project created successfully")
