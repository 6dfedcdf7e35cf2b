"""
Toggle Project Status Use Case
==============================

Flips a project between the Active and Inactive statuses.
"""
from taskia.application.dto.project_dto import ProjectDto
from taskia.domain.common.result import Result
from taskia.domain.constants.project_status import ProjectStatus
from taskia.domain.repositories.project_repository import ProjectRepository
from taskia.domain.repositories.unit_of_work import UnitOfWork


class ToggleProjectStatusUseCase:
    """
    Use case for toggling a project's status.

    An Active project becomes Inactive; any other status becomes Active.
    Soft-deleted projects cannot be toggled.
    """

    def __init__(self, project_repository: ProjectRepository, unit_of_work: UnitOfWork):
        self._repository = project_repository
        self._unit_of_work = unit_of_work

    def execute(self, project_id: str) -> Result[ProjectDto]:
        project = self._repository.get_by_id(project_id)
        if project is None:
            return Result.failure(f"Project not found. No project found with ID {project_id}")

        if not project.is_active:
            return Result.failure("Project is deactivated (deleted) and its status cannot be changed")

        if project.status == ProjectStatus.ACTIVE:
            project.set_inactive()
            message = "Project inactivated successfully"
        else:
            project.update_status(ProjectStatus.ACTIVE)
            message = "Project activated successfully"

        self._repository.update(project)
        self._unit_of_work.commit()

        return Result.success(ProjectDto.from_entity(project), message)
