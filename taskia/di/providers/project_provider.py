from typing import TYPE_CHECKING

from ...application.services.project_service import ProjectService
from ...domain.repositories.unit_of_work import UnitOfWork
from ...domain.repositories.project_repository import ProjectRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProjectProvider:
    """Project service provider - registers project-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register ProjectService as a per-request factory.
        Service and repository share one unit of work.
        """
        def project_service_factory() -> ProjectService:
            unit_of_work = container.get(UnitOfWork)
            return ProjectService(
                project_repository=container.get(ProjectRepository, unit_of_work=unit_of_work),
                unit_of_work=unit_of_work,
            )

        container.register_factory(ProjectService, project_service_factory)
