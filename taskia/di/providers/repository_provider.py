from typing import TYPE_CHECKING, Optional

from ...core.config import Settings
from ...domain.repositories.project_repository import ProjectRepository
from ...domain.repositories.unit_of_work import UnitOfWork
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_project_repository import MongoProjectRepository
from ...infrastructure.db.mongo_unit_of_work import MongoUnitOfWork
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the unit of work and repository factories.

        Repositories accept the unit of work they stage into; when none is
        given they get a fresh one.
        """
        mongo_client = container.get("mongo_client")
        settings = container.get(Settings)

        def unit_of_work_factory() -> UnitOfWork:
            return MongoUnitOfWork(mongo_client, use_transactions=settings.mongo_transactions_enabled)

        def user_repository_factory(unit_of_work: Optional[UnitOfWork] = None) -> UserRepository:
            return MongoUserRepository(
                mongo_client,
                unit_of_work or unit_of_work_factory(),
                collection_name=settings.users_collection,
            )

        def project_repository_factory(unit_of_work: Optional[UnitOfWork] = None) -> ProjectRepository:
            return MongoProjectRepository(
                mongo_client,
                unit_of_work or unit_of_work_factory(),
                collection_name=settings.projects_collection,
                users_collection_name=settings.users_collection,
            )

        container.register_factory(UnitOfWork, unit_of_work_factory)
        container.register_factory(UserRepository, user_repository_factory)
        container.register_factory(ProjectRepository, project_repository_factory)
