from typing import TYPE_CHECKING

from ...application.services.user_service import UserService
from ...domain.repositories.unit_of_work import UnitOfWork
from ...domain.repositories.user_repository import UserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers user-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register UserService as a per-request factory.
        Service and repository share one unit of work.
        """
        def user_service_factory() -> UserService:
            unit_of_work = container.get(UnitOfWork)
            return UserService(
                user_repository=container.get(UserRepository, unit_of_work=unit_of_work),
                unit_of_work=unit_of_work,
            )

        container.register_factory(UserService, user_service_factory)
