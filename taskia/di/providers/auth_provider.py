from typing import TYPE_CHECKING

from ...application.services.auth_service import AuthService
from ...domain.repositories.unit_of_work import UnitOfWork
from ...domain.repositories.user_repository import UserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Auth service provider - registers authentication services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register AuthService as a per-request factory.
        Service and repository share one unit of work.
        """
        def auth_service_factory() -> AuthService:
            unit_of_work = container.get(UnitOfWork)
            return AuthService(
                user_repository=container.get(UserRepository, unit_of_work=unit_of_work),
                unit_of_work=unit_of_work,
            )

        container.register_factory(AuthService, auth_service_factory)
