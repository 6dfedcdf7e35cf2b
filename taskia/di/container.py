# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings
from ..infrastructure.db.mongo_connection import MongoClientManager
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    ProjectProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings and database connections (DatabaseProvider)
    2. Unit of work and repositories (RepositoryProvider) - depend on database
    3. Services (UserProvider, ProjectProvider, AuthProvider) - depend on repositories

    Only settings and the Mongo client are shared; the unit of work,
    repositories and services are built fresh for every request.
    """

    def __init__(
        self,
        mongo_client: Optional[MongoClientManager] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        super().__init__()
        self._mongo_client = mongo_client
        self._settings = settings
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self, mongo_client=self._mongo_client, settings=self._settings)
        RepositoryProvider.register(self)
        UserProvider.register(self)
        ProjectProvider.register(self)
        AuthProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
