"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider
from .project_provider import ProjectProvider
from .auth_provider import AuthProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "ProjectProvider",
    "AuthProvider",
]
