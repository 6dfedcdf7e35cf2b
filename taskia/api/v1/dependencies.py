"""
Dependency Container
====================

FastAPI dependencies resolving services from the DI container.
Services are built per request; tests replace ``get_container`` through
``app.dependency_overrides``.
"""
from fastapi import Depends

from taskia.application.services.auth_service import AuthService
from taskia.application.services.project_service import ProjectService
from taskia.application.services.user_service import UserService
from taskia.di.container import DIContainer, get_container
from taskia.infrastructure.db.mongo_connection import MongoClientManager


def get_user_service(container: DIContainer = Depends(get_container)) -> UserService:
    """
    Get a user service for the current request.

    Returns:
        UserService instance with its own unit of work
    """
    return container.get(UserService)


def get_project_service(container: DIContainer = Depends(get_container)) -> ProjectService:
    """
    Get a project service for the current request.

    Returns:
        ProjectService instance with its own unit of work
    """
    return container.get(ProjectService)


def get_auth_service(container: DIContainer = Depends(get_container)) -> AuthService:
    """
    Get an auth service for the current request.

    Returns:
        AuthService instance with its own unit of work
    """
    return container.get(AuthService)


def get_mongo_client_manager(container: DIContainer = Depends(get_container)) -> MongoClientManager:
    return container.get("mongo_client")
