"""Application services: the Result-returning entry points used by the API."""
from taskia.application.services.auth_service import AuthService
from taskia.application.services.project_service import ProjectService
from taskia.application.services.user_service import UserService

__all__ = ["AuthService", "ProjectService", "UserService"]
