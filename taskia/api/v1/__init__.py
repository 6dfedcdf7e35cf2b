"""
API v1 Package
===============

Version 1 API controllers.
"""
from .user_controller import router as user_router
from .project_controller import router as project_router
from .auth_controller import router as auth_router
from .health_controller import router as health_router

__all__ = ["user_router", "project_router", "auth_router", "health_router"]
