"""
Dependency Injection
====================

Container and providers wiring infrastructure into application services.
"""
from .container import DIContainer, get_container

__all__ = ["DIContainer", "get_container"]
