from .base_entity import BaseEntity
from .user import User
from .project import Project

__all__ = ["BaseEntity", "User", "Project"]
