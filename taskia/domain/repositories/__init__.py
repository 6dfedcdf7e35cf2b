from .repository import Repository
from .user_repository import UserRepository
from .project_repository import ProjectRepository
from .unit_of_work import UnitOfWork

__all__ = ["Repository", "UserRepository", "ProjectRepository", "UnitOfWork"]
