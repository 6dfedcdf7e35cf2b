from .user_fields import UserFields
from .project_fields import ProjectFields
from .project_status import ProjectStatus

__all__ = ["UserFields", "ProjectFields", "ProjectStatus"]
