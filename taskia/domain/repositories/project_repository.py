"""
Project Repository Interface
============================

Abstract interface for project data access.
"""
from abc import abstractmethod
from typing import List, Optional

from taskia.domain.models.project import Project
from taskia.domain.repositories.repository import Repository


class ProjectRepository(Repository[Project]):
    """
    Abstract repository for project persistence operations.

    Projects returned by this repository carry ``user_name`` loaded from
    the owning user.
    """

    @abstractmethod
    def find_by_name(self, name: str) -> List[Project]:
        """
        Find active projects whose name contains ``name``.

        Matching is case-insensitive; results are ordered by name.
        """
        pass

    @abstractmethod
    def find_by_status(self, status: str) -> List[Project]:
        """Find active projects with the given status, newest first."""
        pass

    @abstractmethod
    def name_exists(self, name: str, exclude_id: Optional[str] = None) -> bool:
        """
        Check if an active project already uses ``name``.

        Args:
            name: Project name (compared trimmed and case-insensitively)
            exclude_id: Project to ignore, used when renaming a project

        Returns:
            True if another active project has the name
        """
        pass

    @abstractmethod
    def get_active_projects(self) -> List[Project]:
        """Return active projects, newest first."""
        pass

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> List[Project]:
        """Return the active projects owned by a user, newest first."""
        pass

    @abstractmethod
    def user_exists(self, user_id: str) -> bool:
        """Check that the owning user exists and is active."""
        pass
