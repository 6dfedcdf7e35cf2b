"""
Project Model
=============

Domain model representing a project owned by a user.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from taskia.domain.constants.project_status import ProjectStatus
from taskia.domain.models.base_entity import BaseEntity


def normalize_name(name: str) -> str:
    """Form used for project name uniqueness."""
    return name.strip().lower()


@dataclass
class Project(BaseEntity):
    """
    Project domain model.

    ``status`` is the workflow state (Draft, Active, ...), independent of
    ``is_active`` which is the soft-delete flag. ``user_name`` is loaded
    with the project for display and is never persisted.
    """
    name: str = ""
    objective: Optional[str] = None
    description: Optional[str] = None
    status: str = ProjectStatus.DRAFT
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    user_id: str = ""
    user_name: Optional[str] = field(default=None, compare=False)

    def update_info(
        self,
        name: str,
        objective: Optional[str],
        description: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> None:
        """Update the descriptive fields and the schedule."""
        self.name = name
        self.objective = objective
        self.description = description
        self.start_date = start_date
        self.end_date = end_date
        self.touch()

    def update_status(self, status: str) -> None:
        """Change the status; unknown values are ignored."""
        if ProjectStatus.is_valid(status):
            self.status = status
            self.touch()

    def set_inactive(self) -> None:
        """Move the project to the Inactive status (the record stays active)."""
        self.status = ProjectStatus.INACTIVE
        self.touch()

